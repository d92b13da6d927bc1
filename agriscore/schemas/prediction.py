"""Pydantic schemas for yield prediction and risk assessment results."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from agriscore.models.enums import FoodSecurityRiskEnum, RiskLevelEnum


class YieldPrediction(BaseModel):
	production_id: str
	predicted_yield: Decimal
	expected_yield: Decimal | None = None
	confidence: int = Field(ge=0, le=95)
	risk: RiskLevelEnum
	factors: list[str] = Field(default_factory=list)


class SecurityRiskAssessment(BaseModel):
	production_id: str
	risk_level: FoodSecurityRiskEnum
	indicators: list[str] = Field(default_factory=list)
	recommendations: list[str] = Field(default_factory=list)
	assessed_on: date
