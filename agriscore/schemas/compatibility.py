"""Pydantic schemas for crop compatibility results."""

from __future__ import annotations

from pydantic import BaseModel, Field

from agriscore.models.crops import Crop


class ScoredCrop(BaseModel):
	crop: Crop
	score: float = Field(ge=0.0, le=1.0)
