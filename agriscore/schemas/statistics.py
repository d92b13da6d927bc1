"""Pydantic schemas for aggregate statistics and domain reports."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class StatisticsSummary(BaseModel):
	"""Flat summary of one numeric field plus one categorical distribution.

	``count`` is the number of records seen; ``value_count`` is how many of
	them carried a numeric value and therefore fed ``total``/``average``.
	"""

	count: int = 0
	value_count: int = 0
	total: Decimal = Decimal("0")
	average: Decimal = Decimal("0")
	minimum: Decimal | None = None
	maximum: Decimal | None = None
	distribution: dict[str, int] = Field(default_factory=dict)


class GroupStatistics(BaseModel):
	count: int = 0
	average: Decimal = Decimal("0")
	minimum: Decimal | None = None
	maximum: Decimal | None = None


class MarketPriceReport(BaseModel):
	summary: StatisticsSummary
	by_market_type: dict[str, GroupStatistics] = Field(default_factory=dict)
	by_location: dict[str, GroupStatistics] = Field(default_factory=dict)
	trend_distribution: dict[str, int] = Field(default_factory=dict)
	reliable_prices: int = 0
	recent_prices: int = 0
	outdated_prices: int = 0
	reliability_percentage: Decimal = Decimal("0")
	recency_percentage: Decimal = Decimal("0")


class ClimateStatistics(BaseModel):
	current_year: int
	previous_year: int
	total_impacts: int = 0
	verified_impacts: int = 0
	unverified_impacts: int = 0
	current_year_impacts: int = 0
	previous_year_impacts: int = 0
	total_economic_loss: Decimal = Decimal("0")
	current_year_economic_loss: Decimal = Decimal("0")
	previous_year_economic_loss: Decimal = Decimal("0")
	average_economic_loss: Decimal = Decimal("0")
	total_affected_area: Decimal = Decimal("0")
	average_affected_area: Decimal = Decimal("0")
	high_risk_impacts: int = 0
	emergency_response_required: int = 0
	event_type_distribution: dict[str, int] = Field(default_factory=dict)
	regional_distribution: dict[str, int] = Field(default_factory=dict)
	economic_loss_by_event_type: dict[str, Decimal] = Field(default_factory=dict)
	verification_rate: Decimal | None = None
	year_over_year_growth_rate: Decimal | None = None
	economic_loss_growth_rate: Decimal | None = None
	high_risk_percentage: Decimal | None = None
	emergency_response_rate: Decimal | None = None
	financial_support_coverage: Decimal | None = None
	most_frequent_event: str | None = None
	most_affected_region: str | None = None


class InventoryStatistics(BaseModel):
	summary: StatisticsSummary
	status_distribution: dict[str, int] = Field(default_factory=dict)
	total_inventory_value: Decimal = Decimal("0")
	items_expiring_soon: int = 0
	organic_items: int = 0


class ProductionStatistics(BaseModel):
	summary: StatisticsSummary
	method_distribution: dict[str, int] = Field(default_factory=dict)
	total_area: Decimal = Decimal("0")
	total_production: Decimal = Decimal("0")
	average_yield_efficiency: Decimal | None = None
	organic_percentage: Decimal = Decimal("0")
