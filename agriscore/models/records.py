"""Flat measurement records consumed by the statistics builder.

Each record has a numeric field of interest (price, economic loss,
quantity) and categorical fields used for grouping (market type, climate
event, quality grade).
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from pydantic import Field

from agriscore.models.base import RecordModel
from agriscore.models.enums import (
    ClimateEventEnum,
    EventIntensityEnum,
    InventoryStatusEnum,
    MarketTypeEnum,
    PriceTrendEnum,
    SeasonEnum,
)

RECENT_PRICE_DAYS = 7
OUTDATED_PRICE_DAYS = 30
RECENT_EVENT_DAYS = 30

# ═══════════════════════════════════════════════════════════════════════════
# MarketPrice
# ═══════════════════════════════════════════════════════════════════════════


class MarketPrice(RecordModel):
    """Observed price for a crop in one market on one day."""

    id: str
    crop_id: str | None = None
    market_name: str | None = None
    market_type: MarketTypeEnum | None = None
    location: str | None = None
    price_date: date | None = None
    price_per_kg: Decimal | None = Field(default=None, ge=0)
    quality_grade: str | None = None
    price_trend: PriceTrendEnum | None = None
    reliability_score: int | None = Field(default=None, ge=1, le=5)

    @property
    def is_reliable(self) -> bool:
        return self.reliability_score is not None and self.reliability_score >= 4

    def is_recent(self, today: date) -> bool:
        if self.price_date is None:
            return False
        return self.price_date > today - timedelta(days=RECENT_PRICE_DAYS)

    def is_outdated(self, today: date) -> bool:
        if self.price_date is None:
            return True
        return self.price_date < today - timedelta(days=OUTDATED_PRICE_DAYS)

    def __repr__(self) -> str:
        return (
            f"<MarketPrice id={self.id} crop={self.crop_id} "
            f"market={self.market_type} price={self.price_per_kg}>"
        )


# ═══════════════════════════════════════════════════════════════════════════
# ClimateImpact
# ═══════════════════════════════════════════════════════════════════════════


class ClimateImpact(RecordModel):
    """A recorded climate event and its agricultural and economic impact.

    Financial support (``insurance_payout``, ``government_assistance``,
    ``international_aid``) is compared against ``economic_loss`` to derive
    coverage.
    """

    id: str
    crop_id: str | None = None
    region: str | None = None
    district: str | None = None
    year: int | None = None
    season: SeasonEnum | None = None
    climate_event: ClimateEventEnum | None = None
    event_intensity: EventIntensityEnum | None = None
    event_start_date: date | None = None
    event_end_date: date | None = None
    affected_area: Decimal | None = Field(default=None, ge=0)
    affected_population: int | None = Field(default=None, ge=0)
    production_loss: Decimal | None = Field(default=None, ge=0)
    economic_loss: Decimal | None = Field(default=None, ge=0)
    recovery_cost: Decimal | None = Field(default=None, ge=0)
    insurance_payout: Decimal | None = Field(default=None, ge=0)
    government_assistance: Decimal | None = Field(default=None, ge=0)
    international_aid: Decimal | None = Field(default=None, ge=0)
    verified: bool = False
    emergency_response_required: bool = False

    @property
    def is_high_risk(self) -> bool:
        return self.event_intensity in (
            EventIntensityEnum.severe,
            EventIntensityEnum.extreme,
        )

    def is_ongoing(self, today: date) -> bool:
        if self.event_start_date is None:
            return False
        if self.event_end_date is None:
            return True
        return today <= self.event_end_date

    def is_recent(self, today: date) -> bool:
        if self.event_start_date is None:
            return False
        return (today - self.event_start_date).days <= RECENT_EVENT_DAYS

    def __repr__(self) -> str:
        return (
            f"<ClimateImpact id={self.id} event={self.climate_event} "
            f"region={self.region!r} year={self.year}>"
        )


# ═══════════════════════════════════════════════════════════════════════════
# InventoryItem
# ═══════════════════════════════════════════════════════════════════════════


class InventoryItem(RecordModel):
    """A stored lot of harvested produce."""

    id: str
    crop_id: str | None = None
    status: InventoryStatusEnum | None = None
    quality_grade: str | None = None
    current_quantity: Decimal | None = Field(default=None, ge=0)
    market_value_per_unit: Decimal | None = Field(default=None, ge=0)
    total_market_value: Decimal | None = Field(default=None, ge=0)
    expiry_date: date | None = None
    organic: bool = False

    @property
    def total_value(self) -> Decimal | None:
        if self.total_market_value is not None:
            return self.total_market_value
        if self.current_quantity is None or self.market_value_per_unit is None:
            return None
        return self.current_quantity * self.market_value_per_unit

    def expires_within(self, today: date, days: int) -> bool:
        if self.expiry_date is None:
            return False
        return today <= self.expiry_date <= today + timedelta(days=days)

    def __repr__(self) -> str:
        return (
            f"<InventoryItem id={self.id} crop={self.crop_id} "
            f"status={self.status} qty={self.current_quantity}>"
        )
