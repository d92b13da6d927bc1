"""Crop reference and crop-production records.

``Crop`` carries the tolerance ranges used by the compatibility scorer;
``CropProduction`` is a single planting moving through the production cycle::

    PLANNED -> PLANTED -> GROWING -> HARVESTED -> SOLD

Date-relative helpers take ``today`` explicitly so callers (and tests) own
the clock.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import Field, model_validator

from agriscore.models.base import FOUR_PLACES, RecordModel, round_half_up
from agriscore.models.enums import (
    CropTypeEnum,
    MarketDemandLevelEnum,
    ProductionMethodEnum,
    ProductionStatusEnum,
    SeasonEnum,
)

_LIFECYCLE: list[ProductionStatusEnum] = list(ProductionStatusEnum)

# ═══════════════════════════════════════════════════════════════════════════
# Crop
# ═══════════════════════════════════════════════════════════════════════════


class Crop(RecordModel):
    """Agronomic reference: crop type + environmental tolerance ranges.

    Any bound may be absent, which leaves that side of the range open.
    ``rainfall_requirement`` is a single target value (mm/year) rather than
    a range.
    """

    id: str
    crop_name: str = ""
    crop_type: CropTypeEnum | None = None
    variety: str | None = None
    growing_period_days: int | None = Field(default=None, ge=0)
    planting_season: str | None = None
    harvest_season: str | None = None
    water_requirement: Decimal | None = None
    soil_ph_min: Decimal | None = None
    soil_ph_max: Decimal | None = None
    temperature_min: Decimal | None = None
    temperature_max: Decimal | None = None
    rainfall_requirement: Decimal | None = Field(default=None, ge=0)
    market_demand_level: MarketDemandLevelEnum = MarketDemandLevelEnum.medium
    storage_life_days: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _validate_ranges(self) -> "Crop":
        if (
            self.temperature_min is not None
            and self.temperature_max is not None
            and self.temperature_min > self.temperature_max
        ):
            raise ValueError("temperature_min must not exceed temperature_max")
        if (
            self.soil_ph_min is not None
            and self.soil_ph_max is not None
            and self.soil_ph_min > self.soil_ph_max
        ):
            raise ValueError("soil_ph_min must not exceed soil_ph_max")
        return self

    def __repr__(self) -> str:
        return f"<Crop id={self.id} name={self.crop_name!r} type={self.crop_type}>"


# ═══════════════════════════════════════════════════════════════════════════
# CropProduction
# ═══════════════════════════════════════════════════════════════════════════


class CropProduction(RecordModel):
    """A single planting of a crop on a farm.

    ``actual_yield`` is only expected once the production has reached
    HARVESTED.  ``production_status`` is optional so partially loaded rows
    can still be scored; the persistence layer creates rows as PLANNED.
    """

    id: str
    crop_id: str | None = None
    farm_id: str | None = None
    production_code: str | None = None
    planting_date: date | None = None
    expected_harvest_date: date | None = None
    actual_harvest_date: date | None = None
    area_planted: Decimal | None = Field(default=None, ge=0)
    expected_yield: Decimal | None = Field(default=None, ge=0)
    actual_yield: Decimal | None = Field(default=None, ge=0)
    total_production: Decimal | None = Field(default=None, ge=0)
    production_status: ProductionStatusEnum | None = None
    season: SeasonEnum | None = None
    year: int | None = None
    seed_variety: str | None = None
    seed_source: str | None = None
    production_method: ProductionMethodEnum | None = None
    certification: str | None = None

    # ── Lifecycle ────────────────────────────────────────────────────────

    def with_status(self, status: ProductionStatusEnum) -> CropProduction:
        """Return a copy advanced to ``status``; the cycle only moves forward."""
        current = self.production_status
        if current is not None and _LIFECYCLE.index(status) < _LIFECYCLE.index(current):
            raise ValueError(f"cannot move production from {current} back to {status}")
        return self.model_copy(update={"production_status": status})

    @property
    def is_harvested(self) -> bool:
        return self.production_status in (
            ProductionStatusEnum.harvested,
            ProductionStatusEnum.sold,
        )

    @property
    def is_active(self) -> bool:
        return self.production_status in (
            ProductionStatusEnum.planted,
            ProductionStatusEnum.growing,
        )

    @property
    def is_organic(self) -> bool:
        return self.production_method == ProductionMethodEnum.organic

    @property
    def has_certification(self) -> bool:
        return bool(self.certification and self.certification.strip())

    # ── Date-relative helpers ────────────────────────────────────────────

    def is_overdue(self, today: date) -> bool:
        return (
            self.expected_harvest_date is not None
            and today > self.expected_harvest_date
            and not self.is_harvested
        )

    def days_to_harvest(self, today: date) -> int | None:
        """Days until the expected harvest; 0 once harvested, None when unknown."""
        if self.expected_harvest_date is None:
            return None
        if self.is_harvested:
            return 0
        return (self.expected_harvest_date - today).days

    def days_since_planting(self, today: date) -> int:
        if self.planting_date is None:
            return 0
        return (today - self.planting_date).days

    # ── Yield helpers ────────────────────────────────────────────────────

    @property
    def yield_efficiency(self) -> Decimal | None:
        """Actual yield as a percentage of expected yield."""
        if self.expected_yield is None or self.actual_yield is None or self.expected_yield == 0:
            return None
        ratio = round_half_up(self.actual_yield / self.expected_yield, FOUR_PLACES)
        return ratio * 100

    @property
    def resolved_total_production(self) -> Decimal | None:
        """Actual yield × area once known, else the stored total, else expected yield × area."""
        if self.actual_yield is not None and self.area_planted is not None:
            return self.actual_yield * self.area_planted
        if self.total_production is not None:
            return self.total_production
        if self.expected_yield is not None and self.area_planted is not None:
            return self.expected_yield * self.area_planted
        return None

    def __repr__(self) -> str:
        return (
            f"<CropProduction id={self.id} crop={self.crop_id} "
            f"status={self.production_status}>"
        )
