"""Record model registry: application code can import every record from here::

    from agriscore.models import Crop, CropProduction, MarketPrice, ...
"""

# ── Base ────────────────────────────────────────────────────────────────────
from agriscore.models.base import RecordModel

# ── Crop reference & production ─────────────────────────────────────────────
from agriscore.models.crops import Crop, CropProduction

# ── Enums ───────────────────────────────────────────────────────────────────
from agriscore.models.enums import (
    ClimateEventEnum,
    CropTypeEnum,
    EventIntensityEnum,
    FoodSecurityRiskEnum,
    InventoryStatusEnum,
    MarketDemandLevelEnum,
    MarketTypeEnum,
    PriceTrendEnum,
    ProductionMethodEnum,
    ProductionStatusEnum,
    RiskLevelEnum,
    SeasonEnum,
)

# ── Measurement records ─────────────────────────────────────────────────────
from agriscore.models.records import ClimateImpact, InventoryItem, MarketPrice

__all__ = [
    "ClimateEventEnum",
    "ClimateImpact",
    # Crop reference & production
    "Crop",
    "CropProduction",
    # Enums
    "CropTypeEnum",
    "EventIntensityEnum",
    "FoodSecurityRiskEnum",
    "InventoryItem",
    "InventoryStatusEnum",
    "MarketDemandLevelEnum",
    # Measurement records
    "MarketPrice",
    "MarketTypeEnum",
    "PriceTrendEnum",
    "ProductionMethodEnum",
    "ProductionStatusEnum",
    # Base
    "RecordModel",
    "RiskLevelEnum",
    "SeasonEnum",
]
