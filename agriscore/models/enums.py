"""Domain enum types shared by all record models.

Member names follow the Python convention; values are the upper-case codes
the platform stores and serialises (``PLANNED``, ``HIGH``, ...).
"""

from enum import StrEnum

# ── Crop reference enums ────────────────────────────────────────────────────


class CropTypeEnum(StrEnum):
    """Broad crop family."""

    cereals = "CEREALS"
    vegetables = "VEGETABLES"
    fruits = "FRUITS"
    legumes = "LEGUMES"
    tubers = "TUBERS"
    cash_crops = "CASH_CROPS"


class MarketDemandLevelEnum(StrEnum):
    low = "LOW"
    medium = "MEDIUM"
    high = "HIGH"


# ── Production enums ────────────────────────────────────────────────────────


class ProductionStatusEnum(StrEnum):
    """Production cycle stages, declared in lifecycle order."""

    planned = "PLANNED"
    planted = "PLANTED"
    growing = "GROWING"
    harvested = "HARVESTED"
    sold = "SOLD"


class ProductionMethodEnum(StrEnum):
    organic = "ORGANIC"
    conventional = "CONVENTIONAL"
    integrated = "INTEGRATED"


class SeasonEnum(StrEnum):
    season_a = "SEASON_A"
    season_b = "SEASON_B"
    season_c = "SEASON_C"
    off_season = "OFF_SEASON"


# ── Risk enums ──────────────────────────────────────────────────────────────


class RiskLevelEnum(StrEnum):
    """Operational production risk."""

    low = "LOW"
    medium = "MEDIUM"
    high = "HIGH"


class FoodSecurityRiskEnum(StrEnum):
    """Food-security risk, on its own four-bucket scale."""

    low = "LOW"
    medium = "MEDIUM"
    high = "HIGH"
    critical = "CRITICAL"


# ── Market enums ────────────────────────────────────────────────────────────


class MarketTypeEnum(StrEnum):
    wholesale = "WHOLESALE"
    retail = "RETAIL"
    farm_gate = "FARM_GATE"
    export = "EXPORT"
    commodity_exchange = "COMMODITY_EXCHANGE"


class PriceTrendEnum(StrEnum):
    increasing = "INCREASING"
    stable = "STABLE"
    decreasing = "DECREASING"


# ── Climate enums ───────────────────────────────────────────────────────────


class ClimateEventEnum(StrEnum):
    """Climate or biological event that caused an impact."""

    drought = "DROUGHT"
    flood = "FLOOD"
    extreme_heat = "EXTREME_HEAT"
    cold_wave = "COLD_WAVE"
    hail = "HAIL"
    strong_winds = "STRONG_WINDS"
    pest_outbreak = "PEST_OUTBREAK"
    disease_outbreak = "DISEASE_OUTBREAK"


class EventIntensityEnum(StrEnum):
    mild = "MILD"
    moderate = "MODERATE"
    severe = "SEVERE"
    extreme = "EXTREME"


# ── Inventory enums ─────────────────────────────────────────────────────────


class InventoryStatusEnum(StrEnum):
    available = "AVAILABLE"
    reserved = "RESERVED"
    in_transit = "IN_TRANSIT"
    sold = "SOLD"
    damaged = "DAMAGED"
    expired = "EXPIRED"
    disposed = "DISPOSED"
