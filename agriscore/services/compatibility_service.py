"""Crop/environment compatibility scoring and crop utilities."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from agriscore.models.base import to_decimal
from agriscore.models.crops import Crop
from agriscore.models.enums import CropTypeEnum
from agriscore.observability import instrumented
from agriscore.schemas.compatibility import ScoredCrop

Number = Decimal | float | int

RAINFALL_TOLERANCE = Decimal("0.2")
RECOMMENDATION_THRESHOLD = 0.5


def _within(value: Decimal, lower: Decimal | None, upper: Decimal | None) -> bool:
	if lower is None and upper is None:
		return True
	if lower is None:
		return value <= upper  # type: ignore[operator]
	if upper is None:
		return value >= lower
	return lower <= value <= upper


def is_temperature_suitable(crop: Crop, temperature: Number | None) -> bool:
	value = to_decimal(temperature)
	if value is None:
		return False
	return _within(value, crop.temperature_min, crop.temperature_max)


def is_ph_suitable(crop: Crop, ph: Number | None) -> bool:
	value = to_decimal(ph)
	if value is None:
		return False
	return _within(value, crop.soil_ph_min, crop.soil_ph_max)


def is_rainfall_suitable(crop: Crop, rainfall: Number | None) -> bool:
	"""Rainfall must fall inside ``requirement ± 20%`` (inclusive)."""
	value = to_decimal(rainfall)
	if value is None:
		return False
	required = crop.rainfall_requirement
	if required is None:
		return True
	tolerance = required * RAINFALL_TOLERANCE
	return required - tolerance <= value <= required + tolerance


@instrumented("compatibility_score")
def calculate_compatibility_score(
	crop: Crop,
	temperature: Number | None = None,
	ph: Number | None = None,
	rainfall: Number | None = None,
) -> float:
	"""Fraction of evaluated factors the conditions satisfy, in [0, 1].

	A factor is evaluated only when a reading was supplied AND the crop
	declares at least one bound for it; an unbounded factor is left out of
	both the numerator and the denominator.  Non-finite readings count as
	missing.
	"""
	temperature, ph, rainfall = to_decimal(temperature), to_decimal(ph), to_decimal(rainfall)
	checks: list[bool] = []
	if temperature is not None and (crop.temperature_min is not None or crop.temperature_max is not None):
		checks.append(is_temperature_suitable(crop, temperature))
	if ph is not None and (crop.soil_ph_min is not None or crop.soil_ph_max is not None):
		checks.append(is_ph_suitable(crop, ph))
	if rainfall is not None and crop.rainfall_requirement is not None:
		checks.append(is_rainfall_suitable(crop, rainfall))

	if not checks:
		return 0.0
	return sum(checks) / len(checks)


@instrumented("recommend_crops")
def recommend_crops(
	crops: Iterable[Crop],
	temperature: Number | None = None,
	ph: Number | None = None,
	rainfall: Number | None = None,
) -> list[ScoredCrop]:
	"""Crops scoring above the threshold, best first; ties keep input order."""
	scored = [
		ScoredCrop(crop=crop, score=calculate_compatibility_score(crop, temperature, ph, rainfall))
		for crop in crops
	]
	eligible = [item for item in scored if item.score > RECOMMENDATION_THRESHOLD]
	# sorted() is stable, so equal scores stay in input order
	return sorted(eligible, key=lambda item: item.score, reverse=True)


def rank_crops(
	crops: Iterable[Crop],
	temperature: Number | None = None,
	ph: Number | None = None,
	rainfall: Number | None = None,
) -> list[Crop]:
	return [item.crop for item in recommend_crops(crops, temperature, ph, rainfall)]


def filter_by_optimal_temperature(crops: Iterable[Crop], temperature: Number | None) -> list[Crop]:
	return [crop for crop in crops if is_temperature_suitable(crop, temperature)]


def average_growing_period(crops: Iterable[Crop]) -> float:
	periods = [crop.growing_period_days for crop in crops if crop.growing_period_days is not None]
	if not periods:
		return 0.0
	return sum(periods) / len(periods)


def group_by_type(crops: Iterable[Crop]) -> dict[CropTypeEnum, list[Crop]]:
	groups: dict[CropTypeEnum, list[Crop]] = defaultdict(list)
	for crop in crops:
		if crop.crop_type is None:
			continue
		groups[crop.crop_type].append(crop)
	return dict(groups)


def group_by_planting_season(crops: Iterable[Crop]) -> dict[str, list[Crop]]:
	groups: dict[str, list[Crop]] = defaultdict(list)
	for crop in crops:
		if crop.planting_season is None:
			continue
		groups[crop.planting_season].append(crop)
	return dict(groups)
