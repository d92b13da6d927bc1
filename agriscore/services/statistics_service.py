"""Aggregate statistics over in-memory record collections."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from agriscore.config import get_settings
from agriscore.models.base import round_half_up, to_decimal
from agriscore.models.crops import CropProduction
from agriscore.models.records import ClimateImpact, InventoryItem, MarketPrice
from agriscore.observability import instrumented
from agriscore.schemas.statistics import (
	ClimateStatistics,
	GroupStatistics,
	InventoryStatistics,
	MarketPriceReport,
	ProductionStatistics,
	StatisticsSummary,
)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def _field(record: Any, name: str) -> Any:
	if isinstance(record, Mapping):
		return record.get(name)
	return getattr(record, name, None)


def _category_key(value: Any) -> str:
	if isinstance(value, Enum):
		return str(value.value)
	return str(value)


def _values(records: Iterable[Any], value: str) -> list[Decimal]:
	numbers = (to_decimal(_field(record, value)) for record in records)
	return [number for number in numbers if number is not None]


def _average(values: list[Decimal]) -> Decimal:
	if not values:
		return _ZERO
	return round_half_up(sum(values, _ZERO) / len(values))


def _rate(numerator: Decimal | int | None, denominator: Decimal | int | None) -> Decimal | None:
	"""``numerator / denominator * 100`` or None when it cannot be computed."""
	if numerator is None or denominator is None or denominator <= 0:
		return None
	return round_half_up(Decimal(numerator) / Decimal(denominator) * _HUNDRED)


def percentage(part: Decimal | int, whole: Decimal | int) -> Decimal:
	rate = _rate(part, whole)
	return rate if rate is not None else round_half_up(_ZERO)


def most_frequent(distribution: Mapping[str, int]) -> str | None:
	"""Key with the highest count; the first-seen key wins ties."""
	if not distribution:
		return None
	return max(distribution.items(), key=lambda item: item[1])[0]


@instrumented("summarize")
def summarize(records: Iterable[Any], value: str, category: str | None = None) -> StatisticsSummary:
	"""Count/sum/average/min/max of ``value`` plus a ``category`` distribution.

	Records may be models, attribute objects or mappings.  A record with a
	null ``value`` is left out of the numeric statistics only; a record with a
	null ``category`` is left out of the distribution only.
	"""
	rows = list(records)
	numbers = _values(rows, value)

	distribution: Counter[str] = Counter()
	if category is not None:
		for row in rows:
			key = _field(row, category)
			if key is not None:
				distribution[_category_key(key)] += 1

	return StatisticsSummary(
		count=len(rows),
		value_count=len(numbers),
		total=sum(numbers, _ZERO),
		average=_average(numbers),
		minimum=min(numbers) if numbers else None,
		maximum=max(numbers) if numbers else None,
		distribution=dict(distribution),
	)


@instrumented("group_statistics")
def group_statistics(records: Iterable[Any], value: str, category: str) -> dict[str, GroupStatistics]:
	groups: dict[str, list[Any]] = defaultdict(list)
	for record in records:
		key = _field(record, category)
		if key is not None:
			groups[_category_key(key)].append(record)

	result: dict[str, GroupStatistics] = {}
	for key, members in groups.items():
		numbers = _values(members, value)
		result[key] = GroupStatistics(
			count=len(members),
			average=_average(numbers),
			minimum=min(numbers) if numbers else None,
			maximum=max(numbers) if numbers else None,
		)
	return result


# ── Domain reports ──────────────────────────────────────────────────────────


@instrumented("market_price_report")
def market_price_report(prices: Iterable[MarketPrice], today: date | None = None) -> MarketPriceReport:
	rows = list(prices)
	today = today or date.today()

	trends = summarize(rows, "price_per_kg", "price_trend").distribution
	reliable = sum(1 for price in rows if price.is_reliable)
	recent = sum(1 for price in rows if price.is_recent(today))
	outdated = sum(1 for price in rows if price.is_outdated(today))

	return MarketPriceReport(
		summary=summarize(rows, "price_per_kg", "market_type"),
		by_market_type=group_statistics(rows, "price_per_kg", "market_type"),
		by_location=group_statistics(rows, "price_per_kg", "location"),
		trend_distribution=trends,
		reliable_prices=reliable,
		recent_prices=recent,
		outdated_prices=outdated,
		reliability_percentage=percentage(reliable, len(rows)),
		recency_percentage=percentage(recent, len(rows)),
	)


@instrumented("climate_statistics")
def climate_statistics(impacts: Iterable[ClimateImpact], current_year: int | None = None) -> ClimateStatistics:
	rows = list(impacts)
	current_year = current_year or date.today().year
	previous_year = current_year - 1

	losses = summarize(rows, "economic_loss", "climate_event")
	areas = _values(rows, "affected_area")
	current_rows = [impact for impact in rows if impact.year == current_year]
	previous_rows = [impact for impact in rows if impact.year == previous_year]
	current_loss = sum(_values(current_rows, "economic_loss"), _ZERO)
	previous_loss = sum(_values(previous_rows, "economic_loss"), _ZERO)

	verified = sum(1 for impact in rows if impact.verified)
	high_risk = sum(1 for impact in rows if impact.is_high_risk)
	emergency = sum(1 for impact in rows if impact.emergency_response_required)
	regions = summarize(rows, "economic_loss", "region").distribution

	loss_by_event: dict[str, Decimal] = defaultdict(lambda: _ZERO)
	for impact in rows:
		if impact.climate_event is not None and impact.economic_loss is not None:
			loss_by_event[_category_key(impact.climate_event)] += impact.economic_loss

	support = sum(
		_values(rows, "insurance_payout")
		+ _values(rows, "government_assistance")
		+ _values(rows, "international_aid"),
		_ZERO,
	)

	total = len(rows)
	return ClimateStatistics(
		current_year=current_year,
		previous_year=previous_year,
		total_impacts=total,
		verified_impacts=verified,
		unverified_impacts=total - verified,
		current_year_impacts=len(current_rows),
		previous_year_impacts=len(previous_rows),
		total_economic_loss=losses.total,
		current_year_economic_loss=current_loss,
		previous_year_economic_loss=previous_loss,
		average_economic_loss=round_half_up(losses.total / total) if total else round_half_up(_ZERO),
		total_affected_area=sum(areas, _ZERO),
		average_affected_area=round_half_up(sum(areas, _ZERO) / total) if total else round_half_up(_ZERO),
		high_risk_impacts=high_risk,
		emergency_response_required=emergency,
		event_type_distribution=losses.distribution,
		regional_distribution=regions,
		economic_loss_by_event_type=dict(loss_by_event),
		verification_rate=_rate(verified, total),
		year_over_year_growth_rate=_rate(len(current_rows) - len(previous_rows), len(previous_rows)),
		economic_loss_growth_rate=_rate(current_loss - previous_loss, previous_loss),
		high_risk_percentage=_rate(high_risk, total),
		emergency_response_rate=_rate(emergency, total),
		financial_support_coverage=_rate(support, losses.total),
		most_frequent_event=most_frequent(losses.distribution),
		most_affected_region=most_frequent(regions),
	)


@instrumented("inventory_statistics")
def inventory_statistics(
	items: Iterable[InventoryItem],
	today: date | None = None,
	expiry_warning_days: int | None = None,
) -> InventoryStatistics:
	rows = list(items)
	today = today or date.today()
	if expiry_warning_days is None:
		expiry_warning_days = get_settings().inventory_expiry_warning_days

	values = [item.total_value for item in rows if item.total_value is not None]
	return InventoryStatistics(
		summary=summarize(rows, "current_quantity", "quality_grade"),
		status_distribution=summarize(rows, "current_quantity", "status").distribution,
		total_inventory_value=sum(values, _ZERO),
		items_expiring_soon=sum(1 for item in rows if item.expires_within(today, expiry_warning_days)),
		organic_items=sum(1 for item in rows if item.organic),
	)


@instrumented("production_statistics")
def production_statistics(productions: Iterable[CropProduction]) -> ProductionStatistics:
	rows = list(productions)
	efficiencies = [p.yield_efficiency for p in rows if p.yield_efficiency is not None]
	totals = [p.resolved_total_production for p in rows if p.resolved_total_production is not None]
	organic = sum(1 for p in rows if p.is_organic)

	return ProductionStatistics(
		summary=summarize(rows, "expected_yield", "production_status"),
		method_distribution=summarize(rows, "expected_yield", "production_method").distribution,
		total_area=sum(_values(rows, "area_planted"), _ZERO),
		total_production=sum(totals, _ZERO),
		average_yield_efficiency=_average(efficiencies) if efficiencies else None,
		organic_percentage=percentage(organic, len(rows)),
	)
