from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from agriscore.models.enums import (
	FoodSecurityRiskEnum,
	ProductionMethodEnum,
	ProductionStatusEnum,
	RiskLevelEnum,
)
from agriscore.services.prediction_service import food_security_level_for, risk_level_for

HARVESTED = ProductionStatusEnum.harvested


# ── Yield prediction ─────────────────────────────────────────────────────────


def test_predict_without_expected_yield_is_zero(estimator, make_production) -> None:
	production = make_production()
	assert estimator.predict_yield(production, []) == Decimal("0")


def test_predict_without_history_returns_expected(estimator, make_production) -> None:
	production = make_production(expected_yield=100)
	assert estimator.predict_yield(production, []) == Decimal("100")


def test_predict_blends_history_and_expected(estimator, make_production) -> None:
	production = make_production(expected_yield=100)
	sibling = make_production(actual_yield=80, production_status=HARVESTED)
	assert estimator.predict_yield(production, [sibling]) == Decimal("88.00")


def test_predict_rounds_half_up(estimator, make_production) -> None:
	production = make_production(expected_yield=100)
	close = make_production(actual_yield="93.33", production_status=HARVESTED)
	assert estimator.predict_yield(production, [close]) == Decimal("96.00")

	history = [
		make_production(actual_yield=80, production_status=HARVESTED),
		make_production(actual_yield=81, production_status=HARVESTED),
		make_production(actual_yield=81, production_status=HARVESTED),
	]
	# average 80.666... rounds to 80.67 before blending
	assert estimator.predict_yield(production, history) == Decimal("88.40")


def test_predict_planned_from_harvested_sibling(estimator, make_production) -> None:
	harvested = make_production(expected_yield=100, actual_yield=80, production_status=HARVESTED)
	planned = make_production(expected_yield=120, production_status=ProductionStatusEnum.planned)

	assert estimator.predict_yield(planned, [harvested, planned]) == Decimal("96.00")


def test_predict_ignores_unharvested_siblings(estimator, make_production) -> None:
	production = make_production(expected_yield=100)
	history = [
		make_production(actual_yield=50, production_status=ProductionStatusEnum.sold),
		make_production(actual_yield=40, production_status=ProductionStatusEnum.growing),
		make_production(production_status=HARVESTED),
	]
	assert estimator.predict_yield(production, history) == Decimal("100")


# ── Confidence ───────────────────────────────────────────────────────────────


def test_confidence_base(estimator, make_production) -> None:
	assert estimator.confidence(make_production(), []) == 50


def test_confidence_is_capped(estimator, make_production, today) -> None:
	production = make_production(
		seed_variety="ZM-607",
		seed_source="RAB",
		production_method=ProductionMethodEnum.organic,
		planting_date=date(2024, 4, 1),
	)
	history = [make_production() for _ in range(6)]
	assert estimator.confidence(production, history) == 95


def test_confidence_grows_with_history(estimator, make_production) -> None:
	production = make_production(planting_date=date(2024, 5, 10))
	sizes = [0, 3, 6]
	scores = [estimator.confidence(production, [make_production() for _ in range(n)]) for n in sizes]
	assert scores == [55, 65, 70]
	assert scores == sorted(scores)


# ── Risk buckets ─────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
	("points", "level"),
	[
		(0, RiskLevelEnum.low),
		(24, RiskLevelEnum.low),
		(25, RiskLevelEnum.medium),
		(49, RiskLevelEnum.medium),
		(50, RiskLevelEnum.high),
		(90, RiskLevelEnum.high),
	],
)
def test_risk_level_boundaries(points, level) -> None:
	assert risk_level_for(points) == level


@pytest.mark.parametrize(
	("points", "level"),
	[
		(14, FoodSecurityRiskEnum.low),
		(15, FoodSecurityRiskEnum.medium),
		(29, FoodSecurityRiskEnum.medium),
		(30, FoodSecurityRiskEnum.high),
		(49, FoodSecurityRiskEnum.high),
		(50, FoodSecurityRiskEnum.critical),
	],
)
def test_food_security_level_boundaries(points, level) -> None:
	assert food_security_level_for(points) == level


def test_overdue_large_production_is_high_risk(estimator, make_production) -> None:
	production = make_production(
		expected_harvest_date=date(2024, 6, 1),
		production_status=ProductionStatusEnum.growing,
		area_planted=60,
	)
	assert estimator.risk_points(production) == 70
	assert estimator.assess_risk(production) == RiskLevelEnum.high


def test_planned_production_risk_depends_on_area(estimator, make_production) -> None:
	medium = make_production(
		production_status=ProductionStatusEnum.planned,
		expected_harvest_date=date(2024, 7, 5),
		area_planted=30,
	)
	small = medium.model_copy(update={"area_planted": Decimal("20")})

	assert estimator.risk_points(medium) == 25
	assert estimator.assess_risk(medium) == RiskLevelEnum.medium
	assert estimator.assess_risk(small) == RiskLevelEnum.low


def test_empty_production_is_low_risk(estimator, make_production) -> None:
	production = make_production()
	assert estimator.risk_points(production) == 0
	assert estimator.food_security_points(production) == 0
	assert estimator.assess_food_security_risk(production) == FoodSecurityRiskEnum.low


def test_harvested_production_counts_as_zero_days_left(estimator, make_production, today) -> None:
	production = make_production(
		production_status=HARVESTED,
		expected_harvest_date=date(2024, 5, 1),
	)
	assert production.is_overdue(today) is False
	assert production.days_to_harvest(today) == 0
	assert estimator.risk_points(production) == 15
	assert make_production(production_status=HARVESTED).days_to_harvest(today) is None


def test_harvested_large_production_is_medium_risk(estimator, make_production) -> None:
	production = make_production(
		production_status=ProductionStatusEnum.sold,
		expected_harvest_date=date(2024, 5, 1),
		area_planted=60,
	)
	assert estimator.risk_points(production) == 30
	assert estimator.assess_risk(production) == RiskLevelEnum.medium


@pytest.mark.parametrize(
	("days_left", "points"),
	[
		(-1, 55),
		(0, 15),
		(6, 15),
		(7, 5),
		(29, 5),
		(30, 0),
	],
)
def test_days_to_harvest_brackets(estimator, make_production, today, days_left, points) -> None:
	production = make_production(
		production_status=ProductionStatusEnum.growing,
		expected_harvest_date=today + timedelta(days=days_left),
	)
	assert estimator.risk_points(production) == points


@pytest.mark.parametrize(
	("area", "points"),
	[
		("20", 0),
		("20.01", 10),
		("50", 10),
		("50.01", 15),
	],
)
def test_area_brackets(estimator, make_production, area, points) -> None:
	production = make_production(area_planted=area)
	assert estimator.risk_points(production) == points


@pytest.mark.parametrize(
	("days_planted", "score"),
	[
		(30, 50),
		(31, 55),
		(60, 55),
		(61, 60),
	],
)
def test_confidence_planting_brackets(estimator, make_production, today, days_planted, score) -> None:
	production = make_production(planting_date=today - timedelta(days=days_planted))
	assert estimator.confidence(production, []) == score


def test_planned_overdue_is_critical(estimator, make_production) -> None:
	production = make_production(
		production_status=ProductionStatusEnum.planned,
		expected_harvest_date=date(2024, 6, 10),
	)
	assert estimator.food_security_points(production) == 50
	assert estimator.assess_food_security_risk(production) == FoodSecurityRiskEnum.critical


def test_low_efficiency_and_large_area(estimator, make_production) -> None:
	production = make_production(
		production_status=HARVESTED,
		expected_yield=100,
		actual_yield=65,
		area_planted=120,
	)
	assert production.yield_efficiency == Decimal("65")
	assert estimator.food_security_points(production) == 40
	assert estimator.assess_food_security_risk(production) == FoodSecurityRiskEnum.high


# ── Advisory text & composites ───────────────────────────────────────────────


def test_overdue_indicators_and_recommendations(estimator, make_production) -> None:
	production = make_production(
		expected_harvest_date=date(2024, 6, 1),
		production_status=ProductionStatusEnum.growing,
		expected_yield=4,
	)
	assert estimator.security_indicators(production) == [
		"Harvest overdue - potential supply delay",
		"Production in progress - monitor regularly",
	]
	assert estimator.recommendations(production) == [
		"Immediate harvest required to prevent losses",
		"Assess crop condition and adjust future planning",
		"Set up yield monitoring system",
		"Record actual yield data for future predictions",
	]


def test_approaching_harvest_advice(estimator, make_production) -> None:
	production = make_production(
		expected_harvest_date=date(2024, 6, 25),
		production_status=ProductionStatusEnum.planted,
		production_method=ProductionMethodEnum.organic,
		total_production=1500,
	)
	assert estimator.security_indicators(production) == [
		"Harvest approaching - prepare storage and distribution",
		"High volume production - significant food security impact",
		"Organic production - premium market opportunity",
	]
	assert estimator.recommendations(production) == [
		"Prepare harvesting equipment and labor",
		"Coordinate with buyers and storage facilities",
	]


def test_prediction_factors(estimator, make_production) -> None:
	production = make_production(
		production_method=ProductionMethodEnum.organic,
		area_planted="2.5",
		planting_date=date(2024, 6, 5),
		seed_variety="RWV-1129",
	)
	assert estimator.prediction_factors(production) == [
		"Historical yield data from similar productions",
		"Current production method: Organic",
		"Area planted: 2.5 hectares",
		"Days since planting: 10",
		"Seed variety: RWV-1129",
	]
	bare = estimator.prediction_factors(make_production())
	assert "Area planted: Not specified" in bare
	assert "Current production method: Not specified" in bare


def test_build_yield_prediction(estimator, make_production) -> None:
	production = make_production(id="prod-x", expected_yield=100)
	sibling = make_production(actual_yield=80, production_status=HARVESTED)

	prediction = estimator.build_yield_prediction(production, [sibling])

	assert prediction.production_id == "prod-x"
	assert prediction.predicted_yield == Decimal("88.00")
	assert prediction.confidence == 50
	assert prediction.risk == RiskLevelEnum.low
	payload = prediction.model_dump(mode="json")
	assert payload["risk"] == "LOW"
	assert payload["predicted_yield"] == "88.00"


def test_build_security_assessment(estimator, make_production, today) -> None:
	production = make_production(production_status=ProductionStatusEnum.planned)
	assessment = estimator.build_security_assessment(production)

	assert assessment.risk_level == FoodSecurityRiskEnum.medium
	assert assessment.assessed_on == today
	assert "Finalize planting schedule" in assessment.recommendations


# ── Production record helpers ────────────────────────────────────────────────


def test_status_only_moves_forward(make_production) -> None:
	production = make_production(production_status=ProductionStatusEnum.planned)
	growing = production.with_status(ProductionStatusEnum.growing)

	assert growing.production_status == ProductionStatusEnum.growing
	assert production.production_status == ProductionStatusEnum.planned
	assert growing.is_active is True
	with pytest.raises(ValueError):
		growing.with_status(ProductionStatusEnum.planted)


def test_resolved_total_production(make_production) -> None:
	assert make_production(total_production=7).resolved_total_production == Decimal("7")
	recorded = make_production(total_production=7, area_planted=2, actual_yield=3, expected_yield=5)
	assert recorded.resolved_total_production == Decimal("6")
	assert make_production(total_production=7, area_planted=2, expected_yield=5).resolved_total_production == Decimal("7")
	assert make_production(area_planted=2, actual_yield=3, expected_yield=5).resolved_total_production == Decimal("6")
	assert make_production(area_planted=2, expected_yield=5).resolved_total_production == Decimal("10")
	assert make_production(expected_yield=5).resolved_total_production is None
