"""Yield prediction, confidence and risk heuristics for crop productions.

All weights, point values and cutoffs below are calibrated constants; a
missing input skips its contribution rather than raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from enum import Enum

from agriscore.models.base import round_half_up
from agriscore.models.crops import CropProduction
from agriscore.models.enums import (
	FoodSecurityRiskEnum,
	ProductionStatusEnum,
	RiskLevelEnum,
)
from agriscore.observability import instrumented
from agriscore.schemas.prediction import SecurityRiskAssessment, YieldPrediction

HISTORICAL_WEIGHT = Decimal("0.6")
EXPECTED_WEIGHT = Decimal("0.4")

CONFIDENCE_BASE = 50
CONFIDENCE_CAP = 95

LOW_EFFICIENCY_PCT = Decimal("70")
HIGH_VOLUME_TONNES = Decimal("1000")


def _label(value: Enum | None) -> str:
	if value is None:
		return "Not specified"
	return str(value.value).replace("_", " ").title()


def risk_level_for(points: int) -> RiskLevelEnum:
	if points >= 50:
		return RiskLevelEnum.high
	if points >= 25:
		return RiskLevelEnum.medium
	return RiskLevelEnum.low


def food_security_level_for(points: int) -> FoodSecurityRiskEnum:
	if points >= 50:
		return FoodSecurityRiskEnum.critical
	if points >= 30:
		return FoodSecurityRiskEnum.high
	if points >= 15:
		return FoodSecurityRiskEnum.medium
	return FoodSecurityRiskEnum.low


class ProductionEstimator:
	"""Scores a production against its historical siblings.

	``today`` anchors every date-relative rule (overdue, days to harvest,
	days since planting) and defaults to the current date.
	"""

	def __init__(self, today: date | None = None):
		self.today = today or date.today()

	# ── Yield & confidence ───────────────────────────────────────────────

	@instrumented("predict_yield")
	def predict_yield(self, production: CropProduction, history: Sequence[CropProduction]) -> Decimal:
		expected = production.expected_yield
		if expected is None:
			return Decimal("0")

		harvested = [
			sibling.actual_yield
			for sibling in history
			if sibling.actual_yield is not None
			and sibling.production_status == ProductionStatusEnum.harvested
		]
		if not harvested:
			return expected

		historical_avg = round_half_up(sum(harvested, Decimal("0")) / len(harvested))
		return round_half_up(historical_avg * HISTORICAL_WEIGHT + expected * EXPECTED_WEIGHT)

	@instrumented("prediction_confidence")
	def confidence(self, production: CropProduction, history: Sequence[CropProduction]) -> int:
		score = CONFIDENCE_BASE

		if production.seed_variety is not None:
			score += 10
		if production.seed_source is not None:
			score += 5
		if production.is_organic:
			score += 10

		if len(history) > 5:
			score += 15
		elif len(history) > 2:
			score += 10

		days_planted = production.days_since_planting(self.today)
		if days_planted > 60:
			score += 10
		elif days_planted > 30:
			score += 5

		return min(CONFIDENCE_CAP, score)

	# ── Risk ─────────────────────────────────────────────────────────────

	def risk_points(self, production: CropProduction) -> int:
		points = 0

		if production.is_overdue(self.today):
			points += 30

		days_left = production.days_to_harvest(self.today)
		if days_left is not None:
			if days_left < 0:
				points += 25
			elif days_left < 7:
				points += 15
			elif days_left < 30:
				points += 5

		area = production.area_planted
		if area is not None:
			if area > 50:
				points += 15
			elif area > 20:
				points += 10

		if production.production_status == ProductionStatusEnum.planned:
			points += 10

		return points

	def food_security_points(self, production: CropProduction) -> int:
		points = 0

		if production.production_status == ProductionStatusEnum.planned:
			points += 20
		if production.is_overdue(self.today):
			points += 30

		efficiency = production.yield_efficiency
		if efficiency is not None and efficiency < LOW_EFFICIENCY_PCT:
			points += 25

		if production.area_planted is not None and production.area_planted > 100:
			points += 15

		return points

	@instrumented("assess_risk")
	def assess_risk(self, production: CropProduction) -> RiskLevelEnum:
		return risk_level_for(self.risk_points(production))

	@instrumented("assess_food_security_risk")
	def assess_food_security_risk(self, production: CropProduction) -> FoodSecurityRiskEnum:
		return food_security_level_for(self.food_security_points(production))

	# ── Advisory text ────────────────────────────────────────────────────

	def prediction_factors(self, production: CropProduction) -> list[str]:
		area = production.area_planted
		factors = [
			"Historical yield data from similar productions",
			f"Current production method: {_label(production.production_method)}",
			f"Area planted: {f'{area} hectares' if area is not None else 'Not specified'}",
			f"Days since planting: {production.days_since_planting(self.today)}",
		]
		if production.seed_variety is not None:
			factors.append(f"Seed variety: {production.seed_variety}")
		return factors

	def security_indicators(self, production: CropProduction) -> list[str]:
		indicators: list[str] = []
		days_left = production.days_to_harvest(self.today)

		if production.is_overdue(self.today):
			indicators.append("Harvest overdue - potential supply delay")
		if days_left is not None and 0 < days_left < 14:
			indicators.append("Harvest approaching - prepare storage and distribution")
		if production.production_status == ProductionStatusEnum.growing:
			indicators.append("Production in progress - monitor regularly")

		total = production.resolved_total_production
		if total is not None and total > HIGH_VOLUME_TONNES:
			indicators.append("High volume production - significant food security impact")
		if production.is_organic:
			indicators.append("Organic production - premium market opportunity")
		return indicators

	def recommendations(self, production: CropProduction) -> list[str]:
		items: list[str] = []
		days_left = production.days_to_harvest(self.today)

		if production.is_overdue(self.today):
			items.append("Immediate harvest required to prevent losses")
			items.append("Assess crop condition and adjust future planning")
		if days_left is not None and 0 < days_left < 30:
			items.append("Prepare harvesting equipment and labor")
			items.append("Coordinate with buyers and storage facilities")
		if production.production_status == ProductionStatusEnum.planned:
			items.append("Finalize planting schedule")
			items.append("Ensure seed and input availability")
		if production.actual_yield is None and production.expected_yield is not None:
			items.append("Set up yield monitoring system")
			items.append("Record actual yield data for future predictions")
		return items

	# ── Composite results ────────────────────────────────────────────────

	def build_yield_prediction(
		self,
		production: CropProduction,
		history: Sequence[CropProduction],
	) -> YieldPrediction:
		return YieldPrediction(
			production_id=production.id,
			predicted_yield=self.predict_yield(production, history),
			expected_yield=production.expected_yield,
			confidence=self.confidence(production, history),
			risk=self.assess_risk(production),
			factors=self.prediction_factors(production),
		)

	def build_security_assessment(self, production: CropProduction) -> SecurityRiskAssessment:
		return SecurityRiskAssessment(
			production_id=production.id,
			risk_level=self.assess_food_security_risk(production),
			indicators=self.security_indicators(production),
			recommendations=self.recommendations(production),
			assessed_on=self.today,
		)
