"""Shared pytest fixtures: record factories and a fixed reference date."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import date
from typing import Any

import pytest

from agriscore.config import get_settings
from agriscore.models.crops import Crop, CropProduction
from agriscore.services.prediction_service import ProductionEstimator


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
	"""Drop the cached Settings so env overrides in one test never leak into another."""
	get_settings.cache_clear()
	yield
	get_settings.cache_clear()


@pytest.fixture
def today() -> date:
	return date(2024, 6, 15)


@pytest.fixture
def estimator(today: date) -> ProductionEstimator:
	return ProductionEstimator(today=today)


@pytest.fixture
def make_crop() -> Callable[..., Crop]:
	"""Build a Crop with a generated id; pass any field as a keyword."""
	counter = {"n": 0}

	def factory(**fields: Any) -> Crop:
		counter["n"] += 1
		fields.setdefault("id", f"crop-{counter['n']}")
		fields.setdefault("crop_name", f"Crop {counter['n']}")
		return Crop(**fields)

	return factory


@pytest.fixture
def make_production() -> Callable[..., CropProduction]:
	"""Build a CropProduction with a generated id; every other field defaults to None."""
	counter = {"n": 0}

	def factory(**fields: Any) -> CropProduction:
		counter["n"] += 1
		fields.setdefault("id", f"prod-{counter['n']}")
		return CropProduction(**fields)

	return factory
