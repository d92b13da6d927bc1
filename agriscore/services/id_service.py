"""Date-prefixed sequential identifiers for platform records."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import date

from agriscore.config import get_settings


class SequenceIdGenerator:
	"""Issues ``<date><6-digit sequence>`` identifiers, e.g. ``20240115000042``.

	Each instance owns its counter; share one instance wherever IDs must not
	collide.  The sequence wraps back to zero at ``modulus``.
	"""

	def __init__(
		self,
		date_format: str = "%Y%m%d",
		modulus: int = 100000,
		clock: Callable[[], date] | None = None,
	):
		if modulus <= 1:
			raise ValueError("modulus must be greater than 1")
		self.date_format = date_format
		self.modulus = modulus
		self._clock = clock or date.today
		self._counter = 0
		self._lock = threading.Lock()

	@classmethod
	def from_settings(cls, clock: Callable[[], date] | None = None) -> SequenceIdGenerator:
		settings = get_settings()
		return cls(
			date_format=settings.id_date_format,
			modulus=settings.id_sequence_modulus,
			clock=clock,
		)

	def next_id(self) -> str:
		with self._lock:
			self._counter += 1
			sequence = self._counter % self.modulus
		return f"{self._clock().strftime(self.date_format)}{sequence:06d}"
