"""Structured logging setup and timing instrumentation for computations."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import Any, ParamSpec, TextIO, TypeVar

import structlog

from agriscore.config import LogFormat, Settings, get_settings

P = ParamSpec("P")
R = TypeVar("R")

LIBRARY_NAME = "agriscore"

_configured = False
_logger = structlog.get_logger("agriscore.compute")


class ComputationError(RuntimeError):
	"""Raised when a scoring or aggregation call fails unexpectedly."""


def _add_library_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
	event_dict.setdefault("library", LIBRARY_NAME)
	return event_dict


def configure_structured_logging(
	settings: Settings | None = None,
	*,
	stream: TextIO | None = None,
	force: bool = False,
) -> None:
	"""Route agriscore's structlog events through a JSON or console renderer.

	Runs once per process unless ``force`` is set; ``settings`` defaults to
	the cached environment settings and ``stream`` to stdout.
	"""
	global _configured
	if _configured and not force:
		return

	settings = settings or get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

	processors: list[Any] = [
		structlog.contextvars.merge_contextvars,
		_add_library_name,
		structlog.processors.add_log_level,
		structlog.processors.TimeStamper(fmt="iso", utc=True),
		structlog.processors.format_exc_info,
	]
	if settings.log_format == LogFormat.json:
		processors.append(structlog.processors.JSONRenderer(sort_keys=True))
	else:
		processors.append(structlog.dev.ConsoleRenderer(colors=False))

	structlog.configure(
		processors=processors,
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(stream),
		cache_logger_on_first_use=True,
	)
	_configured = True


def _computation_timing(op: str, start: float, ok: bool, error: str | None = None) -> None:
	duration_ms = round((time.perf_counter() - start) * 1000.0, 2)
	if ok:
		_logger.debug("computation", operation=op, duration_ms=duration_ms)
	else:
		_logger.error("computation_failed", operation=op, duration_ms=duration_ms, error=error)


def instrumented(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
	"""Time a computation and surface unexpected failures as ``ComputationError``."""

	def decorator(func: Callable[P, R]) -> Callable[P, R]:
		@functools.wraps(func)
		def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
			start = time.perf_counter()
			try:
				result = func(*args, **kwargs)
			except ComputationError as exc:
				_computation_timing(operation, start, False, str(exc))
				raise
			except Exception as exc:
				_computation_timing(operation, start, False, str(exc))
				raise ComputationError(f"{operation} failed: {exc}") from exc
			_computation_timing(operation, start, True)
			return result

		return wrapper

	return decorator
