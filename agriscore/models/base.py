"""Record base class and shared numeric helpers; all models inherit from RecordModel."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


class RecordModel(BaseModel):
    """Immutable record loaded by the caller.

    ``from_attributes`` lets ORM rows (or any attribute-bearing object) be
    validated directly with ``Model.model_validate(row)``.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)


def to_decimal(value: Any) -> Decimal | None:
    """Coerce ints/floats/strings to ``Decimal`` without binary float noise.

    NaN and infinities count as missing and come back as None.
    """
    if value is None:
        return None
    number = value if isinstance(value, Decimal) else Decimal(str(value))
    if not number.is_finite():
        return None
    return number


def round_half_up(value: Decimal, places: Decimal = TWO_PLACES) -> Decimal:
    return value.quantize(places, rounding=ROUND_HALF_UP)
