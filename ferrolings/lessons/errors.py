"""Error handling lesson: name tags, token costs and validated positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import IO, AnyStr

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)


class CreationReason(enum.Enum):
    """Why a positive nonzero integer could not be created."""

    NEGATIVE = "Number is negative"
    ZERO = "Number is zero"


class CreationError(ValueError):
    """A value was rejected as a positive nonzero integer."""

    def __init__(self, reason: CreationReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationReason.ZERO)
        if self.value < 0:
            raise CreationError(CreationReason.NEGATIVE)


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed decimal integer that must fit within bounds."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is rejected with ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed-in quantity, fee included."""
    quantity = _parse_int(item_quantity, _I32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def purchase(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed-in quantity and return what is left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


def read_and_validate(stream: IO[AnyStr]) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive nonzero integer.

    Reading errors propagate as OSError, malformed numbers as ValueError and
    out-of-range values as CreationError.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), _I64))