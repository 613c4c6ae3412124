"""Conversions lesson: parsing people, building colours, counting and averaging."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_AGE_PATTERN = re.compile(r"\+?[0-9]+")
_AGE_MAX = 2**64 - 1


def byte_count(text: str) -> int:
    """Number of bytes in the UTF-8 encoding of text."""
    return len(text.encode("utf-8"))


def char_count(text: str) -> int:
    """Number of characters in text."""
    return len(text)


def _parse_age(text: str) -> int:
    if not _AGE_PATTERN.fullmatch(text):
        raise ValueError(f"invalid age: {text!r}")
    age = int(text)
    if age > _AGE_MAX:
        raise ValueError(f"age too large: {text!r}")
    return age


@dataclass
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person, John aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse "name,age", raising ValueError if it is malformed."""
        if not text:
            raise ValueError("empty input")
        fields = text.split(",")
        if len(fields) != 2:
            raise ValueError(f"expected 'name,age', got {text!r}")
        name, age = fields
        if not name:
            raise ValueError("name is empty")
        return cls(name=name, age=_parse_age(age))

    @classmethod
    def from_text_or_default(cls, text: str) -> Person:
        """Parse "name,age", falling back to the default person."""
        try:
            return cls.parse(text)
        except ValueError:
            return cls.default()


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_components(cls, components: Sequence[int] | Iterable[int]) -> Color:
        """Build a colour from exactly three integers in 0..=255."""
        values = tuple(components)
        if len(values) != 3:
            raise ValueError(f"expected 3 components, got {len(values)}")
        for value in values:
            if not isinstance(value, int):
                raise TypeError(f"component must be an integer: {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"component out of range 0..=255: {value}")
        return cls(*values)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values, 0.0) / len(values)