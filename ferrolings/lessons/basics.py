"""Basics lesson: functions, conditions, variables, primitives, strings and modules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

_BULK_THRESHOLD = 40
_COLOR_WORDS = frozenset({"green", "blue", "red"})
_FRUIT = "Pear"
_VEGGIE = "Cucumber"
_FILL_VALUES = (22, 44, 66)


def calculate_apple_price(count: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    unit_price = 1 if count > _BULK_THRESHOLD else 2
    return count * unit_price


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def is_even(num: int) -> bool:
    """Whether num is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The square of num."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar", and anything else to "baz"."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def ring_calls(num: int) -> list[str]:
    """The ring messages for num calls, numbered from one."""
    return [f"Ring! Call number {call}" for call in range(1, num + 1)]


def classify_char(ch: str) -> str:
    """Describe a single character as alphabetical, numerical or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def nice_slice(values: Sequence[T]) -> Sequence[T]:
    """The second to fourth elements of values."""
    return values[1:4]


def current_favorite_color() -> str:
    """The favourite colour of the moment."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether attempt names one of the known colours."""
    return attempt in _COLOR_WORDS


def fill_vec(vec: Iterable[int]) -> list[int]:
    """A new list holding vec's items followed by 22, 44 and 66."""
    return [*vec, *_FILL_VALUES]


def new_filled_vec() -> list[int]:
    """A freshly created list holding 22, 44 and 66."""
    return fill_vec(())


def favorite_snacks() -> tuple[str, str]:
    """The favourite fruit and vegetable."""
    return _FRUIT, _VEGGIE