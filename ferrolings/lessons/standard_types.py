"""Standard library types lesson: cons lists, iterators, options and lint fixes."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Cons:
    """A cons cell; the empty list is None."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def _build_list(values: Iterable[int]) -> Cons | None:
    """Build a cons list holding values in order; None when there are none."""
    result: Cons | None = None
    for value in reversed(list(values)):
        result = Cons(value, result)
    return result


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return _build_list(())


def create_non_empty_list() -> Cons | None:
    """A cons list holding a few values."""
    return _build_list((1, 2, 3))


def capitalize_first(text: str) -> str:
    """Upper-case the first character of text, leaving the rest alone."""
    return text[:1].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalize each word."""
    return [capitalize_first(word) for word in words]


def capitalize_join(words: Iterable[str]) -> str:
    """Capitalize each word and join them into one string."""
    return "".join(capitalize_words(words))


class DivisionError(ArithmeticError):
    """A division that could not produce an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when the division is exact."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number, raising the first DivisionError met."""
    return [divide(number, divisor) for number in numbers]


def factorial(num: int) -> int:
    """num! for an unsigned 64-bit result."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result


def format_number(maybe_number: int | None) -> str:
    """Text for printing a number that must be present."""
    if maybe_number is None:
        raise ValueError("no number to print")
    return f"printing: {maybe_number}"


def number_table() -> list[int]:
    """Five numbers derived from their position in the table."""
    return [(index * 1235 + 2) // (4 * 16) for index in range(5)]


def drain_values(values: list[int | None]) -> list[int]:
    """Pop values from the end until the list is empty or a None is popped."""
    drained: list[int] = []
    while values and (value := values.pop()) is not None:
        drained.append(value)
    return drained


def floats_differ(x: float, y: float) -> bool:
    """Whether two floats differ by more than machine epsilon."""
    return abs(y - x) > sys.float_info.epsilon


def add_optional(total: int, option: int | None) -> int:
    """Add option to total when it is present."""
    return total if option is None else total + option