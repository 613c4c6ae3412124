"""Collections lesson: fruit baskets and simple vectors."""

from __future__ import annotations

import enum


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LICHI = "lichi"
    PINEAPPLE = "pineapple"


def default_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 3, "mango": 1}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every missing kind of fruit, leaving those present untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element."""
    return [value * 2 for value in values]