"""Macros lesson: greeting and printing helpers."""

from __future__ import annotations


def hello(text: str) -> str:
    """Prefix text with a greeting."""
    return f"Hello {text}"


def my_macro(*args: object) -> None:
    """Print a fixed message, or a message about the single value given."""
    match args:
        case ():
            print("Check out my macro!")
        case (value,):
            print(f"Look at this other macro: {value}")
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")