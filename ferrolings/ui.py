"""Console messages and progress spinners shared by the commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status
from rich.text import Text

_console = Console(highlight=False)


def _symbol(fancy: str, plain: str) -> str:
    """Pick the fancy symbol when the output can encode it."""
    return fancy if _console.encoding.startswith("utf") else plain


def _report(symbol: str, message: str, colour: str) -> None:
    _console.print(
        Text.assemble((symbol, colour), " ", (str(message), colour)),
        soft_wrap=True,
    )


def warn(message: str) -> None:
    """Print a warning line in red."""
    _report(_symbol("⚠️ ", "!"), message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _report(_symbol("✅", "✓"), message, "green")


class _Spinner:
    """Handle on a running spinner whose message can be changed."""

    def __init__(self, status: Status, message: str) -> None:
        self._status = status
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def update(self, message: str) -> None:
        self._message = message
        self._status.update(Text(message))


@contextmanager
def spinner(message: str) -> Iterator[_Spinner]:
    """Show a spinner with a message; it is cleared when the block ends."""
    with _console.status(Text(message), spinner="dots") as status:
        yield _Spinner(status, message)