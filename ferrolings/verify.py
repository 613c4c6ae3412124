"""Checking exercises in order and prompting the learner to move on."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.text import Text

from ferrolings.exercise import CompilationError, Exercise, Mode, RunError
from ferrolings.ui import spinner, success, warn

_console = Console(highlight=False)

_SUCCESS_MESSAGES = {
    Mode.COMPILE: "The code is compiling!",
    Mode.TEST: "The code is compiling, and the tests pass!",
    Mode.CLIPPY: "The code is compiling, and 📎 Clippy 📎 is happy!",
}

_SEPARATOR = "===================="


class RunMode(enum.Enum):
    """Whether a passing test exercise should prompt for completion."""

    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


class ExerciseFailed(Exception):
    """An exercise did not compile, did not run, or is not yet finished."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def _say(*parts: str | tuple[str, str]) -> None:
    _console.print(Text.assemble(*parts), soft_wrap=True)


@contextmanager
def _reporting_compile_errors(exercise: Exercise) -> Iterator[None]:
    """Turn a compilation failure into a report and ExerciseFailed."""
    try:
        yield
    except CompilationError as error:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        raise ExerciseFailed(exercise) from error


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn, raising ExerciseFailed at the first failure."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                finished = _compile_and_test(exercise, RunMode.INTERACTIVE, verbose)
            case Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                finished = _compile_only(exercise)
        if not finished:
            raise ExerciseFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run a test exercise without prompting for completion."""
    _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose)


def _compile_only(exercise: Exercise) -> bool:
    with _reporting_compile_errors(exercise), spinner(f"Compiling {exercise}..."):
        exercise.compile().close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    try:
        with _reporting_compile_errors(exercise), spinner(
            f"Compiling {exercise}..."
        ) as progress:
            with exercise.compile() as compiled:
                progress.update(f"Running {exercise}...")
                output = compiled.run()
    except RunError as error:
        warn(f"Ran {exercise} with errors")
        print(error.output.stdout)
        print(error.output.stderr)
        raise ExerciseFailed(exercise) from error

    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, run_mode: RunMode, verbose: bool) -> bool:
    try:
        with _reporting_compile_errors(exercise), spinner(f"Testing {exercise}..."):
            with exercise.compile() as compiled:
                output = compiled.run()
    except RunError as error:
        warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stdout)
        raise ExerciseFailed(exercise) from error

    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None)
    return True


def prompt_for_completion(exercise: Exercise, output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.is_done():
        return True

    _console.print()
    _say(f"🎉 🎉  {_SUCCESS_MESSAGES[exercise.mode]} 🎉 🎉")
    _console.print()

    if output is not None:
        _say("Output:")
        _say((_SEPARATOR, "bold"))
        _say(output)
        _say((_SEPARATOR, "bold"))
        _console.print()

    _say("You can keep working on this exercise,")
    _say(
        "or jump into the next one by removing the ",
        ("`I AM NOT DONE`", "bold"),
        " comment:",
    )
    _console.print()
    for context_line in state.context:
        _say(
            (f"{context_line.number:>2}", "bold blue"),
            " ",
            ("|", "blue"),
            "  ",
            (context_line.line, "bold" if context_line.important else ""),
        )
    return False