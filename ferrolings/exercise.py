"""Exercises: their description, compilation, running and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_PATTERN = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a scratch binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the scratch binary if it exists."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """The exercise failed to compile."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


class RunError(Exception):
    """The compiled exercise exited unsuccessfully."""

    def __init__(self, exercise: Exercise, output: ExerciseOutput) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise
        self.output = output


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(text: str) -> list[str]:
    """Split on newlines, dropping a trailing empty line and carriage returns."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary, returning its output or raising RunError."""
        args = [temp_file()]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        output = _output(result)
        if result.returncode != 0:
            raise RunError(self.exercise, output)
        return output

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _clippy(self, target: str) -> subprocess.CompletedProcess:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        CLIPPY_CARGO_TOML_PATH.write_text(manifest, encoding="utf-8")
        # Build a runnable binary as well; a failure here shows up in clippy too.
        _execute(["rustc", str(self.path), "-o", target, *RUSTC_COLOR_ARGS])
        # Clippy misses lints on incremental builds, so start clean.
        manifest_args = ["--manifest-path", str(CLIPPY_CARGO_TOML_PATH)]
        _execute(["cargo", "clean", *manifest_args, *RUSTC_COLOR_ARGS])
        return _execute(
            ["cargo", "clippy", *manifest_args, *RUSTC_COLOR_ARGS, "--", "-D", "warnings"]
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising CompilationError on failure."""
        target = temp_file()
        match self.mode:
            case Mode.COMPILE:
                result = _execute(["rustc", str(self.path), "-o", target, *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _execute(
                    ["rustc", "--test", str(self.path), "-o", target, *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy(target)
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(self, _output(result))

    def state(self) -> State:
        """Report whether the pending marker is still present, with context."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_PATTERN.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_PATTERN.search(line)),
            None,
        )
        if matched is None:
            raise ValueError(f"pending marker in {self} does not fit on one line")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[first : last + 1], start=first)
            )
        )


def _exercise_from_table(table: object) -> Exercise:
    if not isinstance(table, dict):
        raise ValueError("each exercise must be a table")
    missing = [key for key in ("name", "path", "mode", "hint") if key not in table]
    if missing:
        raise ValueError(f"exercise is missing {', '.join(missing)}")
    for key in ("name", "path", "mode", "hint"):
        if not isinstance(table[key], str):
            raise ValueError(f"exercise field {key!r} must be a string")
    return Exercise(
        name=table["name"],
        path=Path(table["path"]),
        mode=Mode(table["mode"]),
        hint=table["hint"],
    )


def parse_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("expected an 'exercises' array of tables")
    return [_exercise_from_table(entry) for entry in entries]


def load_exercises(path: str | os.PathLike[str]) -> list[Exercise]:
    """Read and parse an info.toml file."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))