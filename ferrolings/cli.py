"""Command line entry point: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import errno
import itertools
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ferrolings.exercise import Exercise, load_exercises
from ferrolings.run import run
from ferrolings.verify import ExerciseFailed, verify

INFO_FILE = Path("info.toml")
DEFAULT_OUT_FILE = Path("default_out.txt")
EXERCISES_DIR = Path("exercises")
DEBOUNCE_SECONDS = 2.0

_WELCOME = """
       welcome to...

   +------------------------------+
   |          ferrolings          |
   +------------------------------+
"""

_FINISH_LINES = (
    "",
    "+----------------------------------------------------+",
    "|          You made it to the Fe-nish line!          |",
    "+----------------------------------------------------+",
    "",
    "We hope you enjoyed learning about the various aspects of Rust!",
    "If you noticed any issues, please don't hesitate to report them to our repo.",
    "You can also contribute your own exercises to help the greater community!",
    "",
    "Before reporting an issue or contributing, please read our guidelines",
    "in CONTRIBUTING.md.",
)


class _UsageError(Exception):
    """The command line could not be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(f"{self.format_usage()}{self.prog}: error: {message}\n")


def _build_parser() -> _Parser:
    parser = _Parser(
        prog="ferrolings",
        description=(
            "A collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument(
        "--nocapture",
        action="store_true",
        help="Show outputs from the test exercises",
    )
    commands = parser.add_subparsers(dest="subcommand")

    verify_parser = commands.add_parser(
        "verify",
        aliases=["v"],
        help="Verifies all exercises according to the recommended order",
    )
    verify_parser.set_defaults(command="verify")

    watch_parser = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_parser.set_defaults(command="watch")

    run_parser = commands.add_parser(
        "run", aliases=["r"], help="Runs/Tests a single exercise"
    )
    run_parser.add_argument("name")
    run_parser.set_defaults(command="run")

    hint_parser = commands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_parser.add_argument("name")
    hint_parser.set_defaults(command="hint")

    list_parser = commands.add_parser(
        "list", aliases=["l"], help="Lists the exercises available"
    )
    list_parser.set_defaults(command="list")

    parser.set_defaults(command=None)
    return parser


def _emoji(fancy: str, plain: str) -> str:
    encoding = getattr(sys.stdout, "encoding", None) or ""
    return fancy if encoding.lower().startswith("utf") else plain


def rustc_exists() -> bool:
    """Return True if the Rust compiler can be started and reports success."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(exercises: Iterable[Exercise], name: str) -> Exercise:
    """Return the exercise with the given name, raising LookupError if absent."""
    for exercise in exercises:
        if exercise.name == name:
            return exercise
    raise LookupError(f"No exercise found for {name!r}")


class _Hint:
    """The hint of the exercise that failed last, shared with the shell thread."""

    def __init__(self, text: str) -> None:
        self._lock = threading.Lock()
        self._text = text

    def get(self) -> str:
        with self._lock:
            return self._text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text


class _RustFileHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def _record(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._record(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._record(event)


def _clear_screen() -> None:
    print("\x1bc")


def _spawn_watch_shell(hint: _Hint) -> None:
    print("Type 'hint' to get help or 'clear' to clear the screen")

    def shell() -> None:
        try:
            for line in sys.stdin:
                command = line.strip()
                if command == "hint":
                    print(hint.get())
                elif command == "clear":
                    print("\x1b[2J\x1b[1;1H")
                else:
                    print(f"unknown command: {command}")
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")

    threading.Thread(target=shell, daemon=True).start()


def _next_change(changes: queue.Queue[Path]) -> Path:
    """Wait for a change, then for quiet; return the last changed path."""
    path = changes.get()
    while True:
        try:
            path = changes.get(timeout=DEBOUNCE_SECONDS)
        except queue.Empty:
            return path


def _ends_with(path: Path, tail: Path) -> bool:
    parts, tail_parts = path.parts, Path(tail).parts
    return len(tail_parts) <= len(parts) and parts[len(parts) - len(tail_parts) :] == tail_parts


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Verify exercises, then re-verify from each edited one until all pass."""
    exercises = list(exercises)
    if not EXERCISES_DIR.is_dir():
        raise FileNotFoundError(errno.ENOENT, "No such directory", str(EXERCISES_DIR))

    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_RustFileHandler(changes), str(EXERCISES_DIR), recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
            return
        except ExerciseFailed as failure:
            hint = _Hint(failure.exercise.hint)
        _spawn_watch_shell(hint)
        while True:
            changed = _next_change(changes)
            if changed.suffix != ".rs" or not changed.exists():
                continue
            filepath = changed.resolve()
            pending = itertools.dropwhile(
                lambda exercise: not _ends_with(filepath, exercise.path), exercises
            )
            _clear_screen()
            try:
                verify(pending, verbose)
                return
            except ExerciseFailed as failure:
                hint.set(failure.exercise.hint)
    finally:
        observer.stop()
        observer.join()


def _print_finish() -> None:
    symbol = _emoji("🎉", "★")
    print(f"{symbol} All exercises completed! {symbol}")
    for line in _FINISH_LINES:
        print(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit code."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as error:
        sys.stderr.write(str(error))
        return 1

    if args.command is None:
        print(_WELCOME)

    if not INFO_FILE.exists():
        print(f"{sys.argv[0]} must be run from the ferrolings directory")
        print("Try `cd ferrolings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)
    verbose = args.nocapture

    match args.command:
        case "list":
            for exercise in exercises:
                print(exercise.name)
        case "run" | "hint":
            try:
                exercise = find_exercise(exercises, args.name)
            except LookupError:
                print("No exercise found for your given name!")
                return 1
            if args.command == "hint":
                print(exercise.hint)
            else:
                try:
                    run(exercise, verbose)
                except ExerciseFailed:
                    return 1
        case "verify":
            try:
                verify(exercises, verbose)
            except ExerciseFailed:
                return 1
        case "watch":
            try:
                watch(exercises, verbose)
            except OSError as error:
                print(f"Error: Could not watch your progress. Error message was {error!r}.")
                print(
                    "Most likely you've run out of disk space or your "
                    "'inotify limit' has been reached."
                )
                return 1
            _print_finish()
        case None:
            print(DEFAULT_OUT_FILE.read_text(encoding="utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())