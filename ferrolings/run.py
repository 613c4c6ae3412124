"""Running a single exercise without prompting for completion."""

from __future__ import annotations

from ferrolings.exercise import CompilationError, Exercise, Mode, RunError
from ferrolings.ui import spinner, success, warn
from ferrolings.verify import ExerciseFailed, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) one exercise, raising ExerciseFailed on failure."""
    match exercise.mode:
        case Mode.TEST:
            test(exercise, verbose)
        case Mode.COMPILE | Mode.CLIPPY:
            _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    try:
        with spinner(f"Compiling {exercise}...") as progress:
            with exercise.compile() as compiled:
                progress.update(f"Running {exercise}...")
                output = compiled.run()
    except CompilationError as error:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(error.output.stderr)
        raise ExerciseFailed(exercise) from error
    except RunError as error:
        print(error.output.stdout)
        print(error.output.stderr)
        warn(f"Ran {exercise} with errors")
        raise ExerciseFailed(exercise) from error

    print(output.stdout)
    success(f"Successfully ran {exercise}")