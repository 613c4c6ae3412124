# ferrolings

A terminal companion for working through a course of small exercises. Each
exercise is a source file listed in an `info.toml` file. `ferrolings`
compiles it with `rustc`, then runs it or runs its tests, and tells you how
it went. It can also watch the `exercises` directory and check your work
again each time you save.

The package also holds worked lessons under `ferrolings.lessons`. They are
plain Python modules you can import:

- `basics`: functions, conditions, primitives, strings and small lists
- `containers`: fruit baskets and list doubling
- `enums`: messages and a `State` that processes them
- `conversions`: `Person` parsing, `Color` building, byte and character counts, averages
- `errors`: name tags, token costs and `PositiveNonzeroInteger`
- `generics`: `Wrapper` and `ReportCard`
- `traits`: `append_bar` for strings and lists
- `structs`: records, tuple records, `Order` and `Package`
- `macros`: `hello` and `my_macro`
- `standard_types`: cons lists, iterator helpers, exact division, `factorial`
- `concurrency`: `offset_sums` across threads and `run_jobs` with a `JobStatus`

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the command

Run the command from the course directory, the one that holds `info.toml`.
Run from any other directory, it exits with status 1. It also exits with
status 1 if `rustc --version` cannot be run. Exercises in `clippy` mode
also need `cargo`.

```
ferrolings                 # show the welcome banner and the text of default_out.txt
ferrolings list            # list every exercise by name (alias: l)
ferrolings verify          # check all exercises in order (alias: v)
ferrolings watch           # verify, then re-verify whenever a file changes (alias: w)
ferrolings run NAME        # compile and run or test one exercise (alias: r)
ferrolings hint NAME       # print the hint for one exercise (alias: h)
ferrolings --nocapture run NAME   # also show the output of test exercises
```

`verify` stops with status 1 at the first exercise that fails to compile,
fails to run, fails its tests, or still holds an `I AM NOT DONE` marker. For
that last case it shows the lines around the marker. Delete the marker when
you are ready to move on. `run` never asks about the marker.

`watch` verifies everything once. After each change to a `.rs` file under
`exercises`, it verifies again from the changed exercise onwards, and prints
a closing message once all of them pass. While it runs, type `hint` for the
hint of the exercise that failed last, or `clear` to clear the screen.

`run` and `hint` print `No exercise found for your given name!` and exit
with status 1 when the name is not in `info.toml`.

## The `info.toml` format

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable before using it."
```

`mode` is one of `compile`, `test` or `clippy`. In `clippy` mode the command
writes `exercises/clippy/Cargo.toml` before it lints the exercise.

## Using it from Python

```python
from ferrolings.exercise import load_exercises
from ferrolings.verify import ExerciseFailed, verify

exercises = load_exercises("info.toml")
try:
    verify(exercises, verbose=False)
except ExerciseFailed as failure:
    print(failure.exercise.hint)
```

`Exercise.state()` reports whether the marker is still present, together with
the lines around it. `Exercise.compile()` returns a `CompiledExercise` to use
in a `with` block. It raises `CompilationError` on failure, and
`CompiledExercise.run()` raises `RunError`.

## What it does not include

The package does not ship a course. The `info.toml` file, the exercise
files and `default_out.txt` must come from the course directory you run it
in. It does not install or find a compiler for you.