import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from ferrolings.exercise import (
    CompilationError,
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseOutput,
    Mode,
    RunError,
    State,
    clean,
    load_exercises,
    parse_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
TEST_SUCCESS = (
    "#[test]\nfn passing() {\n    println!(\"THIS TEST TOO SHALL PASS\");\n"
    "    assert!(true);\n}\n"
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(base, name, text):
    path = base / name
    path.write_text(text)
    return path


class _FakeRun:
    def __init__(self, returncode=0, stdout=b"", stderr=b""):
        self.calls = []
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


def test_temp_file_is_stable_and_unique_to_process():
    name = temp_file()
    assert name == temp_file()
    assert name.startswith("./temp_")
    assert str(os.getpid()) in name


def test_clean(workdir):
    Path(temp_file()).touch()
    source = _write(workdir, "pending_exercise.rs", PENDING)
    exercise = Exercise("example", source, Mode.COMPILE, "")
    with mock.patch("subprocess.run", _FakeRun()):
        compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_context_manager_cleans(workdir):
    source = _write(workdir, "a.rs", FINISHED)
    exercise = Exercise("a", source, Mode.COMPILE, "")
    with mock.patch("subprocess.run", _FakeRun()):
        with exercise.compile() as compiled:
            Path(temp_file()).touch()
            assert isinstance(compiled, CompiledExercise) and compiled.exercise is exercise
    assert not Path(temp_file()).exists()


def test_clean_without_file_is_quiet(workdir):
    clean()
    assert not Path(temp_file()).exists()


def test_pending_state(workdir):
    source = _write(workdir, "pending_exercise.rs", PENDING)
    exercise = Exercise("pending_exercise", source, Mode.COMPILE, "")
    expected = State(
        (
            ContextLine("// fake_exercise", 1, False),
            ContextLine("", 2, False),
            ContextLine("// I AM NOT DONE", 3, True),
            ContextLine("", 4, False),
            ContextLine("fn main() {", 5, False),
        )
    )
    state = exercise.state()
    assert state == expected
    assert not state.is_done()


def test_finished_exercise(workdir):
    source = _write(workdir, "finished_exercise.rs", FINISHED)
    exercise = Exercise("finished_exercise", source, Mode.COMPILE, "")
    assert exercise.state() == State()
    assert exercise.state().is_done()


def test_marker_on_first_line_clamps_context(workdir):
    source = _write(workdir, "t.rs", "/// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = Exercise("t", source, Mode.TEST, "").state()
    assert [c.number for c in state.context] == [1, 2, 3]
    assert state.context[0].important


def test_marker_needs_comment(workdir):
    source = _write(workdir, "t.rs", "I AM NOT DONE\nfn main() {}\n")
    assert Exercise("t", source, Mode.COMPILE, "").state().is_done()


def test_exercise_with_output(workdir):
    source = _write(workdir, "testSuccess.rs", TEST_SUCCESS)
    exercise = Exercise("exercise_with_output", source, Mode.TEST, "")
    fake = _FakeRun(stdout=b"THIS TEST TOO SHALL PASS\n")
    with mock.patch("subprocess.run", fake):
        with exercise.compile() as compiled:
            out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert fake.calls[0] == [
        "rustc", "--test", str(source), "-o", temp_file(), "--color", "always",
    ]
    assert fake.calls[1] == [temp_file(), "--show-output"]


def test_compile_mode_command(workdir):
    source = _write(workdir, "compSuccess.rs", "fn main() {\n}\n")
    fake = _FakeRun()
    with mock.patch("subprocess.run", fake):
        Exercise("compSuccess", source, Mode.COMPILE, "").compile().close()
    assert fake.calls == [["rustc", str(source), "-o", temp_file(), "--color", "always"]]


def test_compilation_failure(workdir):
    Path(temp_file()).touch()
    source = _write(workdir, "compFailure.rs", "fn main() {\n    let\n}\n")
    exercise = Exercise("compFailure", source, Mode.COMPILE, "")
    with mock.patch("subprocess.run", _FakeRun(returncode=1, stderr=b"expected pattern")):
        with pytest.raises(CompilationError) as info:
            exercise.compile()
    assert info.value.output == ExerciseOutput(stdout="", stderr="expected pattern")
    assert not Path(temp_file()).exists()


def test_run_failure(workdir):
    compiled = CompiledExercise(Exercise("x", Path("x.rs"), Mode.COMPILE, ""))
    with mock.patch("subprocess.run", _FakeRun(returncode=101, stdout=b"out", stderr=b"panic")):
        with pytest.raises(RunError) as info:
            compiled.run()
    assert info.value.output.stdout == "out"
    assert info.value.output.stderr == "panic"


def test_clippy_writes_manifest(workdir):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    source = _write(workdir / "exercises" / "clippy", "clippy1.rs", "fn main() {}\n")
    fake = _FakeRun()
    with mock.patch("subprocess.run", fake):
        Exercise("clippy1", source, Mode.CLIPPY, "").compile().close()
    manifest = (workdir / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert manifest == (
        '[package]\nname = "clippy1"\nversion = "0.0.1"\nedition = "2018"\n'
        '[[bin]]\nname = "clippy1"\npath = "clippy1.rs"'
    )
    assert [call[:2] for call in fake.calls] == [
        ["rustc", str(source)], ["cargo", "clean"], ["cargo", "clippy"],
    ]
    assert fake.calls[-1][-3:] == ["--", "-D", "warnings"]


def test_str_is_path():
    assert str(Exercise("a", Path("exercises/a.rs"), Mode.TEST, "")) == "exercises/a.rs"


def test_parse_exercises():
    text = (
        '[[exercises]]\nname = "testFailure"\npath = "testFailure.rs"\n'
        'mode = "test"\nhint = "Hello!"\n\n'
        '[[exercises]]\nname = "compSuccess"\npath = "compSuccess.rs"\n'
        'mode = "compile"\nhint = ""\n'
    )
    exercises = parse_exercises(text)
    assert [e.name for e in exercises] == ["testFailure", "compSuccess"]
    assert exercises[0].mode is Mode.TEST
    assert exercises[0].hint == "Hello!"
    assert exercises[1].path == Path("compSuccess.rs")


def test_parse_rejects_unknown_mode():
    with pytest.raises(ValueError):
        parse_exercises('[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "fly"\nhint = ""\n')


def test_parse_rejects_missing_field():
    with pytest.raises(ValueError):
        parse_exercises('[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "test"\n')


def test_load_exercises(tmp_path):
    info = _write(
        tmp_path, "info.toml",
        '[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "clippy"\nhint = "h"\n',
    )
    [exercise] = load_exercises(info)
    assert exercise.mode is Mode.CLIPPY
    assert exercise.hint == "h"