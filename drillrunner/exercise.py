"""Exercises: loading the catalogue, compiling, running and progress detection."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from . import ui

RUSTC_COLOR_ARGS = ("--color", "always")
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"

_NOT_DONE = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE")


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
class ExerciseOutput:
    """Captured output of a compiler or exercise binary."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def temp_file() -> str:
    """Path of the binary built for the current process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the compiled binary, if there is one."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


def _capture(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    parts = source.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def _clippy_manifest(name: str) -> str:
    return (
        "[package]\n"
        f'name = "{name}"\n'
        'version = "0.0.1"\n'
        'edition = "2021"\n'
        "[[bin]]\n"
        f'name = "{name}"\n'
        f'path = "{name}.rs"'
    )


@dataclass
class Exercise:
    """One exercise as described in the catalogue file."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output on failure."""
        path = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _capture(["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _capture(
                    ["rustc", "--test", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy()

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(result))

    def _clippy(self) -> subprocess.CompletedProcess:
        message = (
            "Failed to write Clippy Cargo.toml file."
            if ui.no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(
                _clippy_manifest(self.name), encoding="utf-8"
            )
        except OSError as exc:
            raise OSError(message) from exc
        # Build a binary too, so that clippy exercises can be run afterwards.
        _capture(["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS])
        # A clean is needed for clippy to report every lint again.
        _capture(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _capture(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _capture(args)
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> list[ContextLine] | None:
        """None when the exercise is done, else the lines around the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        lines = _lines(source)
        marker = next(
            (index for index, line in enumerate(lines) if _NOT_DONE.match(line)), None
        )
        if marker is None:
            return None
        first = max(marker - CONTEXT, 0)
        last = marker + CONTEXT
        return [
            ContextLine(line=line, number=index + 1, important=index == marker)
            for index, line in enumerate(lines)
            if first <= index <= last
        ]

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state() is None


class CompiledExercise:
    """A successfully built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed with its output when it fails."""
        return self.exercise._run()

    def close(self) -> None:
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise catalogue from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]