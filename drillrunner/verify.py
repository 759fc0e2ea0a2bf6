"""Checking exercises: compiling, running, testing and prompting for completion."""

from __future__ import annotations

import enum
import sys
from typing import Iterable

from . import ui
from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode

_BAR_WIDTH = 60


class RunMode(enum.Enum):
    """Whether a passing exercise should prompt for the pending marker."""

    INTERACTIVE = "interactive"
    NON_INTERACTIVE = "non_interactive"


class VerifyError(Exception):
    """An exercise failed to compile, run or pass, or is still marked as not done."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


class _Spinner:
    """A one-line status message on the terminal, cleared when finished."""

    def __init__(self, message: str) -> None:
        self._active = sys.stderr.isatty()
        self.set_message(message)

    def set_message(self, message: str) -> None:
        if self._active:
            sys.stderr.write(f"\r\x1b[2K{message}")
            sys.stderr.flush()

    def finish_and_clear(self) -> None:
        if self._active:
            sys.stderr.write("\r\x1b[2K")
            sys.stderr.flush()
            self._active = False

    def __enter__(self) -> _Spinner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish_and_clear()


class _ProgressBar:
    """A progress bar drawn on the terminal."""

    def __init__(self, total: int, position: int) -> None:
        self._active = sys.stderr.isatty()
        self.total = total
        self.position = position
        self._draw()

    def inc(self) -> None:
        self.position += 1
        self._draw()

    def finish(self) -> None:
        if self._active:
            sys.stderr.write("\n")
            sys.stderr.flush()
            self._active = False

    def _draw(self) -> None:
        if not self._active:
            return
        if self.total:
            filled = min(self.position * _BAR_WIDTH // self.total, _BAR_WIDTH)
        else:
            filled = _BAR_WIDTH
        bar = "#" * filled
        if filled < _BAR_WIDTH:
            bar += ">" + "-" * (_BAR_WIDTH - filled - 1)
        sys.stderr.write(f"\rProgress: [{bar}] {self.position}/{self.total}")
        sys.stderr.flush()


def verify(
    exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool = False
) -> None:
    """Check each exercise in turn; raise VerifyError for the first one that is not done."""
    num_done, total = progress
    bar = _ProgressBar(total, num_done)
    try:
        for exercise in exercises:
            match exercise.mode:
                case Mode.TEST:
                    done = compile_and_test(exercise, RunMode.INTERACTIVE, verbose)
                case Mode.COMPILE:
                    done = compile_and_run_interactively(exercise)
                case Mode.CLIPPY:
                    done = compile_only(exercise)
            if not done:
                raise VerifyError(exercise)
            bar.inc()
    finally:
        bar.finish()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's test harness; raise VerifyError on failure."""
    compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as exc:
        spinner.finish_and_clear()
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        raise VerifyError(exercise) from exc


def compile_only(exercise: Exercise) -> bool:
    """Compile without running; return whether the exercise is done."""
    with _Spinner(f"Compiling {exercise}...") as spinner:
        _compile(exercise, spinner).close()
    return prompt_for_completion(exercise, None)


def compile_and_run_interactively(exercise: Exercise) -> bool:
    """Compile and run the exercise; return whether it is done."""
    with _Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as exc:
                spinner.finish_and_clear()
                ui.warn(f"Ran {exercise} with errors")
                print(exc.output.stdout)
                print(exc.output.stderr)
                raise VerifyError(exercise) from exc
    return prompt_for_completion(exercise, output.stdout)


def compile_and_test(exercise: Exercise, run_mode: RunMode, verbose: bool = False) -> bool:
    """Compile and run the test harness, showing its output when verbose."""
    with _Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as exc:
                spinner.finish_and_clear()
                ui.warn(
                    f"Testing of {exercise} failed! Please try again. Here's the output:"
                )
                print(exc.output.stdout)
                raise VerifyError(exercise) from exc
    if verbose:
        print(output.stdout)
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return ui.bold("====================")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True when done; otherwise show where the pending marker is and return False."""
    context = exercise.state()
    if context is None:
        return True

    match exercise.mode:
        case Mode.COMPILE:
            ui.success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            ui.success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            ui.success(f"Successfully compiled {exercise}!")

    no_emoji = ui.no_emoji()
    match exercise.mode:
        case Mode.COMPILE:
            success_msg = "The code is compiling!"
        case Mode.TEST:
            success_msg = "The code is compiling, and the tests pass!"
        case Mode.CLIPPY:
            success_msg = (
                "The code is compiling, and Clippy is happy!"
                if no_emoji
                else "The code is compiling, and 📎 Clippy 📎 is happy!"
            )

    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{ui.bold('`I AM NOT DONE`')} comment:"
    )
    print()
    for context_line in context:
        line = ui.bold(context_line.line) if context_line.important else context_line.line
        number = ui.blue(ui.bold(f"{context_line.number:>2}"))
        print(f"{number} {ui.blue('|')}  {line}")

    return False