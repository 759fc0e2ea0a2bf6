# drillrunner

A library for working through a directory of small programming exercises. It
reads the exercise list from an `info.toml` catalogue, compiles and runs each
exercise, and reports which ones are still pending. An exercise counts as
pending while its source still holds an `I AM NOT DONE` marker comment.

## Installing

```
pip install .
```

Exercises are compiled with `rustc`, and lint exercises are checked with
`cargo clippy`. Both must be on your `PATH` for compiling and verifying;
loading the catalogue and checking progress need neither.

## Loading exercises and checking progress

```python
from drillrunner.exercise import load_exercises

exercises = load_exercises("info.toml")
for exercise in exercises:
    print(exercise.name, exercise.mode.value, "done" if exercise.looks_done() else "pending")
```

Each catalogue entry has a `name`, a `path`, a `mode` (`compile`, `test` or
`clippy`) and a `hint`. `Exercise.state()` returns `None` for a finished
exercise, or a list of `ContextLine` objects (`line`, `number`, `important`)
covering two lines either side of the marker.

## Compiling and running one exercise

```python
from drillrunner.exercise import ExerciseFailed

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except ExerciseFailed as exc:
    print(exc.output.stderr)
```

`compile()` builds a binary named `./temp_<pid>_<thread>` in the current
directory; leaving the `with` block (or calling `close()`) removes it. Test
exercises are built as a test harness and run with `--show-output`. Clippy
exercises write `./exercises/clippy/Cargo.toml` and run `cargo clippy` with
warnings denied.

## Verifying in order

```python
from drillrunner.verify import VerifyError, verify

try:
    verify(exercises, (0, len(exercises)), verbose=False)
    print("All exercises completed!")
except VerifyError as exc:
    print("Next up:", exc.exercise.name)
    print(exc.exercise.hint)
```

`verify` checks each exercise in turn, drawing a progress bar when standard
error is a terminal, and raises `VerifyError` for the first one that fails to
compile, run or pass its tests, or that still carries the marker. When an
exercise passes but is still marked, `prompt_for_completion` prints where the
marker is. `verify.test(exercise, verbose)` runs a test exercise without that
prompt.

Set the `NO_EMOJI` environment variable for plain-text status markers.
`drillrunner.ui` holds the small styling helpers (`bold`, `blue`, `warn`,
`success`).

## rust-analyzer support

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json(".")
project.write_to_disk("./rust-project.json")
```

Every `.rs` file under `exercises/` becomes a crate with edition 2021 and the
`test` cfg enabled.

## Lesson solutions

`drillrunner.lessons` contains worked solutions to lesson topics, each covered
by its own tests: `quizzes`, `errors`, `branching`, `functions`, `vectors`,
`options`, `text`, `iterators`, `sharing`, `generics`, `hashmaps`, `structs`,
`messages`, `traits` and `threads`.

## What it does not do

There is no command-line program. Nothing here watches the exercise directory
for changes, runs a single exercise by name, prints hints on request, lists
exercises as a table, or resets an exercise with git; those steps are left to
your own code built on the functions above.

## Running the tests

```
pip install .[test]
pytest
```