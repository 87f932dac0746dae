# exerunner

Building blocks for a course of small programming exercises. The package
has three parts:

- `exerunner.ui` prints coloured status lines.
- `exerunner.project` writes a `rust-project.json` file so that an editor's
  language server (rust-analyzer) can understand a folder of exercise files.
- `exerunner.exercises` holds worked solutions to many of the course's
  exercises as ordinary Python functions and classes.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Status messages

```python
from exerunner.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

`success` prints a green line that starts with ✅ and `warn` a red line that
starts with ⚠️. When the `NO_EMOJI` environment variable is set (to any
value) the symbols become `✓` and `!`; `no_emoji()` reports whether it is
set.

## rust-project.json

```python
from exerunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json(".")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` takes the path from the `RUST_SRC_PATH` environment
  variable when it is set. Otherwise it runs `rustc --print sysroot`, prints
  the toolchain it found and uses `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks `root/exercises` recursively, in sorted
  order, and calls `add_path` with each entry's path relative to `root`.
- `add_path(path)` adds a `Crate` when the text after the first dot in the
  path is exactly `rs`.
- `write_to_disk(path)` writes the project as compact JSON; the default path
  is `./rust-project.json`.

Each `Crate` has a `root_module`, edition `"2021"`, no `deps`, and
`cfg = ["test"]` so the language server also works inside test blocks.
`to_dict()` on both classes gives the JSON structure.

## Worked solutions

The modules under `exerunner.exercises`:

| Module | Contents |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command` / `CommandKind`, `ReportCard` |
| `basics` | `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz` |
| `from_into` | `Person.parse` falling back to `Person.default()` on bad input |
| `from_str` | `Person.parse` raising `EmptyInput`, `BadLength`, `NoName` or `InvalidAge` (all `ParsePersonError`) |
| `try_from_into` | `Color.from_tuple`, `Color.from_array`, `Color.from_slice`, raising `BadLength` or `IntConversion` |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero` |
| `messages` | `State.process` driven by `ChangeColor`, `Echo`, `Move` and `Quit` |
| `strings` | `trim_me`, `compose_me`, `replace_me` |
| `package` | `Package` with `is_international` and `get_fees` |
| `hashmaps` | `fruit_basket`, `fill_fruit_basket`, `build_scores_table` with `Team` |
| `iterators` | `capitalize_first`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` counting |
| `options` | `maybe_icecream` |
| `vecs` | `array_and_vec`, `vec_loop`, `vec_map` |
| `structs` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template` |
| `traits` | `append_bar`, `Licensed`, `compare_license_types`, `some_func` |
| `cons_list` | `Cons`, `create_empty_list`, `create_non_empty_list` |
| `cow` | `Cow` (copy on first mutation) and `abs_all` |

For example:

```python
from exerunner.exercises.quizzes import calculate_price_of_apples
from exerunner.exercises.iterators import factorial

calculate_price_of_apples(41)  # 41
factorial(4)                   # 24
```

## What this package does not do

There is no command-line program. The package does not read a list of
exercises, compile, test or lint exercise files, check them for the
"I AM NOT DONE" marker, track progress, show hints, reset exercises or watch
files for changes. It provides only the pieces described above.