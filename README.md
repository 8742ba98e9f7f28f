# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. The program prints the instructions it uses, one per
line. Replaying them from the start leaves `a` in ascending order and `b` empty.

## Instructions

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

The sorter never emits `sb` or `ss`, but `Machine.apply` accepts every
instruction in the table.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 1 2
push-swap "5 4 3 2 1"
```

The first number given is the top of `a`. Numbers can be given as separate
arguments, as one quoted string, or as a mix of the two. If the input is
already sorted, nothing is printed and the exit status is 0.

The program prints `Error` to standard error and exits with status 1 in these
cases:

- an argument is empty
- a token is not an integer: only an optional sign followed by decimal digits
  is accepted
- a zero written with a sign, such as `-0` or `+0`
- a value lies outside the 32-bit signed range
- a value appears more than once

When it is run with no arguments, or with arguments made only of spaces, it
exits with status 1 and prints nothing.

The same command is available as `python -m pushswap.cli`.

## Library

```python
from pushswap.sorter import push_swap
from pushswap.stack import Machine, Operation
from pushswap.parse import parse_arguments, InputError

values = parse_arguments(["4 2", "3", "1"])   # [4, 2, 3, 1]
ops = push_swap(values)                      # list of Operation

machine = Machine(values)
for op in ops:
    machine.apply(op)
assert machine.a.values() == sorted(values)
assert len(machine.b) == 0
```

- `pushswap.parse`: `parse_arguments` reads the numbers and raises
  `InputError` (a `ValueError`) for input that the command would reject;
  `parse_number` checks a single token; `has_duplicates` tells whether a
  value repeats.
- `pushswap.stack`: `Stack` holds nodes top first and offers `swap`,
  `rotate`, `reverse_rotate` and `push_to`; `Machine` holds stacks `a` and
  `b`, and `apply` performs an `Operation` (or its name as a string) and
  records it in `operations`.
- `pushswap.sorter`: `push_swap` returns the moves for a list of values; it
  returns an empty list for sorted input and raises `ValueError` for repeated
  values. The steps it is built from (`first_push`, `sort_three`, `set_cost`,
  `find_target`, `cheapest_move`) are public as well.

## Scope

The package produces a list of moves; it does not include a checker that
reads moves from standard input and verifies them against a stack, nor a
visualiser. Replaying moves through `Machine.apply` is the way to verify them
in code.

## Tests

```
pip install .[test]
pytest
```