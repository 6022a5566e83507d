# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of moves. It prints the moves it uses, one per line, in order.
Stack `a` starts with the first number on top, and stack `b` starts empty.
When the moves are done, `a` holds the numbers in ascending order from top
to bottom.

## Moves

| Move  | Effect                                                   |
|-------|----------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                         |
| `sb`  | swap the top two elements of `b`                         |
| `ss`  | `sa` and `sb` together (only if both hold two or more)   |
| `pa`  | move the top of `b` onto `a`                             |
| `pb`  | move the top of `a` onto `b`                             |
| `ra`  | rotate `a` up (the top element goes to the bottom)       |
| `rb`  | rotate `b` up                                            |
| `rr`  | `ra` and `rb` together (only if both hold two or more)   |
| `rra` | rotate `a` down (the bottom element comes to the top)    |
| `rrb` | rotate `b` down                                          |
| `rrr` | `rra` and `rrb` together (only if both hold two or more) |

A move that cannot be made does nothing and is not printed.

## Command line

```
push_swap 3 2 1
push_swap "5 4 3 2 1"
python -m pushswap.cli 3 2 1
```

Give the numbers as separate arguments, or as a single argument with the
numbers separated by spaces. With no arguments the command does nothing and
exits with status 0. If the input is already sorted, it prints nothing.

An argument must be a decimal integer with an optional `+` or `-` sign. It
must not contain spaces or other characters. In any of the following cases
the command writes `Error: <reason>` in red to standard error and exits with
status 1:

- an argument is not a valid number
- a number is outside the 32-bit signed range
- the same number appears more than once

## Library

```python
from pushswap.sorting import push_swap

moves = push_swap([3, 2, 1])   # ['sa', 'rra']
```

`push_swap` raises `pushswap.parsing.InputError` (a `ValueError`) if a value
does not fit in 32 bits or if a value is repeated.

Two to five numbers are sorted by dedicated routines: `sort_two`,
`sort_three`, `sort_four` and `sort_five`. Longer lists go through two
steps:

- `move_to_b` pushes the numbers onto `b` in rank chunks of width
  `int_sqrt(n)`.
- `move_to_a` brings them back to `a`, largest first, rotating `b` the
  shorter way.

`sort_stacks` picks the strategy by size.

To work at a lower level, build a `pushswap.stacks.Stacks` from
`pushswap.stacks.Element` objects. Each element holds `text`, `value` and
`index`, where `index` is the element's rank. Its `sa` … `rrr` methods
perform the moves. Each performed move is reported to the `emit` callback,
or printed to standard output when no callback is given. `best_rotate_a` and
`best_rotate_b` bring a given rank to the top. The `pushswap.parsing` module
turns argument text into elements:

- `handle_args` collects the argument strings.
- `validate_number` and `check_repeated` check them.
- `create_elements` builds the elements.
- `assign_index` ranks them.

The package also includes some small helper modules:

- `pushswap.chars`: ASCII classification and case conversion
- `pushswap.strings`: bounded copy, search, split, trim, `atoi` and `atol`
  (with 32- and 64-bit wrap-around)
- `pushswap.memory`: helpers that operate on byte buffers
- `pushswap.linked`: `LinkedList`, a singly linked list
- `pushswap.line_reader`: `LineReader` and `get_next_line`, which read a
  file descriptor one line at a time
- `pushswap.printf`: `render` and `printf`, supporting `%c %d %i %s %u %x %X
  %p %%`
- `pushswap.output`: writes text to streams, and `print_error` reports an
  error and exits

## What it does not do

The package only produces moves. It has no checker command that reads moves
from standard input and tells whether they sort a given list. It also does
not try to find the shortest possible sequence of moves.

## Tests

```
pip install -e .[test]
pytest
```