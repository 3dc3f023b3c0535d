# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of moves. It prints each move it makes, one per line. The printed lines
are the sequence of moves that sorts the input.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, one number in each:

```
pushswap 3 2 1
```

Or pass them all in a single argument, separated by blanks:

```
pushswap "3 2 1"
```

Each number may carry one leading `+` or `-`. Only spaces, line feeds, vertical
tabs and form feeds separate numbers inside a single argument. Numbers outside the
32-bit signed range wrap around.

When the input is malformed (a token that is not a number, an argument holding
more than one number when several arguments are given, or a duplicate value) the
command prints `Error` on standard output. It exits with status 0 in every case,
and prints nothing when given no arguments.

Before sorting, every number is replaced by its rank, the smallest becoming 0.
Inputs of fewer than 50 numbers go through a mixed sort of swaps, rotations and
pushes to `b`; larger inputs go through a binary radix sort on the ranks.

A first argument of exactly `-d` is recognised as a debug flag, but it removes the
*last* argument rather than itself and is then read as input, so on the command
line it always results in `Error`. Step-by-step debug output is available from
Python through `mixed_sort(stacks, debug=True)`, described below.

## Moves

| Output | Meaning |
|--------|---------|
| `sa`, `sb` | swap the top two elements of a stack |
| `ss` | swap on both stacks (written without a trailing newline) |
| `pa`, `pb` | move the top of the other stack onto `a` or `b` |
| `ra`, `rb` | rotate a stack: the first element becomes the last |
| `rr` | rotate both stacks |
| `rra`, `rrb` | reverse rotate: the last element becomes the first |
| `rrr` | reverse rotate both stacks |

The sorts themselves only use `sa`, `pa`, `pb`, `ra` and `rb`; the others are
available on `Stacks`.

## Library use

```python
from pushswap.parsing import parse_input
from pushswap.stacks import Stacks
from pushswap.sorting import mixed_sort, radix_sort

ranks = parse_input(["3", "2", "1"])      # [2, 1, 0]
moves = []
stacks = Stacks(ranks, emit=moves.append)
mixed_sort(stacks)
print("".join(moves), end="")
```

- `pushswap.parsing`: `check_str(text)` counts the numbers in one string,
  `check_input(args)` counts the numbers in an argument list, and
  `parse_input(args)` returns the ranks. All raise `InputError` (a `ValueError`)
  on bad input.
- `pushswap.stacks.Stacks(values, emit)`: stack `a` starts with `values`, `b`
  empty. Every announced move is passed to `emit` as text; by default it is
  written to standard output. Methods: `swap`, `swap_both`, `push`, `rotate`,
  `rotate_both`, `reverse_rotate`, `reverse_rotate_both`, `push_last`,
  `push_back`, `push_all`, `min_node`, `max_node` and `format`.
- `pushswap.sorting`: `mixed_sort(stacks, debug=False)` (with `debug` set, both
  stacks and a step count are emitted after every step), `radix_sort(stacks)`
  for non-negative values, `is_sorted(values, size)` and
  `format_debug(a, b, count)`.
- `pushswap.cli.main(argv=None)` runs the command on a list of arguments.

The package also holds general helpers that the command builds on:

- `pushswap.chain`: `Node` and `Chain`, a singly linked list with `add_front`,
  `add_back`, `last`, `clear`, `iterate` and `map`.
- `pushswap.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `is_space`) and `to_upper` / `to_lower`.
- `pushswap.strings`: `str_chr`, `str_rchr`, `str_ncmp`, `str_nstr`, `strlcpy`,
  `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `str_mapi`, `str_iteri`
  and a C-style `atoi`.
- `pushswap.memory`: byte-buffer helpers `mem_set`, `bzero`, `mem_copy`,
  `mem_move`, `mem_chr`, `mem_cmp` and `calloc`.
- `pushswap.formatting`: `int_length`, `itoa`, `format_number`,
  `format_address`, a printf-style `sprintf` / `printf` supporting
  `%c %s %d %i %p %u %x %X %%`, and `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `pushswap.linereader.LineReader(stream, buffer_size=1000)`: reads a text or
  binary stream one line at a time, via `read_line()` or iteration.

## What it does not do

There is no checker command: the package prints moves but does not read a list of
moves back and verify that they sort a given input. It also makes no attempt to
find the shortest sequence of moves.

## Running the tests

```
pip install ".[test]"
pytest
```