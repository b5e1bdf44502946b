# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
operations, printing each operation that takes effect.

The operations are:

| Operation   | Effect                                              |
|-------------|-----------------------------------------------------|
| `sa`/`sb`   | swap the top two elements of `a` / `b`              |
| `ra`/`rb`   | rotate `a` / `b` up: the top goes to the bottom     |
| `rra`/`rrb` | rotate `a` / `b` down: the bottom goes to the top   |
| `pa`        | move the top of `b` onto `a`                        |
| `pb`        | move the top of `a` onto `b`                        |

Stack `a` starts with the numbers in the order given, the first one on top.
When sorting finishes, `a` holds every number in ascending order and `b` is
empty.

## Installation

```
pip install .
```

## Command line

Pass the numbers either as separate arguments or as a single
space-separated string:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

One operation is written per line on standard output, and the exit status
is 0. Nothing is printed when the input is already sorted, or when no
arguments are given.

The program writes `Error` and exits with status 1 when an argument is not
an integer, does not fit in a signed 32-bit integer, is blank, or when a
number appears more than once. The message goes to standard error, except
when the only argument consists entirely of whitespace, in which case it is
written to standard output.

A number is read from the start of its argument: leading whitespace and one
`+` or `-` sign are accepted, and reading stops at the first non-digit.

## Library use

```python
from pushswap.sorting import solve

operations = solve([3, 2, 1])
print(operations)  # ['sa', 'rra']
```

`pushswap.sorting.solve` returns the list of operation names that sort the
given numbers. The other pieces:

- `pushswap.stacks.Stacks` holds the lists `a` and `b` (index 0 is the top)
  and has one method per operation (`sa`, `sb`, `ra`, `rb`, `rra`, `rrb`,
  `pa`, `pb`). An operation that cannot take effect, such as a swap on fewer
  than two elements or a push from an empty stack, does nothing; every one
  that does is appended to the `moves` list.
- `pushswap.sorting` also provides `sort_stacks(stacks)`, which sorts a
  `Stacks` in place, along with `sort_three`, `quick_sort_a`,
  `quick_sort_b`, `median_pivot` and `is_sorted`.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments into
  validated integers, raising `pushswap.parsing.ParseError` (a `ValueError`)
  on bad input. `parse_int`, `split_words`, `is_blank` and
  `check_duplicates` are the steps it is built from.
- `pushswap.cli.main(argv=None)` runs the command and returns its exit
  status.

## Running the tests

```
pip install ".[test]"
pytest
```