# pushswap

Sort a list of distinct integers using two stacks, **A** and **B**, and a small
fixed set of moves. A companion checker replays a sequence of moves and reports
whether they leave the numbers in order.

## The moves

| Move  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of A                    |
| `sb`  | swap the top two elements of B                    |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of B onto A                          |
| `pb`  | move the top of A onto B                          |
| `ra`  | rotate A up: the top element goes to the bottom   |
| `rb`  | rotate B up                                       |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate A down: the bottom element goes to the top |
| `rrb` | rotate B down                                     |
| `rrr` | `rra` and `rrb` together                          |

The first number given is the top of stack A. B starts empty. A move on a stack
with too few elements (swapping fewer than two, pushing from an empty stack)
does nothing.

## Installation

```
pip install .
```

## Finding a sequence of moves

Pass the numbers as separate arguments, or as one argument separated by spaces:

```
push-swap 3 2 1
push-swap "5 -1 42 7 0"
```

The moves are written to standard output, one per line. Nothing is written
when there are no arguments, or only one number. The sequence comes from a
recursive pivot-and-split strategy; it is not guaranteed to be the shortest
possible.

## Checking a sequence of moves

`push-swap-checker` takes the same arguments and reads moves from standard
input, one per line, each ending in a newline:

```
printf 'sa\nrra\n' | push-swap-checker 3 2 1
```

It prints `OK` when, after all the moves, A reads in ascending order going
round the stack from its smallest value (a rotation of sorted order is
accepted) and every number left on B is smaller than every number on A.
Otherwise it prints `KO`.

## Errors

Both commands print `Error` to standard error and exit with status 1 when:

- an argument is not an optionally signed decimal integer, or lies outside the
  32-bit signed range;
- a number appears more than once;
- a single argument holds no numbers at all;
- (checker only) a line read from standard input is not one of the moves
  above, or the last line is not terminated by a newline.

## Using it from Python

```python
from pushswap.sorter import solve
from pushswap.checker import check

moves = solve([3, 2, 1])
ok = check([3, 2, 1], (f"{move}\n" for move in moves))
```

- `pushswap.parsing.parse_arguments(args)` turns command-line style arguments
  into a list of integers, raising `pushswap.parsing.InputError` (a
  `ValueError`) on bad or repeated input.
- `pushswap.sorter.solve(numbers)` returns the list of move names.
- `pushswap.checker.check(numbers, lines)` replays newline-terminated move
  lines and returns `True` or `False`; `parse_move` and `apply_move` handle a
  single `Move`.
- `pushswap.stack.Stack` holds one stack, with `swap`, `push_from`, `rotate`
  and `reverse_rotate`.
- `pushswap.moves.Operator` applies moves to a pair of stacks and records their
  names in its `moves` list.

## Running the tests

```
pip install ".[test]"
pytest
```