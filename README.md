# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of eleven instructions. It prints the instructions it uses. A checker reads
a list of instructions and reports whether they sort the stack.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

Swaps and rotations need at least two elements on each stack they act on, and
a push needs at least one element on the stack it takes from.

## Install

```
pip install .
```

## Command line

Print a sequence of instructions, one per line, that sorts the numbers in
ascending order (the first number is the top of `a`):

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

Numbers can be passed as separate arguments or together in quoted strings
separated by spaces. Input that is not an integer, is outside the 32-bit
signed range, is repeated, or is an empty or blank argument makes the command
print `Error` to standard error and exit with status 1. Input that is already
sorted, and no input at all, produce no output.

Check a sequence of instructions read from standard input:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker prints `OK` if the instructions leave `a` sorted with `b` empty,
and `KO` otherwise. Every instruction must be on its own line ending in a
newline. An unknown instruction, a line without a final newline, an
instruction that cannot be carried out, or invalid numbers make it print
`Error` to standard error and exit with status 1. Given no numbers, it exits
with status 1 and prints nothing.

## Library

```python
from pushswap.solver import solve
from pushswap.checker import check
from pushswap.parsing import parse_arguments

values = parse_arguments(["3 2 5", "1", "4"])
operations = solve(values)
print(check(values, [f"{op}\n" for op in operations]))   # True
```

- `pushswap.parsing.parse_arguments(args)` returns the integers and raises
  `InputError` (a `ValueError`) on bad input; `is_valid_number(token)` tests a
  single token.
- `pushswap.stacks.Stacks(a, b, record)` holds both stacks as deques, top at
  index 0. It carries out the instructions (`sa()`, `pb()`, `rra()` and so
  on, or `apply(operation)` with an `Operation` or its name) and, when
  `record` is true, appends each one to `operations`. It raises `StackError`
  for an unknown operation or one with too few elements to act on.
  `Operation` names the instructions and `is_sorted(values)` tests for
  strictly ascending order.
- `pushswap.solver.solve(values)` returns the list of `Operation`s that sort
  `values`; `sort_three(stacks)` and `turk_sort(stacks)` work on a `Stacks`
  directly.
- `pushswap.checker.run_instructions(values, lines)` carries out
  newline-terminated instruction lines and returns the final `Stacks`;
  `check(values, lines)` tells whether they sort the values.
- `pushswap.cli.main(argv)` and `pushswap.checker.main(argv)` are the two
  commands; each returns its exit status.