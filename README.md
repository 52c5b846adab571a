# pushswap

Sorts a list of distinct integers with two stacks, **a** and **b**, and
prints the sequence of stack operations that sorts them. The numbers start
on stack a, top first; when the operations have run, a holds them in
ascending order from the top and b is empty.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | move the top element of b onto a, or of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both upwards (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate a, b, or both downwards (bottom goes to top) |

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments or as one space-separated string:

```
push_swap 3 1 2
push_swap "5 4 3 2 1"
```

Each operation is printed on its own line to standard output. Input that
is already sorted prints nothing. With no arguments the command exits with
status 1 and prints nothing.

Invalid input prints `Error` to standard error and exits with status 1.
Input is invalid when:

- an argument is not an optionally signed integer made only of the digits 0-9,
- a value lies outside the 32-bit signed integer range,
- a value is written as `-0`,
- a value appears more than once,
- a single string argument is empty or begins with a space.

## Library use

```python
from pushswap.sorting import solve

operations = solve([3, 1, 2])
print([op.value for op in operations])
```

`solve` returns a list of `pushswap.stacks.Operation` members (a string
enum whose values are the operation names) that sorts the values. It
raises `pushswap.parsing.InputError` if a value is repeated.

Other pieces:

- `pushswap.parsing.parse_arguments(args)` turns command-line strings into
  integers and raises `InputError` for malformed or out-of-range input;
  `pushswap.parsing.build_elements(values)` attaches each value's 1-based
  rank and raises `InputError` on duplicates.
- `pushswap.stacks.Stacks(elements, output)` holds stacks `a` and `b`. It
  has one method per operation (`sa`, `pb`, `rra`, ...) plus `apply`,
  `push_times` and `reverse_rotate_times`. Each operation is recorded in
  `history` and, when `output` is a text stream, written to it as a line.
- `pushswap.stacks.Stack` is a single circular stack with `top`, `swap`,
  `push_onto`, `rotate`, `reverse_rotate`, `is_ascending`, `is_descending`
  and `biggest_index`.
- `pushswap.sorting` exposes `sort_from_left` and `sort_from_right`, which
  sort a range of ranks on a or b, and the small-case routines
  `sort_two_a` ... `sort_five_a` and `sort_two_b` ... `sort_five_b`.

The `pushswap.libft` sub-package holds small helpers: character tests and
case conversion (`chars`), integer parsing, splitting and bounded string
operations (`strings`), byte-buffer routines (`memory`), stream writers
(`output`) and a singly linked list (`linked_list`).

## Limits

The package only produces operations. It has no command that reads a list
of operations and checks whether they sort a given input.

## Tests

```
pip install .[test]
pytest
```