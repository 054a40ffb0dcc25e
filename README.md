# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the operations it used, one per line.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

An operation does nothing when the stack it acts on is too small. For example,
a swap or rotation on fewer than two elements, or a push from an empty stack,
is neither performed nor recorded. `rr` rotates both stacks but is never
added to the recorded operations.

## Command line

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The numbers can be given as separate arguments. They can also be given as one
argument with the numbers separated by spaces. The first number is the top of
stack `a`.

- Nothing is printed when there are no arguments, when a single argument holds
  fewer than two numbers, or when the input is already in ascending order.
- Each number may contain only digits and `-`. It must fit in a 32-bit signed
  integer. A number that reads as zero must start with a digit.
- An invalid number or a duplicate value makes the command print `Error` to
  standard error and exit with status 1.
- Up to five numbers are sorted with a short hand-tuned sequence. Larger
  inputs are moved to stack `b` in chunks of ranks. The largest remaining
  value is then pushed back to `a` each time. The chunks are 15 ranks wide for
  up to 100 numbers and 30 ranks wide above that.

## Library use

```python
from pushswap.sorting import push_swap

for operation in push_swap([3, 2, 1]):
    print(operation)
```

- `pushswap.sorting.push_swap(values)` returns the list of `Operation` values
  that sorts `values`. It also provides `is_sorted`, `median`,
  `assign_indexes`, `closer_from_bottom`, `sort_three`, `mini_sort` and
  `long_sort`.
- `pushswap.stack.PushSwap(values)` holds the deques `a` and `b`, top first,
  and the list `operations` performed so far.
  - Each operation is a method of the same name.
  - `sa`, `sb`, `ra`, `rb`, `rra` and `rrb` take a `record` flag.
  - `apply` takes an `Operation` or its name.
- `pushswap.stack.Operation` is a string enum whose values are the operation
  names.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments into
  the values for stack `a`. It raises `InputError`, a `ValueError`, on invalid
  input. The helpers `atoi`, `atoi_long`, `split_words` and `check_arg` are
  also available.
- `pushswap.cli.main(argv=None)` runs the command and returns its exit status.

## Limits

The package prints the operations that sort its input. It has no checker that
reads a list of operations and verifies that it sorts a given stack.

## Tests

```
pip install -e ".[test]"
pytest
```