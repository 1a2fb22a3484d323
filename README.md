# stackcheck

`stackcheck` checks whether a sequence of stack instructions sorts a list of
integers. It works on two stacks, **a** and **b**. The numbers start in stack
**a** and **b** starts empty. The sequence is correct when every instruction
has run, **a** holds all the numbers in strictly ascending order, and **b** is
empty.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the first two elements of a / b / both |
| `pa` / `pb` | move the top of b onto a / the top of a onto b |
| `ra` / `rb` / `rr` | rotate a / b / both (first becomes last) |
| `rra` / `rrb` / `rrr` | reverse-rotate a / b / both (last becomes first) |

An instruction that its stack cannot carry out, such as a swap on a stack
holding fewer than two elements, changes nothing. It still counts as an
operation.

## Command

Install the package. Pass the numbers as arguments and give the instructions
on standard input, one per line:

```sh
printf 'sa\n' | stackcheck 2 1 3
```

The command prints `OK` when the instructions sort the numbers and `KO` when
they do not.

An argument may hold several numbers separated by spaces:

```sh
printf 'pb\nra\npa\n' | stackcheck "3 1 2"
```

The command prints `Error` on standard error and exits with status 255 in any
of these cases:

* a number is not an integer;
* a number is outside the 32-bit signed range;
* a number appears twice;
* fewer than two numbers are given;
* an argument is empty;
* an option is unknown, or conflicts with an earlier option;
* a line of input is not one of the eleven instructions.

Only newline-terminated lines count as instructions. Text after the last
newline is ignored. With no arguments at all, the command exits at once with
status 0.

### Display options

You may add one of these options to the arguments. You may repeat the same
option, but you cannot combine two different ones.

* `--bench` prints a summary to standard error in place of `OK`/`KO`. It
  shows the count of numbers, the initial disorder as a percentage of pairs in
  the wrong order, the total operations, the swap-and-push count ("changes"),
  the rotation count ("moves"), the count for each instruction, and a verdict
  line.
* `--benchview` redraws the terminal screen around every instruction. The
  screen shows the values of both stacks (the first 24 of each), a balance
  marker for how the numbers are split between the stacks, and the operation
  count. A verdict line is drawn at the end.
* `--benchanim` gives the same view, and also animates each instruction frame
  by frame.

If you press Ctrl-C during a run, the command prints an interruption notice
and exits.

## Library use

```python
from stackcheck.stacks import Stacks

stacks = Stacks([2, 1, 3])
stacks.execute("sa", 1)
assert stacks.sorting_done() == 1
```

### `stackcheck.stacks`

* `Stacks` holds the two stacks as `a` and `b` (deques) and the per-instruction
  counters in `counts`. It has one method per instruction (`sa()` ... `rrr()`)
  and these members:
  * `execute(instruction, quantity)` runs an instruction by name; unknown
    names do nothing.
  * `ops` is the total number of operations.
  * `changes()` and `moves()` give the swap-and-push and rotation totals.
  * `sorting_done()` returns 0 when the stacks are unsorted and 1 when they are
    sorted. It returns 2 when they are sorted and at least 100 numbers took no
    more than 700 operations, or at least 500 numbers took no more than 5500.
  * An optional `observer` is called with a step code around each operation.
* `ranks(values)` gives each value's position in sorted order.
* `count_not_progressive(values)` counts places where a value exceeds its
  circular successor.
* `compute_disorder(values)` gives the fraction of pairs that are out of
  order. It needs at least two values.

### `stackcheck.checker`

* `run_checker(stacks, instructions)` runs an instruction list and returns the
  verdict of `sorting_done()`.
* `read_instructions(text)` splits and validates instruction text.
* `parse_arguments(args)` turns command-line arguments into the numbers and a
  `BenchMode`.
* `is_valid_instruction(text)` and `debrief_text(stacks)` are also provided.
* Invalid input raises `CheckerError`.
* `main(argv=None)` is the command itself.

### Drawing

* `stackcheck.canvas` provides `Canvas`, an 80×50 grid of `Cell`s (character,
  colour digit, banner counter). It has drawing primitives, and `render()`
  returns the grid as text with ANSI colour codes.
* `stackcheck.anim_swap_push`, `stackcheck.anim_rotate` and
  `stackcheck.anim_reverse` provide `animate_sa` ... `animate_rrr`. Each takes a
  canvas and a panel text and yields rendered frames.
* `stackcheck.checker.animate(canvas, step, panel)` picks the animation for an
  operation's step code.

## What is not included

The view options draw on a blank grid. They have no decorative screen layout:
no framed template, scrolling title banner, large-digit counters, progress bar
or order histogram. The animation panels show only the instruction's name.

## Development

```sh
pip install -e ".[test]"
pytest
```