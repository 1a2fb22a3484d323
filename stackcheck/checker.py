"""The checker command: reads numbers and instructions, runs them, judges the result."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from enum import IntEnum
from typing import TextIO

from stackcheck.anim_reverse import animate_rra, animate_rrb, animate_rrr
from stackcheck.anim_rotate import animate_ra, animate_rb, animate_rr
from stackcheck.anim_swap_push import (
    animate_pa,
    animate_pb,
    animate_sa,
    animate_sb,
    animate_ss,
)
from stackcheck.canvas import Canvas
from stackcheck.stacks import OPERATION_CODES, Stacks, compute_disorder

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FRAME_DELAY = 0.01
_SHOWN_ROWS = 24

_SUCCESS_TEXT = "✅ Effective✌ sequence ✅ "
_FAILURE_TEXT = " ❌ Wrong ⛔ sequence ❌  "

_ANIMATIONS: dict[int, Callable[[Canvas, str], Iterator[str]]] = {
    11: animate_sa,
    12: animate_sb,
    13: animate_ss,
    21: animate_pa,
    22: animate_pb,
    31: animate_ra,
    32: animate_rb,
    33: animate_rr,
    41: animate_rra,
    42: animate_rrb,
    43: animate_rrr,
}

_NAMES_BY_CODE = {code: name for name, code in OPERATION_CODES.items()}

_FLAGS = {
    "--bench": 1,
    "--benchview": 2,
    "--benchanim": 3,
}


class CheckerError(Exception):
    """Raised for invalid arguments or instructions."""


class BenchMode(IntEnum):
    """How the result is shown."""

    NONE = 0
    BENCH = 1
    VIEW = 2
    ANIM = 3


def is_valid_instruction(text: str) -> bool:
    """Return whether text names one of the eleven operations exactly."""
    return text in OPERATION_CODES


def _apply_flag(mode: BenchMode, flag: str) -> BenchMode:
    wanted = _FLAGS.get(flag)
    if wanted is None:
        raise CheckerError(f"unknown option {flag!r}")
    if mode not in (BenchMode.NONE, wanted):
        raise CheckerError(f"option {flag!r} conflicts with an earlier one")
    return BenchMode(wanted)


def parse_arguments(args: Sequence[str]) -> tuple[list[int], BenchMode]:
    """Parse command-line arguments into the numbers and the display mode.

    Each argument may hold several space-separated tokens.
    """
    values: list[int] = []
    seen: set[int] = set()
    mode = BenchMode.NONE
    for arg in args:
        tokens = [token for token in arg.split(" ") if token]
        if not tokens:
            raise CheckerError("empty argument")
        for token in tokens:
            if _INTEGER.fullmatch(token):
                value = int(token)
                if not INT_MIN <= value <= INT_MAX:
                    raise CheckerError(f"{token} is out of range")
                if value in seen:
                    raise CheckerError(f"{token} appears twice")
                seen.add(value)
                values.append(value)
            elif token.startswith("--"):
                mode = _apply_flag(mode, token)
            else:
                raise CheckerError(f"invalid argument {token!r}")
    if len(values) < 2:
        raise CheckerError("at least two numbers are needed")
    return values, mode


def read_instructions(text: str) -> list[str]:
    """Split input into newline-terminated instructions and validate each one.

    Text after the last newline is not an instruction.
    """
    instructions = text.split("\n")[:-1]
    for instruction in instructions:
        if not is_valid_instruction(instruction):
            raise CheckerError(f"invalid instruction {instruction!r}")
    return instructions


def animate(canvas: Canvas, step: int, panel: str) -> Iterator[str]:
    """Return the frames animating the operation with the given step code."""
    animation = _ANIMATIONS.get(step)
    if animation is None:
        return iter(())
    return animation(canvas, panel)


def run_checker(stacks: Stacks, instructions: Sequence[str]) -> int:
    """Execute the instructions and return the verdict of Stacks.sorting_done."""
    for instruction in instructions:
        stacks.execute(instruction, 1)
    return stacks.sorting_done()


def debrief_text(stacks: Stacks) -> str:
    """Return the verdict line shown by the bench displays."""
    return _SUCCESS_TEXT if stacks.sorting_done() >= 1 else _FAILURE_TEXT


def _format_disorder(disorder: float) -> str:
    hundredths = int(disorder * 10000)
    return f"{hundredths // 100}.{hundredths % 100:02d}%"


def _bench_report(stacks: Stacks, disorder: float) -> str:
    counts = stacks.counts
    lines = [
        f"Numbers:    {stacks.total}",
        f"Disorder:   {_format_disorder(disorder)}",
        f"Operations: {stacks.ops}",
        "Strategy:   Check operations",
        f"Changes:    {stacks.changes()}",
        f"Moves:      {stacks.moves()}",
        "  ".join(f"{name}: {counts[name]}" for name in ("sa", "sb", "ss")),
        "  ".join(f"{name}: {counts[name]}" for name in ("pa", "pb")),
        "  ".join(f"{name}: {counts[name]}" for name in ("ra", "rb", "rr")),
        "  ".join(f"{name}: {counts[name]}" for name in ("rra", "rrb", "rrr")),
        debrief_text(stacks),
    ]
    return "\n".join(lines) + "\n"


class _Viewer:
    """Observer that draws the stacks on a canvas after every operation."""

    def __init__(self, mode: BenchMode, out: TextIO) -> None:
        self.mode = mode
        self.out = out
        self.canvas = Canvas()

    def _draw(self, stacks: Stacks) -> None:
        canvas = Canvas()
        for row, value in zip(range(14, 14 + _SHOWN_ROWS), stacks.a):
            canvas.put_number_centered(value, 15, row, "7")
        for row, value in zip(range(14, 14 + _SHOWN_ROWS), stacks.b):
            canvas.put_number_centered(value, 54, row, "7")
        if stacks.total > 0:
            canvas.show_balance_level(len(stacks.a), stacks.total)
        canvas.put_number(stacks.ops, 36, 41)
        self.canvas = canvas

    def _show(self, frame: str) -> None:
        self.out.write("\033[H" + frame)
        self.out.flush()

    def __call__(self, stacks: Stacks, step: int) -> None:
        if step == 0:
            self._draw(stacks)
            self._show(self.canvas.render("7"))
        elif self.mode is BenchMode.ANIM:
            panel = _NAMES_BY_CODE.get(step, "").upper()
            for frame in animate(self.canvas, step, panel):
                self._show(frame)
                time.sleep(_FRAME_DELAY)

    def finish(self, stacks: Stacks) -> None:
        self._draw(stacks)
        color = "2" if stacks.sorting_done() >= 1 else "1"
        text = debrief_text(stacks).ljust(26)
        for x, char in zip(range(27, 53), text):
            self.canvas.put_char(char, x, 43, color)
        self._show(self.canvas.render("7"))


def _run(values: list[int], mode: BenchMode, instructions: list[str]) -> None:
    disorder = compute_disorder(values)
    if mode in (BenchMode.VIEW, BenchMode.ANIM):
        viewer = _Viewer(mode, sys.stdout)
        stacks = Stacks(values, observer=viewer)
        sys.stdout.write("\033[2J\033[?25l")
        run_checker(stacks, instructions)
        viewer.finish(stacks)
        sys.stdout.write("\033[?25h")
        return
    stacks = Stacks(values)
    verdict = run_checker(stacks, instructions)
    if mode is BenchMode.BENCH:
        sys.stderr.write(_bench_report(stacks, disorder))
    else:
        sys.stdout.write("OK\n" if verdict >= 1 else "KO\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checker; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values, mode = parse_arguments(args)
        instructions = read_instructions(sys.stdin.read())
    except CheckerError:
        sys.stdout.write("\033[2J\033[?25h\033[0m")
        sys.stderr.write("Error\n")
        return 255
    try:
        _run(values, mode, instructions)
    except KeyboardInterrupt:
        sys.stdout.write("\033[2J\033[?25h\033[H")
        sys.stdout.write("\n  ✋🛑 Program Checker interrupted 🛑✋\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())