"""Frame-by-frame animations of the reverse rotations rra, rrb and rrr."""

from __future__ import annotations

from collections.abc import Iterator

from stackcheck.anim_rotate import SEPARATOR_MARK, column_length
from stackcheck.canvas import Canvas, rotate_colors

_A_LEFT = 14
_A_RIGHT = 27
_B_LEFT = 53
_B_RIGHT = 67


def _frame(canvas: Canvas) -> str:
    """Advance the banner and return the rendered grid."""
    canvas.scroll_banner()
    return canvas.render("7")


def _drop(canvas: Canvas, col: int, col_end: int, row: int, write: bool) -> None:
    element = canvas.read_element(col, row)
    canvas.put_spaces(col, col_end, row)
    if write:
        canvas.write_element(col, row + 1, element)
        canvas.paint_cells(col, row + 1, "7")


def _long_step(
    canvas: Canvas, frame: int, length: int, col: int, col_end: int, pos: int
) -> None:
    if canvas.rows[25][col].char == SEPARATOR_MARK:
        if 15 < frame < 24:
            _drop(canvas, col, col_end, 52 - frame, True)
        canvas.separator_opener(pos, frame - (26 + length) // 4)
        if 28 < frame < 39:
            _drop(canvas, col, col_end, 52 - frame, frame >= 30)
    elif 15 <= frame < 14 + length:
        _drop(canvas, col, col_end, 27 + length - frame, True)


def rra_long_step(canvas: Canvas, frame: int, length: int) -> None:
    """Move the rest of stack a down by one row during frame of an rra animation."""
    _long_step(canvas, frame, length, _A_LEFT, _A_RIGHT, 13)


def rrb_long_step(canvas: Canvas, frame: int, length: int) -> None:
    """Move the rest of stack b down by one row during frame of an rrb animation."""
    _long_step(canvas, frame, length, _B_LEFT, _B_RIGHT, 23)


def rra_step(canvas: Canvas, frame: int, length: int, last: str) -> None:
    """Move the former last element of stack a round the left side to the head."""
    if frame < 13:
        canvas.write_element(14 - frame, 13 + length, last)
        rotate_colors(canvas, 31, frame)
        canvas.paint_cells(14 - frame, 13 + length, "6")
    elif frame < 13 + length:
        row = 26 + length - frame
        canvas.write_element(2, row, last)
        if frame > 13:
            canvas.put_spaces(2, 15, row + 1)
        canvas.paint_cells(2, row, "6")
    elif frame < 26 + length:
        x = frame - 11 - length
        canvas.write_element(x, 14, last)
        rotate_colors(canvas, 31, frame - 12)
        canvas.paint_cells(x, 14, "6")


def rrb_step(canvas: Canvas, frame: int, length: int, last: str) -> None:
    """Move the former last element of stack b round the right side to the head."""
    if frame < 13:
        canvas.write_element(53 + frame, 13 + length, last)
        rotate_colors(canvas, 32, frame)
        canvas.paint_cells(53 + frame, 13 + length, "6")
    elif frame < 13 + length:
        row = 26 + length - frame
        canvas.write_element(66, row, last)
        if frame > 13:
            canvas.put_spaces(66, 77, row + 1)
        canvas.paint_cells(66, row, "6")
    elif frame < 26 + length:
        x = 78 + length - frame
        canvas.write_element(x, 14, last)
        rotate_colors(canvas, 32, frame - 12)
        canvas.paint_cells(x, 14, "6")


def animate_rra(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate reverse-rotating stack a, yielding each frame."""
    canvas.put_panel(panel)
    length = column_length(canvas, 20)
    last = canvas.read_element(14, 13 + length)
    for frame in range(26 + length):
        rra_step(canvas, frame, length, last)
        rra_long_step(canvas, frame, length)
        yield _frame(canvas)


def animate_rrb(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate reverse-rotating stack b, yielding each frame."""
    canvas.put_panel(panel)
    length = column_length(canvas, 59)
    last = canvas.read_element(53, 13 + length)
    for frame in range(26 + length):
        rrb_step(canvas, frame, length, last)
        rrb_long_step(canvas, frame, length)
        yield _frame(canvas)


def animate_rrr(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate reverse-rotating both stacks at once, yielding each frame."""
    length = max(column_length(canvas, 20), column_length(canvas, 59))
    canvas.put_panel(panel)
    length_a = column_length(canvas, 20)
    length_b = column_length(canvas, 59)
    last_a = canvas.read_element(14, 13 + length_a)
    last_b = canvas.read_element(53, 13 + length_b)
    for frame in range(26 + length):
        if frame < 26 + length_a:
            rra_step(canvas, frame, length_a, last_a)
        if frame < 26 + length_b:
            rrb_step(canvas, frame, length_b, last_b)
        if frame < 26 + length_a:
            rra_long_step(canvas, frame, length_a)
        if frame < 26 + length_b:
            rrb_long_step(canvas, frame, length_b)
        yield _frame(canvas)