"""Frame-by-frame animations of the rotations ra, rb and rr."""

from __future__ import annotations

from collections.abc import Iterator

from stackcheck.canvas import Canvas, rotate_colors

SEPARATOR_MARK = "╱"

_A_LEFT = 14
_A_RIGHT = 27
_B_LEFT = 53
_B_RIGHT = 67


def _frame(canvas: Canvas) -> str:
    """Advance the banner and return the rendered grid."""
    canvas.scroll_banner()
    return canvas.render("7")


def column_length(canvas: Canvas, col: int) -> int:
    """Count the shown rows of a stack column, plus four when it has a separator."""
    length = sum(1 for y in range(14, 38) if canvas.rows[y][col].char != " ")
    if canvas.rows[25][col - 6].char == SEPARATOR_MARK:
        length += 4
    return length


def _lift(canvas: Canvas, col: int, col_end: int, row: int, write: bool) -> None:
    element = canvas.read_element(col, row)
    canvas.put_spaces(col, col_end, row)
    if write:
        canvas.write_element(col, row - 1, element)
        canvas.paint_cells(col, row - 1, "7")


def _long_step(
    canvas: Canvas, frame: int, length: int, col: int, col_end: int, pos: int
) -> None:
    if canvas.rows[25][col].char == SEPARATOR_MARK:
        if 14 < frame < 24:
            _lift(canvas, col, col_end, frame, True)
        canvas.separator_opener(pos, frame - (26 + length) // 4)
        if 28 < frame < 38:
            _lift(canvas, col, col_end, frame, frame >= 30)
    elif 14 <= frame < 14 + length:
        _lift(canvas, col, col_end, frame + 1, frame < 13 + length)


def ra_long_step(canvas: Canvas, frame: int, length: int) -> None:
    """Move the rest of stack a up by one row during frame of an ra animation."""
    _long_step(canvas, frame, length, _A_LEFT, _A_RIGHT, 13)


def rb_long_step(canvas: Canvas, frame: int, length: int) -> None:
    """Move the rest of stack b up by one row during frame of an rb animation."""
    _long_step(canvas, frame, length, _B_LEFT, _B_RIGHT, 23)


def ra_step(canvas: Canvas, frame: int, length: int, first: str) -> None:
    """Move the former head of stack a along its path round the left side."""
    if frame < 13:
        canvas.write_element(14 - frame, 14, first)
        rotate_colors(canvas, 31, frame)
        canvas.paint_cells(14 - frame, 14, "6")
    elif frame < 13 + length:
        canvas.write_element(2, frame + 1, first)
        if frame > 13:
            canvas.put_spaces(2, 13, frame)
        canvas.paint_cells(2, frame + 1, "6")
    elif frame < 26 + length:
        x = frame - 11 - length
        canvas.write_element(x, 13 + length, first)
        canvas.paint_cells(x, 13 + length, "6")
        rotate_colors(canvas, 31, frame - 12)


def rb_step(canvas: Canvas, frame: int, length: int, first: str) -> None:
    """Move the former head of stack b along its path round the right side."""
    if frame < 13:
        canvas.write_element(53 + frame, 14, first)
        rotate_colors(canvas, 32, frame)
        canvas.paint_cells(53 + frame, 14, "6")
    elif frame < 13 + length:
        canvas.write_element(66, frame + 1, first)
        if frame > 13:
            canvas.put_spaces(66, 77, frame)
        canvas.paint_cells(66, frame + 1, "6")
    elif frame < 26 + length:
        x = 78 + length - frame
        canvas.write_element(x, 13 + length, first)
        canvas.paint_cells(x, 13 + length, "6")
        rotate_colors(canvas, 32, frame - 12)


def animate_ra(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate rotating stack a, yielding each frame."""
    first = canvas.read_element(14, 14)
    canvas.put_panel(panel)
    length = column_length(canvas, 20)
    for frame in range(26 + length):
        ra_step(canvas, frame, length, first)
        ra_long_step(canvas, frame, length)
        yield _frame(canvas)


def animate_rb(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate rotating stack b, yielding each frame."""
    first = canvas.read_element(53, 14)
    canvas.put_panel(panel)
    length = column_length(canvas, 59)
    for frame in range(26 + length):
        rb_step(canvas, frame, length, first)
        rb_long_step(canvas, frame, length)
        yield _frame(canvas)


def animate_rr(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate rotating both stacks at once, yielding each frame."""
    length = max(column_length(canvas, 20), column_length(canvas, 59))
    canvas.put_panel(panel)
    first_a = canvas.read_element(14, 14)
    first_b = canvas.read_element(53, 14)
    length_a = column_length(canvas, 20)
    length_b = column_length(canvas, 59)
    for frame in range(26 + length):
        if frame < 26 + length_a:
            ra_step(canvas, frame, length_a, first_a)
        if frame < 26 + length_b:
            rb_step(canvas, frame, length_b, first_b)
        if frame < 26 + length_a:
            ra_long_step(canvas, frame, length_a)
        if frame < 26 + length_b:
            rb_long_step(canvas, frame, length_b)
        yield _frame(canvas)