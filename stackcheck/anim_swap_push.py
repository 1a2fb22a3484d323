"""Frame-by-frame animations of the swap (sa, sb, ss) and push (pa, pb) operations."""

from __future__ import annotations

from collections.abc import Iterator

from stackcheck.canvas import Canvas, rotate_colors, swap_colors

SEPARATOR_MARK = "╱"

_SWAP_FRAMES = 14
_PUSH_FRAMES = 39

_A_COLUMN = 14
_A_COLUMN_END = 28
_B_COLUMN = 53
_B_COLUMN_END = 67


def _frame(canvas: Canvas) -> str:
    """Advance the banner and return the rendered grid."""
    canvas.scroll_banner()
    return canvas.render("7")


def _has_separator(canvas: Canvas, col: int) -> bool:
    return canvas.rows[25][col].char == SEPARATOR_MARK


def _sa_step(canvas: Canvas, frame: int, first: str, second: str) -> None:
    if frame < 7:
        canvas.write_element(14 - frame, 14, first)
        canvas.paint_cells(14 - frame, 14, "6")
        canvas.write_element(14 + frame, 15, second)
        canvas.paint_cells(14 + frame, 15, "6")
    if frame == 7:
        canvas.put_spaces(4, 40, 14)
        canvas.put_spaces(4, 40, 15)
        canvas.paint_zone_up("6", "7", "6")
    if frame >= 7:
        canvas.write_element(28 - frame, 14, second)
        canvas.paint_cells(28 - frame, 14, "6")
        canvas.write_element(frame, 15, first)
        canvas.paint_cells(frame, 15, "6")


def _sb_step(canvas: Canvas, frame: int, first: str, second: str) -> None:
    if frame < 7:
        canvas.write_element(53 + frame, 14, first)
        canvas.paint_cells(53 + frame, 14, "6")
        canvas.write_element(53 - frame, 15, second)
        canvas.paint_cells(53 - frame, 15, "6")
    if frame == 7:
        canvas.put_spaces(41, 77, 14)
        canvas.put_spaces(41, 77, 15)
        canvas.paint_zone_up("7", "6", "6")
    if frame >= 7:
        canvas.write_element(39 + frame, 14, second)
        canvas.paint_cells(39 + frame, 14, "6")
        canvas.write_element(67 - frame, 15, first)
        canvas.paint_cells(67 - frame, 15, "6")


def animate_sa(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate swapping the first two elements of stack a, yielding each frame."""
    first = canvas.read_element(14, 14)
    second = canvas.read_element(14, 15)
    canvas.put_panel(panel)
    for frame in range(_SWAP_FRAMES):
        _sa_step(canvas, frame, first, second)
        swap_colors(canvas, 11, frame)
        yield _frame(canvas)


def animate_sb(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate swapping the first two elements of stack b, yielding each frame."""
    first = canvas.read_element(53, 14)
    second = canvas.read_element(53, 15)
    canvas.put_panel(panel)
    for frame in range(_SWAP_FRAMES):
        _sb_step(canvas, frame, first, second)
        swap_colors(canvas, 12, frame)
        yield _frame(canvas)


def animate_ss(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate swapping the heads of both stacks, yielding each frame."""
    first_a = canvas.read_element(14, 14)
    second_a = canvas.read_element(14, 15)
    first_b = canvas.read_element(53, 14)
    second_b = canvas.read_element(53, 15)
    canvas.put_panel(panel)
    for frame in range(_SWAP_FRAMES):
        _sa_step(canvas, frame, first_a, second_a)
        _sb_step(canvas, frame, first_b, second_b)
        swap_colors(canvas, 13, frame)
        yield _frame(canvas)


def _shift_down(canvas: Canvas, col: int, col_end: int, frame: int) -> None:
    row = 37 - frame
    element = canvas.read_element(col, row)
    canvas.put_spaces(col, col_end, row)
    canvas.write_element(col, row + 1, element)


def _shift_up(canvas: Canvas, col: int, col_end: int, frame: int) -> None:
    element = canvas.read_element(col, frame)
    canvas.put_spaces(col, col_end, frame)
    canvas.write_element(col, frame - 1, element)


def _stack_down(canvas: Canvas, col: int, col_end: int, pos: int, frame: int) -> None:
    """Make room at the head of a stack by moving its column down one row."""
    if _has_separator(canvas, col):
        if 14 < frame < 24:
            _shift_down(canvas, col, col_end, frame)
        canvas.separator_opener(pos, frame - 11)
    elif 1 <= frame < 24:
        _shift_down(canvas, col, col_end, frame)


def _stack_up(canvas: Canvas, col: int, col_end: int, pos: int, frame: int) -> None:
    """Close the gap left at the head of a stack by moving its column up one row."""
    if _has_separator(canvas, col):
        if 14 < frame < 24:
            _shift_up(canvas, col, col_end, frame)
        canvas.separator_opener(pos, frame - 11)
    elif 14 < frame < 38:
        _shift_up(canvas, col, col_end, frame)


def animate_pa(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate moving the head of stack b onto stack a, yielding each frame."""
    first = canvas.read_element(53, 14)
    canvas.put_panel(panel)
    for frame in range(_PUSH_FRAMES):
        canvas.write_element(53 - frame, 14, first)
        _stack_down(canvas, _A_COLUMN, _A_COLUMN_END, 11, frame)
        _stack_up(canvas, _B_COLUMN, _B_COLUMN_END, 21, frame)
        rotate_colors(canvas, 33, frame)
        canvas.paint_cells(53 - frame, 14, "6")
        yield _frame(canvas)


def animate_pb(canvas: Canvas, panel: str) -> Iterator[str]:
    """Animate moving the head of stack a onto stack b, yielding each frame."""
    first = canvas.read_element(14, 14)
    canvas.put_panel(panel)
    for frame in range(_PUSH_FRAMES):
        canvas.write_element(14 + frame, 14, first)
        _stack_up(canvas, _A_COLUMN, _A_COLUMN_END, 11, frame)
        _stack_down(canvas, _B_COLUMN, _B_COLUMN_END, 21, frame)
        rotate_colors(canvas, 33, frame)
        canvas.paint_cells(14 + frame, 14, "6")
        yield _frame(canvas)