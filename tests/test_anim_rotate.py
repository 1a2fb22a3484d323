import pytest

from stackcheck.anim_rotate import (
    animate_ra,
    animate_rb,
    animate_rr,
    column_length,
    ra_long_step,
    ra_step,
    rb_step,
)
from stackcheck.canvas import RESET, Canvas

PANEL = "rotate panel"


def _canvas_with(a_values, b_values):
    canvas = Canvas()
    for row, value in enumerate(a_values, start=14):
        canvas.put_number_centered(value, 15, row, "7")
    for row, value in enumerate(b_values, start=14):
        canvas.put_number_centered(value, 54, row, "7")
    return canvas


def _column(canvas, col, count):
    return [canvas.rows[14 + i][col].char for i in range(count)]


def test_column_length_counts_shown_rows():
    canvas = _canvas_with([1, 2, 3], [4, 5])
    assert column_length(canvas, 20) == 3
    assert column_length(canvas, 59) == 2
    assert column_length(Canvas(), 20) == 0


def test_column_length_adds_separator():
    canvas = _canvas_with([1, 2, 3], [])
    canvas.rows[25][14].char = "╱"
    assert column_length(canvas, 20) == column_length(_canvas_with([1, 2, 3], []), 20) + 4


def test_ra_rotates_stack_a():
    canvas = _canvas_with([1, 2, 3], [])
    length = column_length(canvas, 20)
    frames = list(animate_ra(canvas, PANEL))
    assert len(frames) == 26 + length
    assert _column(canvas, 20, 3) == ["2", "3", "1"]


def test_rb_rotates_stack_b():
    canvas = _canvas_with([], [4, 5, 6])
    length = column_length(canvas, 59)
    frames = list(animate_rb(canvas, PANEL))
    assert len(frames) == 26 + length
    assert _column(canvas, 59, 3) == ["5", "6", "4"]


def test_rr_rotates_both_stacks():
    canvas = _canvas_with([1, 2, 3], [4, 5])
    frames = list(animate_rr(canvas, PANEL))
    assert len(frames) == 26 + 3
    assert _column(canvas, 20, 3) == ["2", "3", "1"]
    assert _column(canvas, 59, 2) == ["5", "4"]


def test_frames_end_with_reset():
    canvas = _canvas_with([1, 2], [])
    frames = list(animate_ra(canvas, PANEL))
    assert all(frame.endswith(RESET) for frame in frames)


def test_ra_step_first_frame_writes_head():
    canvas = Canvas()
    ra_step(canvas, 0, 3, "ABCDEFGHIJKL")
    assert canvas.read_element(14, 14) == "ABCDEFGHIJKL"
    assert all(canvas.rows[14][14 + i].color == "6" for i in range(12))


def test_rb_step_first_frame_writes_head():
    canvas = Canvas()
    rb_step(canvas, 0, 3, "ABCDEFGHIJKL")
    assert canvas.read_element(53, 14) == "ABCDEFGHIJKL"


def test_ra_step_after_animation_does_nothing():
    canvas = Canvas()
    before = canvas.render()
    ra_step(canvas, 26 + 3, 3, "ABCDEFGHIJKL")
    assert canvas.render() == before


def test_ra_long_step_lifts_next_element():
    canvas = _canvas_with([1, 2, 3], [])
    second = canvas.read_element(14, 15)
    ra_long_step(canvas, 14, 3)
    assert canvas.read_element(14, 14) == second
    assert canvas.rows[15][20].char == " "


def test_ra_step_outside_canvas_raises():
    canvas = Canvas()
    with pytest.raises(IndexError):
        ra_step(canvas, 13, 40, "ABCDEFGHIJKL")
        ra_step(canvas, 60, 40, "ABCDEFGHIJKL")