import pytest

from stackcheck.canvas import Canvas, Cell, rotate_colors, swap_colors


@pytest.fixture
def canvas():
    return Canvas()


def test_new_canvas_is_blank_with_newline_column(canvas):
    assert canvas.rows[0][0] == Cell(" ", "7", 0)
    assert canvas.rows[10][79].char == "\n"
    assert len(canvas.rows) == 50
    assert all(len(row) == 80 for row in canvas.rows)


def test_write_then_read_element_round_trip(canvas):
    canvas.write_element(14, 14, "    42      ")
    assert canvas.read_element(14, 14) == "    42      "


def test_write_element_blanks_following_digit(canvas):
    canvas.put_char("9", 17, 3, "7")
    canvas.write_element(14, 3, "abc")
    assert canvas.rows[3][17].char == " "
    assert canvas.read_element(14, 3)[:3] == "abc"


def test_write_element_keeps_following_letter(canvas):
    canvas.put_char("x", 17, 3, "7")
    canvas.write_element(14, 3, "abc")
    assert canvas.rows[3][17].char == "x"


def test_put_char_outside_raises(canvas):
    with pytest.raises(IndexError):
        canvas.put_char("x", -1, 0, "7")
    with pytest.raises(IndexError):
        canvas.put_char("x", 0, 50, "7")


def test_put_number_is_right_aligned(canvas):
    canvas.put_number(1234, 36, 11)
    assert "".join(c.char for c in canvas.rows[11][33:37]) == "1234"
    assert canvas.rows[11][37].char == " "
    assert all(c.color == "6" for c in canvas.rows[11][33:37])


def test_put_number_negative_and_zero(canvas):
    canvas.put_number(-56, 20, 5)
    assert "".join(c.char for c in canvas.rows[5][18:21]) == "-56"
    canvas.put_number(0, 40, 5)
    assert canvas.rows[5][40].char == "0"


def test_put_text_right_ends_at_x(canvas):
    canvas.put_text_right("Check operations", 75, 12)
    text = "".join(c.char for c in canvas.rows[12][60:76])
    assert text == "Check operations"
    assert canvas.rows[12][76].char == " "


def test_put_spaces_clears_numbers_only(canvas):
    canvas.write_element(15, 20, "-1.5ab")
    canvas.put_spaces(15, 26, 20)
    assert canvas.read_element(15, 20) == "    ab      "
    assert canvas.rows[20][15].color == "7"


def test_put_number_centered_round_trip(canvas):
    canvas.put_number_centered(7, 15, 14, "7")
    assert canvas.read_element(15, 14).strip() == "7"
    canvas.put_spaces(15, 26, 14)
    canvas.put_number_centered(-300, 15, 14, "6")
    assert canvas.read_element(15, 14).strip() == "-300"


def test_show_balance_level_marker_positions(canvas):
    canvas.show_balance_level(0, 10)
    assert canvas.rows[38][50].char == "⬤"
    assert canvas.rows[38][51].char == " "
    canvas.show_balance_level(10, 10)
    assert canvas.rows[38][28].char == "⬤"
    assert canvas.rows[38][50].char == "─"
    assert sum(c.char == "⬤" for c in canvas.rows[38]) == 1


def test_show_balance_level_needs_total(canvas):
    with pytest.raises(ValueError):
        canvas.show_balance_level(0, 0)


def test_paint_zone_up_heads_and_centre(canvas):
    canvas.paint_zone_up("6", "5", "4")
    assert canvas.rows[14][10].color == "6"
    assert canvas.rows[15][60].color == "5"
    assert canvas.rows[25][30].color == "4"
    assert canvas.rows[13][10].color == "7"


def test_paint_zone_up_ignores_letter_colours(canvas):
    canvas.rows[14][60].color = "3"
    canvas.paint_zone_up("7", "a", "0")
    assert canvas.rows[14][60].color == "3"


def test_paint_zone_up_verdict_spares_3_and_7(canvas):
    canvas.rows[20][5].color = "4"
    canvas.rows[20][6].color = "3"
    canvas.paint_zone_up("7", "7", "1")
    assert canvas.rows[20][5].color == "1"
    assert canvas.rows[20][6].color == "3"
    assert canvas.rows[20][7].color == "7"


def test_paint_zone_down(canvas):
    canvas.paint_zone_down("4", "5")
    assert all(c.color == "4" for c in canvas.rows[29][3:40])
    assert canvas.rows[29][40].color == "7"
    assert all(c.color == "5" for c in canvas.rows[29][41:78])


def test_paint_cells_covers_twelve(canvas):
    canvas.paint_cells(14, 14, "6")
    colors = [c.color for c in canvas.rows[14][13:27]]
    assert colors.count("6") == 12
    assert colors[0] == "7" and colors[-1] == "7"


def test_scroll_banner_cycles_after_seventeen_ticks(canvas):
    canvas.rows[3][20].color = "6"
    canvas.rows[3][5].color = "6"
    for _ in range(16):
        canvas.scroll_banner()
    assert canvas.rows[3][20].color == "6"
    canvas.scroll_banner()
    assert canvas.rows[3][20].color == "7"
    assert canvas.rows[3][20].passes == 0
    assert canvas.rows[3][5].color == "6"


def test_separator_opener_writes_gap_rows(canvas):
    canvas.separator_opener(11, 1)
    top = "".join(c.char for c in canvas.rows[24][14:27])
    below = "".join(c.char for c in canvas.rows[25][14:27])
    assert top + below == "    ╱   ╲    ╱▔▔▔     ▔▔▔╲"
    assert canvas.rows[27][14].char == " "


def test_separator_opener_lower_on_stack_b(canvas):
    canvas.separator_opener(22, 3)
    top = "".join(c.char for c in canvas.rows[27][53:66])
    below = "".join(c.char for c in canvas.rows[28][53:66])
    assert top + below == "╲▁         ▁╱ ╱         ╲ "


@pytest.mark.parametrize("pos,step", [(11, 0), (11, 4), (31, 1), (14, 2), (10, 1)])
def test_separator_opener_out_of_range_draws_nothing(canvas, pos, step):
    before = canvas.render()
    canvas.separator_opener(pos, step)
    assert canvas.render() == before


def test_put_panel_rows_of_24(canvas):
    panel = "A" * 24 + "B" * 24
    canvas.put_panel(panel)
    assert "".join(c.char for c in canvas.rows[19][28:52]) == "A" * 24
    assert "".join(c.char for c in canvas.rows[20][28:52]) == "B" * 24
    assert canvas.rows[21][28].char == " "


def test_render_plain_and_coloured():
    small = Canvas(height=2)
    assert small.render("7") == (" " * 79 + "\n") * 2 + "\033[0m"
    small.put_char("x", 3, 0, "6")
    out = small.render("7")
    assert "\033[0;1;36mx" in out
    assert out.endswith("\033[0m")


def test_render_skips_escape_for_coloured_space():
    small = Canvas(height=1)
    small.rows[0][0].color = "2"
    assert "\033[0;1;32m" not in small.render("7")


def test_swap_colors_frames(canvas):
    swap_colors(canvas, 11, 0)
    assert canvas.rows[14][10].color == "6"
    assert canvas.rows[25][30].color == "0"
    swap_colors(canvas, 11, 6)
    assert canvas.rows[25][30].color == "6"
    swap_colors(canvas, 11, 2)
    assert canvas.rows[25][30].color == "4"


def test_swap_colors_unknown_op_does_nothing(canvas):
    before = canvas.render()
    swap_colors(canvas, 99, 5)
    assert canvas.render() == before


def test_rotate_colors(canvas):
    rotate_colors(canvas, 32, 20)
    assert canvas.rows[25][30].color == "6"
    assert canvas.rows[14][60].color == "7"
    rotate_colors(canvas, 33, 38)
    assert canvas.rows[25][30].color == "0"
    rotate_colors(canvas, 31, 36)
    assert canvas.rows[25][30].color == "4"