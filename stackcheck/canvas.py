"""A character grid with per-cell colours, and the drawing primitives used on it."""

from __future__ import annotations

from dataclasses import dataclass

HEIGHT = 50
WIDTH = 80
ELEMENT_WIDTH = 12

RESET = "\033[0m"

_GAP_ROW_LENGTH = 13

_UPPER_GAPS = {
    1: "    ╱   ╲    ╱▔▔▔     ▔▔▔╲",
    2: "   ▎     ▕   ╱▔▔       ▔▔╲",
    3: " ╲         ╱ ╱▔         ▔╲",
}

_LOWER_GAPS = {
    1: "╲▁▁▁     ▁▁▁╱    ╲   ╱    ",
    2: "╲▁▁       ▁▁╱   ▎     ▕   ",
    3: "╲▁         ▁╱ ╱         ╲ ",
}

_BANNER_CYCLE = {"6": "7", "4": "6", "5": "4", "7": "5"}

_SWAP_ZONES = {11: ("6", "7"), 12: ("7", "6"), 13: ("6", "6")}
_ROTATE_ZONES = {31: ("7", "a"), 32: ("a", "7"), 33: ("7", "7")}


def _escape(color: str) -> str:
    return f"\033[0;1;3{color}m"


@dataclass
class Cell:
    """One position of the grid: a character, a colour digit and a banner counter."""

    char: str = " "
    color: str = "7"
    passes: int = 0


class Canvas:
    """A grid of cells addressed by column x and row y."""

    def __init__(self, height: int = HEIGHT, width: int = WIDTH) -> None:
        self.height = height
        self.width = width
        self.rows: list[list[Cell]] = [
            [Cell() for _ in range(width - 1)] + [Cell(char="\n")] for _ in range(height)
        ]

    def _cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the canvas")
        return self.rows[y][x]

    def read_element(self, x: int, y: int) -> str:
        """Return the twelve characters starting at (x, y)."""
        return "".join(self._cell(x + i, y).char for i in range(ELEMENT_WIDTH))

    def write_element(self, x: int, y: int, text: str) -> None:
        """Write text from (x, y); a digit right after it is blanked."""
        for offset, char in enumerate(text):
            self._cell(x + offset, y).char = char
        end = x + len(text)
        if end < self.width:
            cell = self._cell(end, y)
            if "0" <= cell.char <= "9":
                cell.char = " "

    def put_char(self, char: str, x: int, y: int, color: str) -> None:
        """Set one cell's character and colour."""
        cell = self._cell(x, y)
        cell.color = color
        cell.char = char

    def put_number(self, n: int, x: int, y: int) -> None:
        """Write an integer right-aligned so that its last digit sits at column x."""
        digits = str(int(n))
        start = x + 1 - len(digits)
        for offset, char in enumerate(digits):
            self.put_char(char, start + offset, y, "6")

    def put_text_right(self, text: str, x: int, y: int) -> None:
        """Write text right-aligned so that its last character sits at column x."""
        start = x + 1 - len(text)
        for offset, char in enumerate(text):
            self.put_char(char, start + offset, y, "6")

    def put_spaces(self, x: int, x_end: int, y: int) -> None:
        """Blank digits, minus signs and dots from column x to x_end inclusive."""
        for col in range(x, x_end + 1):
            cell = self._cell(col, y)
            if ("0" <= cell.char <= "9") or cell.char in "-.":
                cell.char = " "
                cell.color = "7"

    def put_number_centered(self, n: int, x: int, y: int, color: str) -> None:
        """Write an integer centred in the twelve-column element starting at x."""
        digits = str(int(n))
        start = x + 5 - len(digits) // 2
        for offset, char in enumerate(digits):
            self.put_char(char, start + offset, y, color)

    def show_balance_level(self, count_a: int, count_total: int) -> None:
        """Draw the balance line on row 38, its marker placed by stack a's share."""
        if count_total <= 0:
            raise ValueError("the total count must be positive")
        marker = 50 - (count_a * 22) // count_total
        for x in range(28, 52):
            if x == marker:
                self.put_char("⬤", x, 38, "5")
            elif x == marker + 1:
                self.put_char(" ", x, 38, "3")
            else:
                self.put_char("─", x, 38, "3")

    def paint_zone_up(self, ca: str, cb: str, cc: str) -> None:
        """Colour the heads of both stacks and the centre panel.

        A centre colour of '1' or '2' also recolours the whole work area,
        except cells coloured '3' or '7'.
        """
        for y in range(11, 39):
            for x in range(2, 78):
                cell = self.rows[y][x]
                if 13 < y < 16 and 2 < x < 40 and "2" < ca <= "9":
                    cell.color = ca
                if 13 < y < 16 and 40 < x < 78 and "2" < cb <= "9":
                    cell.color = cb
                if 20 <= y < 38 and 28 <= x <= 51 and "0" <= cc <= "9":
                    cell.color = cc
                if 10 < y < 39 and 1 < x < 79 and cc in ("1", "2"):
                    if cell.color not in ("3", "7"):
                        cell.color = cc

    def paint_zone_down(self, ca: str, cb: str) -> None:
        """Colour row 29 under stack a with ca and under stack b with cb."""
        for x in range(3, 40):
            self._cell(x, 29).color = ca
        for x in range(41, 78):
            self._cell(x, 29).color = cb

    def paint_cells(self, x: int, y: int, color: str) -> None:
        """Colour the twelve cells starting at (x, y)."""
        for i in range(ELEMENT_WIDTH):
            self._cell(x + i, y).color = color

    def scroll_banner(self) -> None:
        """Advance the banner colour animation by one tick."""
        for y in range(2, 8):
            for x in range(9, 71):
                cell = self.rows[y][x]
                if cell.passes < 16:
                    cell.passes += 1
                else:
                    cell.passes = 0
                    cell.color = _BANNER_CYCLE.get(cell.color, cell.color)

    def _show_gap(self, x_start: int, y_start: int, text: str) -> None:
        for index, char in enumerate(text):
            if index < _GAP_ROW_LENGTH:
                self._cell(x_start + index, y_start).char = char
            else:
                self._cell(x_start + index - _GAP_ROW_LENGTH, y_start + 1).char = char

    def separator_opener(self, pos: int, step: int) -> None:
        """Draw a stage of the separator opening.

        pos is 10 * stack (1 for a, 2 for b) + part (1 upper, 2 lower, 3 both);
        step runs from 1 to 3. Anything else draws nothing.
        """
        if not 1 <= step <= 3:
            return
        stack, part = divmod(pos, 10)
        if not (1 <= stack <= 2 and 1 <= part <= 3):
            return
        x = stack * 39 - 25
        if part in (1, 3):
            self._show_gap(x, 24, _UPPER_GAPS[step])
        if part in (2, 3):
            self._show_gap(x, 27, _LOWER_GAPS[step])

    def put_panel(self, panel: str) -> None:
        """Write the panel text in rows of 24 characters from (28, 19)."""
        for index, char in enumerate(panel):
            row, col = divmod(index, 24)
            self._cell(28 + col, 19 + row).char = char

    def render(self, color: str = "7") -> str:
        """Return the grid as text, switching colour with escape codes as needed."""
        parts: list[str] = []
        for row in self.rows:
            for cell in row:
                if color != cell.color and cell.char != " ":
                    color = cell.color
                    parts.append(_escape(color))
                parts.append(cell.char)
        parts.append(RESET)
        return "".join(parts)


def _centre_color(frame: int, last: int) -> str:
    if frame < 1 or frame > last:
        return "0"
    if frame < 3 or frame > last - 2:
        return "4"
    return "6"


def swap_colors(canvas: Canvas, op: int, frame: int) -> None:
    """Colour the zones for frame of a swap animation (op 11, 12 or 13)."""
    if op not in _SWAP_ZONES:
        return
    ca, cb = _SWAP_ZONES[op]
    canvas.paint_zone_up(ca, cb, _centre_color(frame, 12))


def rotate_colors(canvas: Canvas, op: int, frame: int) -> None:
    """Colour the zones for frame of a rotation animation (op 31, 32 or 33)."""
    if op not in _ROTATE_ZONES:
        return
    ca, cb = _ROTATE_ZONES[op]
    canvas.paint_zone_up(ca, cb, _centre_color(frame, 37))