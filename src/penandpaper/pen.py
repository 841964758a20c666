"""Pens that move, turn and draw on a Paper."""

import math

from .colors import RGB, parse_color
from .geometry import normalize_heading, quantize, round_half_up, to_degrees, to_radians
from .paper import Paper
from .primitives import Line, Oval
from .render import FontStyle, TextRenderer


class Pen:
    """A cursor with a position, a heading and a pen that can be up or down.

    Positions are measured from the upper left corner of the paper, y grows
    downward. Headings are degrees: 0 = right, 90 = down, 180 = left,
    270 = up. Both are rounded to 3 decimals on every change.

    A pen draws on exactly one paper; many pens may share a paper.
    """

    def __init__(self, paper: Paper):
        paper.ensure_open()
        self._paper = paper
        self._x = 0.0
        self._y = 0.0
        self._heading = 0.0
        self._down = False

        pen_config = paper.config.pen
        self._color = parse_color(pen_config.color)
        self._stroke_width = pen_config.stroke_width
        self._font_size = pen_config.font_size
        self._bold_threshold = pen_config.bold_threshold
        self._text = TextRenderer(paper.config.font)

    @property
    def paper(self) -> Paper:
        return self._paper

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def position(self) -> tuple[float, float]:
        return self._x, self._y

    @property
    def heading(self) -> float:
        return self._heading

    @property
    def color(self) -> RGB:
        return self._color

    @property
    def stroke_width(self) -> int:
        """Line width of geometric forms; text ignores it."""
        return self._stroke_width

    def set_heading(self, deg: float) -> float:
        """Point the pen at `deg` degrees. Returns the normalized heading."""
        self._heading = normalize_heading(deg)
        return self._heading

    def set_color(self, color) -> RGB:
        self._color = parse_color(color)
        return self._color

    def set_stroke_width(self, width: int) -> int:
        if not isinstance(width, int) or width < 1:
            raise ValueError(f"Stroke width must be a positive integer, got {width!r}")
        self._stroke_width = width
        return self._stroke_width

    # -- pen state ---------------------------------------------------------

    def down(self):
        """Start drawing on subsequent moves."""
        self._down = True

    def up(self):
        """Stop drawing; the pen still moves."""
        self._down = False

    def is_down(self) -> bool:
        return self._down

    # -- motion ------------------------------------------------------------

    def move_to(self, x: float, y: float):
        """Turn towards (x, y) and go there, drawing a line if the pen is down."""
        self._paper.ensure_open()
        self.turn_to(x, y)

        if self._down:
            self._paper.add_primitive(
                Line(
                    start=(round_half_up(self._x), round_half_up(self._y)),
                    end=(round_half_up(x), round_half_up(y)),
                    color=self._color,
                    width=self._stroke_width,
                )
            )

        self._x = quantize(x)
        self._y = quantize(y)
        self._paper.repaint()

    def move_by(self, distance: float):
        """Move along the current heading; negative distances go backward."""
        rad = to_radians(self._heading)
        self.move_to(
            self._x + distance * math.cos(rad),
            self._y + distance * math.sin(rad),
        )

    def turn_to(self, x: float, y: float) -> float:
        """Face the point (x, y) without moving. Returns the new heading."""
        if x == self._x and y == self._y:
            return self._heading

        if y == self._y:
            return self.set_heading(180.0 if x < self._x else 0.0)
        if x == self._x:
            return self.set_heading(270.0 if y < self._y else 90.0)

        angle = to_degrees(math.atan(abs(y - self._y) / abs(x - self._x)))
        if x < self._x and y > self._y:
            angle = 180 - angle
        elif x < self._x and y < self._y:
            angle += 180
        elif x > self._x and y < self._y:
            angle = 360 - angle
        return self.set_heading(angle)

    # -- shapes ------------------------------------------------------------

    def _circle_top_left(self, radius: int) -> tuple[int, int]:
        # the circle's center lies a radius to the right of the heading
        cardinal = {
            0.0: (self._x, self._y + radius),
            90.0: (self._x - radius, self._y),
            180.0: (self._x, self._y - radius),
            270.0: (self._x + radius, self._y),
        }
        if self._heading in cardinal:
            cx, cy = cardinal[self._heading]
        else:
            rad = to_radians(self._heading)
            cx = self._x - math.sin(rad) * radius
            cy = self._y + math.cos(rad) * radius
        return round_half_up(cx - radius), round_half_up(cy - radius)

    def draw_circle(self, radius: int):
        """Draw a circle through the pen's position. The pen does not move."""
        self._paper.ensure_open()
        if radius < 0:
            raise ValueError(f"Radius must not be negative, got {radius!r}")
        if not self._down:
            return

        self._paper.add_primitive(
            Oval(
                top_left=self._circle_top_left(radius),
                diameter=round_half_up(radius * 2),
                color=self._color,
                width=self._stroke_width,
            )
        )
        self._paper.repaint()

    def draw_rect(self, width: float, height: float):
        """Walk a rectangle clockwise from the pen's position.

        The pen ends where it started, facing the same way, up to the
        3-decimal rounding of each leg.
        """
        self._paper.ensure_open()
        if not self._down:
            return

        for side in (width, height, width, height):
            self.move_by(side)
            self.set_heading(self._heading + 90)

    def write(self, value, style: FontStyle | None = None, size: int | None = None):
        """Write `str(value)` along the heading and move past it.

        Style defaults to bold for stroke widths above the bold threshold
        (3), plain otherwise. Size defaults to 15.
        """
        self._paper.ensure_open()
        if not self._down:
            return

        if style is None:
            style = FontStyle.BOLD if self._stroke_width > self._bold_threshold else FontStyle.PLAIN
        if size is None:
            size = self._font_size
        elif not isinstance(size, int) or size < 1:
            raise ValueError(f"Font size must be a positive integer, got {size!r}")
        text = str(value)

        self._paper.add_primitive(
            self._text.stamp(text, self._x, self._y, self._heading, self._color, style, size)
        )

        self.up()
        self.move_by(self._text.text_width(text, style, size))
        self.down()
        self._paper.repaint()

    def __repr__(self):
        state = "down" if self._down else "up"
        return f"<Pen at ({self._x}, {self._y}) heading {self._heading} {state}>"
