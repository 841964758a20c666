"""Drawing primitives recorded on a paper.

Each primitive is an immutable snapshot of what a pen drew, taken at call
time, so later changes to the pen's color or width never touch it.
"""

from dataclasses import dataclass
from typing import ClassVar

from PIL import Image

from .colors import RGB

Point = tuple[int, int]


@dataclass(frozen=True)
class Line:
    kind: ClassVar[str] = "line"

    start: Point
    end: Point
    color: RGB
    width: int


@dataclass(frozen=True)
class Oval:
    kind: ClassVar[str] = "oval"

    top_left: Point
    diameter: int
    color: RGB
    width: int

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        x, y = self.top_left
        return x, y, x + self.diameter, y + self.diameter


@dataclass(frozen=True)
class TextStamp:
    """Pre-rendered RGBA text pasted at `position` (top-left)."""

    kind: ClassVar[str] = "text_stamp"

    image: Image.Image
    position: Point
    text: str


Primitive = Line | Oval | TextStamp
