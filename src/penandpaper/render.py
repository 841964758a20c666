"""Rasterizing primitives and text with Pillow."""

import math
from enum import Enum
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from .colors import RGB
from .config import FontConfig
from .geometry import round_half_up
from .primitives import Line, Oval, Primitive, TextStamp


class FontStyle(str, Enum):
    PLAIN = "plain"
    BOLD = "bold"


@lru_cache(maxsize=32)
def _load_font(path: str | None, size: int) -> ImageFont.FreeTypeFont:
    if path:
        return ImageFont.truetype(path, size)
    return ImageFont.load_default(size)


class TextRenderer:
    """Renders rotated text into offscreen stamps."""

    def __init__(self, fonts: FontConfig | None = None):
        self.fonts = fonts or FontConfig()

    def font(self, style: FontStyle, size: int) -> ImageFont.FreeTypeFont:
        if style is FontStyle.BOLD and self.fonts.bold:
            return _load_font(self.fonts.bold, size)
        return _load_font(self.fonts.regular, size)

    def _synthetic_bold(self, style: FontStyle) -> bool:
        return style is FontStyle.BOLD and not self.fonts.bold

    def text_width(self, text: str, style: FontStyle, size: int) -> int:
        """Unrotated advance width of `text` in pixels."""
        return round_half_up(self.font(style, size).getlength(text))

    def text_height(self, style: FontStyle, size: int) -> int:
        ascent, descent = self.font(style, size).getmetrics()
        return ascent + descent

    def stamp(
        self,
        text: str,
        x: float,
        y: float,
        heading: float,
        color: RGB,
        style: FontStyle,
        size: int,
    ) -> TextStamp:
        """Render `text` with its baseline starting at (x, y), rotated by heading."""
        font = self.font(style, size)
        width = self.text_width(text, style, size)

        # the text fits in a circle of this radius around its start point
        reach = math.hypot(self.text_height(style, size), width)
        side = math.ceil(reach * 2)
        origin = (round_half_up(reach), round_half_up(reach))

        img = Image.new("RGBA", (side, side))
        draw = ImageDraw.Draw(img)
        stroke = 1 if self._synthetic_bold(style) else 0
        draw.text(
            origin,
            text,
            font=font,
            fill=color,
            anchor="ls",
            stroke_width=stroke,
            stroke_fill=color,
        )
        # Pillow rotates counter-clockwise; headings turn clockwise on screen
        if heading:
            img = img.rotate(-heading, resample=Image.Resampling.BICUBIC, center=origin)

        position = (round_half_up(x - reach), round_half_up(y - reach))
        return TextStamp(image=img, position=position, text=text)


class Renderer:
    """Replays primitives onto an image."""

    def render(
        self, primitives: list[Primitive], size: tuple[int, int], background: RGB
    ) -> Image.Image:
        """Fill with the background, then draw every primitive in order."""
        frame = Image.new("RGB", size, background)
        draw = ImageDraw.Draw(frame)

        for primitive in primitives:
            method = getattr(self, f"_draw_{primitive.kind}", None)
            if method is None:
                raise ValueError(f"Unknown primitive: {primitive!r}")
            method(frame, draw, primitive)

        return frame

    def _draw_line(self, frame: Image.Image, draw: ImageDraw.ImageDraw, line: Line):
        draw.line([line.start, line.end], fill=line.color, width=line.width)

    def _draw_oval(self, frame: Image.Image, draw: ImageDraw.ImageDraw, oval: Oval):
        draw.ellipse(oval.bounds, outline=oval.color, width=oval.width)

    def _draw_text_stamp(
        self, frame: Image.Image, draw: ImageDraw.ImageDraw, stamp: TextStamp
    ):
        frame.paste(stamp.image, stamp.position, stamp.image)
