"""Color parsing."""

from PIL import ImageColor

RGB = tuple[int, int, int]


def parse_color(color: str | tuple | list) -> RGB:
    """Normalise a color name, hex string or RGB triple to an RGB tuple."""
    if isinstance(color, str):
        # getrgb raises ValueError for unknown names; "#rrggbbaa" yields RGBA
        return tuple(ImageColor.getrgb(color)[:3])

    if isinstance(color, (tuple, list)) and len(color) == 3:
        if all(isinstance(v, int) and 0 <= v <= 255 for v in color):
            return tuple(color)

    raise ValueError(f"Invalid color: {color!r}")
