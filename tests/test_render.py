"""Tests for rasterizing primitives and text stamps."""

import numpy as np
import pytest

from penandpaper.primitives import Line, Oval, TextStamp
from penandpaper.render import FontStyle, Renderer, TextRenderer

WHITE = (255, 255, 255)
RED = (255, 0, 0)


class TestRenderer:
    def test_background_only(self):
        frame = Renderer().render([], (20, 10), (1, 2, 3))
        assert frame.size == (20, 10)
        assert (np.array(frame) == (1, 2, 3)).all()

    def test_line(self):
        frame = np.array(Renderer().render([Line((2, 5), (17, 5), RED, 1)], (20, 10), WHITE))
        assert tuple(frame[5, 10]) == RED
        assert tuple(frame[0, 10]) == WHITE

    def test_oval_outline(self):
        frame = np.array(Renderer().render([Oval((5, 5), 20, RED, 2)], (30, 30), WHITE))
        # left edge of the outline vs. the empty center
        assert tuple(frame[15, 5]) == RED
        assert tuple(frame[15, 15]) == WHITE

    def test_text_stamp_uses_alpha(self):
        text = TextRenderer().stamp("W", 10, 30, 0, RED, FontStyle.PLAIN, 20)
        frame = np.array(Renderer().render([text], (60, 40), WHITE))
        assert (frame == RED).all(axis=-1).any()
        # transparent stamp pixels keep the background
        assert tuple(frame[0, 59]) == WHITE

    def test_unknown_primitive(self):
        class Blob:
            kind = "blob"

        with pytest.raises(ValueError):
            Renderer().render([Blob()], (5, 5), WHITE)


class TestTextRenderer:
    def test_width_grows_with_text(self):
        text = TextRenderer()
        assert text.text_width("", FontStyle.PLAIN, 15) == 0
        assert text.text_width("AB", FontStyle.PLAIN, 15) < text.text_width("ABCD", FontStyle.PLAIN, 15)

    def test_stamp_geometry(self):
        text = TextRenderer()
        stamp = text.stamp("Hello", 100, 100, 30, RED, FontStyle.PLAIN, 15)
        assert isinstance(stamp, TextStamp)
        assert stamp.text == "Hello"
        assert stamp.image.mode == "RGBA"

        width, height = stamp.image.size
        assert width == height
        # the stamp is centered on the pen position
        x, y = stamp.position
        assert abs(x + width / 2 - 100) <= 1
        assert abs(y + height / 2 - 100) <= 1

    def test_rotation_moves_ink(self):
        text = TextRenderer()
        flat = np.array(text.stamp("MMMM", 0, 0, 0, RED, FontStyle.PLAIN, 20).image)
        down = np.array(text.stamp("MMMM", 0, 0, 90, RED, FontStyle.PLAIN, 20).image)
        center = flat.shape[0] // 2

        # heading 0 writes right of the start point, heading 90 below it
        assert flat[:, center + 5 :, 3].sum() > 0
        assert flat[:, : center - 5, 3].sum() == 0
        assert down[center + 5 :, :, 3].sum() > 0
        assert down[: center - 5, :, 3].sum() == 0

    def test_synthetic_bold_is_heavier(self):
        text = TextRenderer()
        plain = np.array(text.stamp("Bold", 0, 0, 0, RED, FontStyle.PLAIN, 20).image)
        bold = np.array(text.stamp("Bold", 0, 0, 0, RED, FontStyle.BOLD, 20).image)
        assert (bold[..., 3] > 0).sum() > (plain[..., 3] > 0).sum()
