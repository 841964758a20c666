"""Tests for colors, keys and configuration."""

import json

import pytest
from pydantic import ValidationError

from penandpaper.colors import parse_color
from penandpaper.config import Config, PenConfig
from penandpaper.keys import Key


class TestColors:
    @pytest.mark.parametrize(
        "color, rgb",
        [
            ("black", (0, 0, 0)),
            ("White", (255, 255, 255)),
            ("#ff8000", (255, 128, 0)),
            ("#ff800080", (255, 128, 0)),
            ((1, 2, 3), (1, 2, 3)),
            ([10, 20, 30], (10, 20, 30)),
        ],
    )
    def test_parse(self, color, rgb):
        assert parse_color(color) == rgb

    @pytest.mark.parametrize("color", ["nope", (1, 2), (0, 0, 256), (0.5, 0.5, 0.5), None])
    def test_invalid(self, color):
        with pytest.raises(ValueError):
            parse_color(color)


class TestKeys:
    def test_from_keysym(self):
        assert Key.from_keysym("space") is Key.SPACE
        assert Key.from_keysym("Return") is Key.ENTER
        assert Key.from_keysym("A") is Key.A
        assert Key.from_keysym("7") is Key.DIGIT_7

    def test_unmapped_keysym(self):
        assert Key.from_keysym("F13") is None


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert (config.paper.width, config.paper.height) == (854, 480)
        assert config.pen.stroke_width == 2
        assert config.pen.font_size == 15
        assert config.font.regular is None

    def test_round_trip(self, tmp_path):
        path = tmp_path / "penandpaper.json"
        config = Config(pen=PenConfig(color="blue", stroke_width=4))
        config.save(path)

        assert json.loads(path.read_text())["pen"]["color"] == "blue"
        assert Config.load(path) == config

    def test_partial_file(self, tmp_path):
        path = tmp_path / "penandpaper.json"
        path.write_text(json.dumps({"paper": {"background": "black"}}))
        config = Config.load(path)
        assert config.paper.background == "black"
        assert config.paper.width == 854

    def test_rejects_non_positive_sizes(self):
        with pytest.raises(ValidationError):
            PenConfig(stroke_width=0)
