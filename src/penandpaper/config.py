"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, PositiveInt


class PaperConfig(BaseModel):
    width: PositiveInt = 854
    height: PositiveInt = 480
    background: str = "white"
    title_prefix: str = "Paper #"


class PenConfig(BaseModel):
    color: str = "black"
    stroke_width: PositiveInt = 2
    font_size: PositiveInt = 15
    # write() switches to bold above this stroke width
    bold_threshold: int = 3


class FontConfig(BaseModel):
    """TrueType files for text stamps. None uses Pillow's bundled font."""

    regular: str | None = None
    bold: str | None = None


class Config(BaseModel):
    paper: PaperConfig = PaperConfig()
    pen: PenConfig = PenConfig()
    font: FontConfig = FontConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/penandpaper.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/penandpaper.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
