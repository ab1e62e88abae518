from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest
from PIL import Image

from imgascii.models.config_model import Configuration, LuminanceMode
from imgascii.models.image_model import ImageData


@pytest.fixture
def solid_image():
    def _solid(width: int, height: int, color: Tuple[int, int, int]) -> ImageData:
        return ImageData.from_rows([[color] * width for _ in range(height)])

    return _solid


@pytest.fixture
def make_config():
    def _make(**overrides) -> Configuration:
        values = dict(
            mode=LuminanceMode.STANDARD,
            inverted=False,
            trailing_spaces=9,
            columns=1,
            rows=1,
            font_ratio=0.5,
            input_path=None,
            output_path=None,
            fixed_step=True,
            row_step=1,
        )
        values.update(overrides)
        return Configuration(**values)

    return _make


@pytest.fixture
def write_png(tmp_path: Path):
    def _write(name: str, size: Tuple[int, int], color, mode: str = "RGB") -> Path:
        path = tmp_path / name
        Image.new(mode, size, color).save(path)
        return path

    return _write
