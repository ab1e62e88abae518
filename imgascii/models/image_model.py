"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional, Sequence

import numpy as np


class Pixel(NamedTuple):
    """Пиксель RGB, 8 бит на канал, без альфа."""
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class ImageData:
    """Неизменяемый буфер изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу (None для буферов, собранных в памяти).
        pixels: Массив uint8 формы (height, width, 3), построчно.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "RGBA".
        size_bytes: Размер файла, если доступен.
    """
    path: Optional[Path]
    pixels: np.ndarray
    width: int
    height: int
    mode: str = "RGB"
    size_bytes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Пустое изображение: {self.width}x{self.height}")
        if self.pixels.shape != (self.height, self.width, 3):
            raise ValueError(
                f"Форма буфера {self.pixels.shape} не совпадает с {self.width}x{self.height}"
            )
        # read-only after load
        self.pixels.setflags(write=False)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Pixel]], path: Optional[Path] = None) -> "ImageData":
        """Собирает буфер из строк пикселей (удобно для тестов и генераторов)."""
        pixels = np.array(rows, dtype=np.uint8)
        if pixels.ndim != 3:
            raise ValueError("Ожидается прямоугольная сетка RGB-пикселей")
        height, width = pixels.shape[:2]
        return cls(path=path, pixels=pixels, width=width, height=height)

    def pixel(self, x: int, y: int) -> Pixel:
        r, g, b = self.pixels[y, x]
        return Pixel(int(r), int(g), int(b))
