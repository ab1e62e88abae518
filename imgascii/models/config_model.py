"""Модели параметров конвертации.

Принципы:
- SRP: `CliOptions` хранит то, что ввёл пользователь, `Configuration` —
  разрешённые значения, с которыми работает рендерер.
- Неизменяемость итоговой конфигурации (`frozen=True`).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

DEFAULT_TRAILING_SPACES = 9
DEFAULT_FONT_RATIO = 0.5  # 1:2, ширина:высота
DEFAULT_ROW_STEP = 1


class LuminanceMode(Enum):
    STANDARD = "standard"
    PERCEIVED_FAST = "perceived-fast"
    PERCEIVED = "perceived"


@dataclass(frozen=True)
class Quad:
    """Прямоугольник выборки в координатах изображения (может быть дробным)."""
    x: float
    y: float
    width: float
    height: float


@dataclass
class CliOptions:
    """Сырые параметры командной строки.

    Поля `columns`, `rows` остаются None, если пользователь их не задал;
    `show_usage` означает «напечатать справку и выйти успешно».
    """
    show_usage: bool = False
    fast_perceived: bool = False
    perceived: bool = False
    inverted: bool = False
    verbose: bool = False
    trailing_spaces: int = DEFAULT_TRAILING_SPACES
    output_path: Optional[Path] = None
    columns: Optional[int] = None
    rows: Optional[int] = None
    font_ratio: float = DEFAULT_FONT_RATIO
    row_step: int = DEFAULT_ROW_STEP
    input_path: Optional[Path] = None

    @property
    def luminance_mode(self) -> LuminanceMode:
        # -a важнее -p, -p важнее стандартной модели
        if self.fast_perceived:
            return LuminanceMode.PERCEIVED_FAST
        if self.perceived:
            return LuminanceMode.PERCEIVED
        return LuminanceMode.STANDARD


@dataclass(frozen=True)
class Configuration:
    """Итоговая конфигурация одного запуска.

    Fields:
        mode: Модель яркости.
        inverted: Инвертировать яркость (светлое -> плотные символы).
        trailing_spaces: Число виртуальных пробелов в конце шкалы.
        columns: Число столбцов сетки (> 0).
        rows: Число строк сетки (> 0) до поправки на пропорции шрифта.
        font_ratio: Ширина/высота символа.
        input_path: Входной файл.
        output_path: Выходной файл; None — стандартный вывод.
        fixed_step: True, если сетка задана шагом в пикселях, а не числом ячеек.
        row_step: Пикселей по вертикали на строку в режиме фиксированного шага.
    """
    mode: LuminanceMode
    inverted: bool
    trailing_spaces: int
    columns: int
    rows: int
    font_ratio: float
    input_path: Optional[Path]
    output_path: Optional[Path]
    fixed_step: bool = True
    row_step: int = DEFAULT_ROW_STEP

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"Размер сетки должен быть положительным: {self.columns}x{self.rows}")
