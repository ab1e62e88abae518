"""Разрешение конфигурации: размеры сетки и пропорции шрифта.

Принципы:
- SRP: только вычисление итоговых параметров, без ввода-вывода.
- Размеры, выведенные из пропорций изображения, округляются вверх, чтобы сетка
  покрывала всё изображение.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional, Tuple

from imgascii.models.config_model import CliOptions, Configuration

logger = logging.getLogger(__name__)

_RATIO_SEPARATORS = re.compile(r"[:/]")


def parse_ratio(text: str, current: float) -> float:
    """Разбирает пропорции шрифта вида "W:H" или "W/H".

    Returns:
        W / H; при некорректной записи — `current` без изменений.
    """
    parts = _RATIO_SEPARATORS.split(text.strip(), maxsplit=1)
    if len(parts) != 2:
        logger.debug("Font ratio %r has no separator, keeping %s", text, current)
        return current
    try:
        width, height = float(parts[0]), float(parts[1])
    except ValueError:
        logger.debug("Font ratio %r is not numeric, keeping %s", text, current)
        return current
    if not (width > 0 and height > 0) or math.isinf(width) or math.isinf(height):
        logger.debug("Font ratio %r is out of range, keeping %s", text, current)
        return current
    return width / height


def resolve_grid(
    columns: Optional[int], rows: Optional[int], image_width: int, image_height: int
) -> Tuple[int, int]:
    """Итоговое число столбцов и строк.

    - ничего не задано: по ячейке на пиксель;
    - задано одно: второе выводится из пропорций изображения с округлением вверх;
    - заданы оба: используются как есть.
    """
    if columns is None and rows is None:
        return image_width, image_height
    if columns is None:
        columns = math.ceil(rows * image_width / image_height)
    elif rows is None:
        rows = math.ceil(columns * image_height / image_width)
    return max(1, columns), max(1, rows)


def resolve_configuration(options: CliOptions, image_width: int, image_height: int) -> Configuration:
    fixed_step = options.columns is None and options.rows is None
    if fixed_step:
        columns = image_width
        rows = math.ceil(image_height / options.row_step)
    else:
        columns, rows = resolve_grid(options.columns, options.rows, image_width, image_height)

    config = Configuration(
        mode=options.luminance_mode,
        inverted=options.inverted,
        trailing_spaces=options.trailing_spaces,
        columns=columns,
        rows=rows,
        font_ratio=options.font_ratio,
        input_path=options.input_path,
        output_path=options.output_path,
        fixed_step=fixed_step,
        row_step=options.row_step,
    )
    logger.debug("Resolved configuration: %s", config)
    return config
