from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from imgascii.models.config_model import Configuration, DEFAULT_TRAILING_SPACES, LuminanceMode, Quad
from imgascii.models.image_model import ImageData
from imgascii.services.luminance_service import LuminanceFn, model_for

logger = logging.getLogger(__name__)

# от самого плотного символа к самому разреженному
DENSITY = "@QB#NgWM8RDHdOKq9$6khEPXwmeZaoS2yjufF]}{tx1zv7lciL/\\|?*>r^;:_\"~,'.-`"
BLANK = " "


def _floor(value: float) -> int:
    # 2.9999999999999996 -> 3: шум сложения не должен терять крайний пиксель
    return math.floor(round(value, 9))


class AsciiService:
    # ---------- Вспомогательные функции ----------
    def _clip_quad(
        self, quad: Quad, width: int, height: int, at_least_one: bool = False
    ) -> Optional[Tuple[int, int, int, int]]:
        """
        Переводит дробный прямоугольник в целочисленные границы среза,
        отсекая всё, что лежит за пределами [0, width) x [0, height).
        Границы усекаются (floor), а не округляются.

        `at_least_one`: ячейка уже пикселя, чьё начало лежит внутри изображения,
        получает пиксель, в котором находится её начало.
        Возвращает None для пустого пересечения.
        """
        x0 = max(0, _floor(quad.x))
        y0 = max(0, _floor(quad.y))
        x1 = min(width, _floor(quad.x + quad.width))
        y1 = min(height, _floor(quad.y + quad.height))
        if at_least_one:
            x1 = max(x1, min(x0 + 1, width))
            y1 = max(y1, min(y0 + 1, height))
        if x1 <= x0 or y1 <= y0:
            return None
        return x0, y0, x1, y1

    def _mean_of(self, plane: np.ndarray, quad: Quad, at_least_one: bool = False) -> float:
        """
        Среднее значение плоскости яркости (height, width) внутри прямоугольника.
        Пустое пересечение даёт 0.0, а не деление на ноль.
        """
        height, width = plane.shape
        bounds = self._clip_quad(quad, width, height, at_least_one)
        if bounds is None:
            return 0.0
        x0, y0, x1, y1 = bounds
        return float(plane[y0:y1, x0:x1].mean())

    # ---------- 1) Выборка области ----------
    def average_brightness(self, image: ImageData, quad: Quad, mode: LuminanceMode) -> float:
        """
        Средняя яркость пикселей изображения, попавших в прямоугольник.
        """
        return self._mean_of(model_for(mode)(image.pixels), quad)

    # ---------- 2) Квантование ----------
    def glyph_for(
        self,
        brightness: float,
        ramp: str = DENSITY,
        trailing_spaces: int = DEFAULT_TRAILING_SPACES,
        inverted: bool = False,
    ) -> str:
        """
        Символ шкалы для яркости в [0, 1].

        Индекс = floor(b * (L + T - 1)), где L — длина шкалы, T — число
        виртуальных пробелов; индексы >= L дают пробел. Без инверсии тёмное
        попадает в начало шкалы (плотные символы), с инверсией — светлое.
        """
        # флаг обратный исходной утилите: там яркость дополнялась, когда -i НЕ задан
        value = 1.0 - brightness if inverted else brightness
        value = min(1.0, max(0.0, value))
        index = math.floor(value * (len(ramp) + trailing_spaces - 1))
        if index >= len(ramp):
            return BLANK
        return ramp[index]

    # ---------- 3) Рендер сетки ----------
    def render(self, image: ImageData, config: Configuration, ramp: str = DENSITY) -> str:
        """
        Преобразует изображение в текст: по символу на ячейку, перевод строки после каждой строки.
        """
        model: LuminanceFn = model_for(config.mode)
        # яркость считается один раз на весь буфер, дальше усредняются срезы
        plane = model(image.pixels)

        if config.fixed_step:
            cells = self._fixed_step_cells(image, config.row_step)
            logger.debug("Fixed-step mode: row step %d", config.row_step)
        else:
            cells = self._cell_count_cells(image, config)
            logger.debug(
                "Cell-count mode: %d columns, %d rows, font ratio %.3f",
                config.columns, config.rows, config.font_ratio,
            )

        lines: List[str] = []
        for row in cells:
            # при увеличении ячейки уже пикселя: каждой достаётся хотя бы один
            line = [
                self.glyph_for(
                    self._mean_of(plane, quad, at_least_one=True),
                    ramp, config.trailing_spaces, config.inverted,
                )
                for quad in row
            ]
            lines.append("".join(line) + "\n")
        return "".join(lines)

    def _fixed_step_cells(self, image: ImageData, row_step: int) -> List[List[Quad]]:
        """
        Ячейки шириной 1 px и высотой `row_step` px, выровненные по целой сетке.
        """
        return [
            [Quad(x, y, 1, row_step) for x in range(image.width)]
            for y in range(0, image.height, row_step)
        ]

    def _cell_count_cells(self, image: ImageData, config: Configuration) -> List[List[Quad]]:
        """
        Ячейки дробного размера: ширина = W / columns, высота = H / (rows * font_ratio).
        Начала ячеек берутся как i * размер, чтобы накопленная ошибка не дала лишнюю строку.
        """
        cell_w = image.width / config.columns
        cell_h = image.height / (config.rows * config.font_ratio)
        n_cols = config.columns
        # округление до 9 знаков гасит шум вида 4.0000000001
        n_rows = max(1, math.ceil(round(config.rows * config.font_ratio, 9)))
        return [
            [Quad(i * cell_w, j * cell_h, cell_w, cell_h) for i in range(n_cols)]
            for j in range(n_rows)
        ]
