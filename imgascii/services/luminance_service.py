"""Модели яркости: RGB -> [0, 1].

Все функции векторизованы: принимают один пиксель (r, g, b) или массив
формы (..., 3) и возвращают скаляр или массив без последней оси.
"""
from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from imgascii.models.config_model import LuminanceMode

LUMA_MAX = 255.0

# Rec. 709
STANDARD_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)
# Rec. 601, общий для обеих «воспринимаемых» моделей
PERCEIVED_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)

LuminanceFn = Callable[[np.ndarray], np.ndarray]


def _as_rgb(pixels) -> np.ndarray:
    rgb = np.asarray(pixels, dtype=np.float64)
    if rgb.shape[-1:] != (3,):
        raise ValueError(f"Ожидались RGB-значения, получена форма {rgb.shape}")
    return rgb


def luma(pixels) -> np.ndarray:
    """Стандартная яркость: 0.2126 R + 0.7152 G + 0.0722 B."""
    rgb = _as_rgb(pixels)
    return np.clip(rgb @ STANDARD_WEIGHTS / LUMA_MAX, 0.0, 1.0)


def perceived_luma_fast(pixels) -> np.ndarray:
    """Быстрая воспринимаемая яркость: 0.299 R + 0.587 G + 0.114 B."""
    rgb = _as_rgb(pixels)
    return np.clip(rgb @ PERCEIVED_WEIGHTS / LUMA_MAX, 0.0, 1.0)


def perceived_luma(pixels) -> np.ndarray:
    """Воспринимаемая яркость: sqrt(0.299 R² + 0.587 G² + 0.114 B²)."""
    rgb = _as_rgb(pixels)
    return np.clip(np.sqrt((rgb * rgb) @ PERCEIVED_WEIGHTS) / LUMA_MAX, 0.0, 1.0)


_MODELS: Dict[LuminanceMode, LuminanceFn] = {
    LuminanceMode.STANDARD: luma,
    LuminanceMode.PERCEIVED_FAST: perceived_luma_fast,
    LuminanceMode.PERCEIVED: perceived_luma,
}


def model_for(mode: LuminanceMode) -> LuminanceFn:
    return _MODELS[mode]


def brightness(pixel, mode: LuminanceMode = LuminanceMode.STANDARD) -> float:
    """Яркость одного пикселя в выбранной модели."""
    return float(model_for(mode)(pixel))
