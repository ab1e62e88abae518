"""Разбор командной строки.

Короткие флаги можно объединять (`-ai`), значение опции пишется слитно
(`-n5`, `-oout.txt`) или следующим аргументом (`-n 5`). Разбор — небольшой
автомат: состояние «ждём значение опции X» хранится в локальной переменной
и снимается следующим аргументом.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from imgascii.models.config_model import CliOptions
from imgascii.services.config_service import parse_ratio

logger = logging.getLogger(__name__)

USAGE = """Image To Ascii
Usage:
    imgascii [options] filename
Options:
        -a          Use fast perceived luminance algorithm
        -h, --help  Show this message.
        -i          Invert brightness (bright areas become dense glyphs)
        -n NUMBER   Number of ' ' at the end of the density string. Default: 9
        -o FILE     Output path. Default: standard output
        -p          Use perceived luminance
        -W COLUMNS  Output width in characters
        -H ROWS     Output height in characters
        -r W:H      Font aspect ratio, also accepts W/H. Default: 1:2
        -s ROWS     Pixel rows per output row when no size is given. Default: 1
        -v          Verbose logging
"""

_FLAGS = {"a": "fast_perceived", "p": "perceived", "i": "inverted", "v": "verbose"}
_VALUE_OPTIONS = frozenset("noWHrs")


def _positive_int(text: str, minimum: int = 1) -> Optional[int]:
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value >= minimum else None


def _apply_value(options: CliOptions, option: str, value: str) -> None:
    """Применяет значение опции; некорректные числа оставляют прежнее значение."""
    if option == "o":
        options.output_path = Path(value)
        return
    if option == "r":
        options.font_ratio = parse_ratio(value, options.font_ratio)
        return

    number = _positive_int(value, minimum=0 if option == "n" else 1)
    if number is None:
        logger.warning("Ignoring invalid value %r for -%s", value, option)
        return
    if option == "n":
        options.trailing_spaces = number
    elif option == "W":
        options.columns = number
    elif option == "H":
        options.rows = number
    elif option == "s":
        options.row_step = number


def parse_args(argv: Sequence[str]) -> CliOptions:
    """Разбирает аргументы (без имени программы).

    Неизвестный флаг, запрос справки, отсутствие входного файла или опция без
    значения в конце списка дают `CliOptions(show_usage=True)`.
    """
    options = CliOptions()
    pending: Optional[str] = None
    positional: Optional[str] = None

    for token in argv:
        logger.debug("argv token: %r", token)
        if pending is not None:
            _apply_value(options, pending, token)
            pending = None
            continue
        if token == "--help":
            return CliOptions(show_usage=True)
        if not token.startswith("-") or token == "-":
            positional = token
            continue
        if token.startswith("--"):
            logger.debug("Unknown option %r", token)
            return CliOptions(show_usage=True)

        for index in range(1, len(token)):
            char = token[index]
            if char == "h":
                return CliOptions(show_usage=True)
            if char in _FLAGS:
                setattr(options, _FLAGS[char], True)
            elif char in _VALUE_OPTIONS:
                rest = token[index + 1:]
                if rest:
                    _apply_value(options, char, rest)
                else:
                    pending = char
                break
            else:
                logger.debug("Unknown option -%s", char)
                return CliOptions(show_usage=True)

    if pending is not None:
        logger.debug("Option -%s expects a value", pending)
        return CliOptions(show_usage=True)
    if positional is None:
        return CliOptions(show_usage=True)

    options.input_path = Path(positional)
    return options


def verbose_requested(argv: Sequence[str]) -> bool:
    """Ищет `-v` до полного разбора, чтобы логирование было настроено заранее.

    Значения опций (`-o -v`, `-n5v`) флагом не считаются.
    """
    pending = False
    for token in argv:
        if pending:
            pending = False
            continue
        if not token.startswith("-") or token.startswith("--") or token == "-":
            continue
        for index in range(1, len(token)):
            char = token[index]
            if char == "v":
                return True
            if char in _VALUE_OPTIONS:
                pending = index == len(token) - 1
                break
            if char not in _FLAGS:
                break
    return False
