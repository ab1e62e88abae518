"""Контроллер приложения: оркестрация сервисов одного запуска.

SOLID:
- SRP: класс связывает загрузку, рендер и запись (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации можно подменить в тестах.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from imgascii.controllers.cli_parser import USAGE
from imgascii.models.config_model import CliOptions
from imgascii.models.image_model import ImageData
from imgascii.services.ascii_service import AsciiService
from imgascii.services.config_service import resolve_configuration
from imgascii.services.image_service import ImageService
from imgascii.services.output_service import OutputService

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass
class AppController:
    """Выполняет один запуск конвертации.

    Ответственности:
    - Печать справки для ошибок использования (успешный выход).
    - Загрузка изображения через `ImageService`.
    - Разрешение конфигурации и рендер через `AsciiService`.
    - Запись результата через `OutputService`.
    """
    stdout: Optional[TextIO] = None

    _image_service: ImageService = field(default_factory=ImageService)
    _ascii_service: AsciiService = field(default_factory=AsciiService)
    _output_service: Optional[OutputService] = None

    def __post_init__(self) -> None:
        if self._output_service is None:
            self._output_service = OutputService(stdout=self.stdout)

    def run(self, options: CliOptions) -> int:
        if options.show_usage or options.input_path is None:
            self._print_usage()
            return EXIT_SUCCESS

        image = self._load(options)
        if image is None:
            return EXIT_FAILURE

        config = resolve_configuration(options, image.width, image.height)
        text = self._ascii_service.render(image, config)

        try:
            self._output_service.write(text, config.output_path)
        except OSError as exc:
            target = config.output_path if config.output_path is not None else "<stdout>"
            logger.critical("Could not write %s: %s", target, exc)
            return EXIT_FAILURE
        return EXIT_SUCCESS

    # ---- Helpers ----
    def _load(self, options: CliOptions) -> Optional[ImageData]:
        try:
            return self._image_service.load_image(options.input_path)
        # OSError: нет доступа или повреждённые данные внутри распознанного формата
        except (ValueError, OSError) as exc:
            logger.critical("Failed to load %s: %s", options.input_path, exc)
        return None

    def _print_usage(self) -> None:
        stream = self.stdout if self.stdout is not None else sys.stdout
        stream.write(USAGE)
        stream.flush()
