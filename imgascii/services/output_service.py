"""Запись результата в файл или в стандартный вывод."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class OutputService:
    def __init__(self, stdout: Optional[TextIO] = None) -> None:
        self._stdout = stdout

    def write(self, text: str, output_path: Optional[Path] = None) -> None:
        """Пишет текст в `output_path` или, если путь не задан, в stdout.

        Raises:
            OSError: если файл не открывается, запись или закрытие не удались.
        """
        if output_path is None:
            stream = self._stdout if self._stdout is not None else sys.stdout
            stream.write(text)
            stream.flush()
            return

        # ошибки при close() поднимаются из __exit__
        with open(output_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        logger.debug("Wrote %d characters to %s", len(text), output_path)
