from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

from imgascii.controllers.app_controller import AppController
from imgascii.controllers.cli_parser import parse_args, verbose_requested

LOG_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(verbose: bool, stream: Optional[TextIO] = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger("imgascii")
    root.setLevel(level)
    # повторный запуск в одном процессе не должен дублировать вывод
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False


class ImageToAsciiApp:
    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    def run(self, argv: Sequence[str]) -> int:
        setup_logging(verbose_requested(argv), self._stderr)
        options = parse_args(argv)
        logging.getLogger(__name__).debug("argv = %s", list(argv))

        controller = AppController(stdout=self._stdout)
        return controller.run(options)
