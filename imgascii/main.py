"""Точка входа в приложение."""
import sys
from typing import Optional, Sequence

from imgascii.app import ImageToAsciiApp


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Создаёт приложение и выполняет одну конвертацию."""
    app = ImageToAsciiApp()
    return app.run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    raise SystemExit(main())
