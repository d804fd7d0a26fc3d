# main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from PySide6.QtWidgets import QApplication

from twisty_sim.app.main_window import MainWindow
from twisty_sim.logging_config import setup_logging
from twisty_sim.logic.moves import PuzzleVariant


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Twisty puzzle scramble simulator")
    parser.add_argument(
        "--puzzle",
        choices=[PuzzleVariant.CUBE_3X3X3.value, PuzzleVariant.CUBE_7X7X7.value],
        default=PuzzleVariant.CUBE_3X3X3.value,
        help="3x3x3 (switchable with megaminx) or 7x7x7 (single puzzle)",
    )
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING...")
    parser.add_argument("--log-file", default=None, help="Optional log file path")
    return parser.parse_args(argv)


def main() -> NoReturn:
    """Punto de entrada de la aplicación.

    Configura logging, crea la instancia de `QApplication`, construye la ventana
    principal (`MainWindow`) y ejecuta el loop de eventos de Qt.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    args = parse_args(sys.argv[1:])
    setup_logging(level=getattr(logging, args.log_level.upper(), logging.INFO), log_file=args.log_file)

    variant = PuzzleVariant(args.puzzle)

    app = QApplication(sys.argv[:1])
    w = MainWindow(variant=variant, switchable=variant != PuzzleVariant.CUBE_7X7X7)
    w.resize(1100, 720)
    w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
