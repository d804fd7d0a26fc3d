"""
Logging Configuration
Configura el logger de la aplicación (consola y, opcionalmente, archivo).
"""
from __future__ import annotations

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Configura el logger del namespace 'twisty_sim'.

    Los módulos solo usan `logging.getLogger(__name__)`; sus mensajes suben
    hasta este logger de paquete.

    Args:
        level: Nivel de logging (ej: logging.DEBUG, logging.INFO).
        log_file: Ruta opcional para guardar también los logs en un archivo.
    """
    logger = logging.getLogger("twisty_sim")
    logger.setLevel(level)

    # Evita handlers duplicados si se llama más de una vez
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
