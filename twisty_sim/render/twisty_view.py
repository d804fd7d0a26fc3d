# twisty_sim/render/twisty_view.py
from __future__ import annotations

import html
import logging
from typing import Optional

from PySide6.QtCore import QUrl, Signal
from PySide6.QtWebEngineWidgets import QWebEngineView

from twisty_sim.config import DEFAULT_THEME, TWISTY_MODULE_URL
from twisty_sim.core.errors import TimelineControlError
from twisty_sim.logic.moves import PuzzleVariant
from twisty_sim.render.player_page import (
    JUMP_TO_END_JS,
    READY_CHECK_JS,
    build_player_html,
    jump_failure_message,
)

logger = logging.getLogger(__name__)


class TwistyPlayerView(QWebEngineView):
    """Adaptador Qt del widget externo `<twisty-player>` (cubing.js).

    Cada `load_algorithm()` reemplaza la página completa, lo que fuerza un re-render del
    widget con el nuevo puzzle/algoritmo. La disponibilidad se consulta con un
    chequeo JavaScript asíncrono; `is_ready()` devuelve la última respuesta
    conocida y lanza una nueva consulta.

    Signals:
        page_failed(str): La página no pudo cargarse (sin red, CDN caído, etc.).
        timeline_failed(str): "Saltar al final" no disponible o falló en el reproductor.
    """

    page_failed = Signal(str)
    timeline_failed = Signal(str)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.variant: Optional[PuzzleVariant] = None
        self.algorithm: str = ""
        self.theme: str = DEFAULT_THEME

        self._loaded: bool = False
        self._ready: bool = False
        self._generation: int = 0

        self.loadFinished.connect(self._on_load_finished)

    def load_algorithm(self, variant: PuzzleVariant, algorithm: str) -> None:
        """Reconstruye el reproductor con el puzzle y algoritmo dados."""
        self.variant = PuzzleVariant(variant)
        self.algorithm = algorithm
        self._loaded = False
        self._ready = False
        self._generation += 1

        page = build_player_html(self.variant, algorithm, self.theme)
        self.setHtml(page, QUrl(TWISTY_MODULE_URL))

    def is_ready(self) -> bool:
        """True una vez que el widget puede aceptar un algoritmo y "saltar al final"."""
        if self._loaded and not self._ready:
            gen = self._generation
            self.page().runJavaScript(
                READY_CHECK_JS, 0, lambda result: self._on_ready_result(gen, result)
            )
        return self._ready

    def jump_to_end(self) -> None:
        """Salta al estado final del algoritmo actual.

        Si el reproductor no expone control de timeline, el resultado del script
        solo se registra en el log (el algoritmo sigue considerándose aplicado).

        Raises:
            TimelineControlError: Si la página aún no cargó.
        """
        if not self._loaded:
            raise TimelineControlError("Puzzle page is not loaded")
        self.page().runJavaScript(JUMP_TO_END_JS, 0, self._on_jump_result)

    def set_theme(self, theme: str) -> None:
        """Cambia el fondo de la página sin recargar el reproductor."""
        self.theme = theme
        if self._loaded:
            self.page().runJavaScript(
                f'document.documentElement.setAttribute("data-theme", "{html.escape(theme)}");'
            )

    # -------------------
    # Callbacks JS / Qt
    # -------------------
    def _on_load_finished(self, ok: bool) -> None:
        self._loaded = ok
        if not ok:
            logger.error("Failed to load puzzle page for %s", self.variant)
            self.page_failed.emit("Failed to load cube. Please check your connection.")

    def _on_ready_result(self, generation: int, result) -> None:
        # Respuestas de una página anterior se descartan
        if generation == self._generation:
            self._ready = bool(result)

    def _on_jump_result(self, result) -> None:
        message = jump_failure_message(result)
        if message is None:
            logger.info("Applied algorithm via player timeline")
            return

        logger.warning(
            "Timeline control %s; algorithm is set but the view may not reflect it",
            result,
        )
        self.timeline_failed.emit(message)
