# twisty_sim/core/session.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer, Signal

from twisty_sim.config import (
    DEFAULT_VARIANT,
    INITIAL_SCRAMBLE_DELAY_MS,
    SCRAMBLE_LENGTHS,
    SCRAMBLE_SETTLE_MS,
    SOLVE_SETTLE_MS,
    SWITCHABLE_VARIANTS,
    TIMELINE_FAILED_MESSAGE,
)
from twisty_sim.core.readiness import ReadinessPoller, Scheduler
from twisty_sim.logic.moves import PuzzleVariant, count_moves
from twisty_sim.logic.scramble import generate_scramble

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load cube. Please refresh the view."


class PuzzleView(Protocol):
    """Contrato mínimo del widget de visualización externo."""

    def load_algorithm(self, variant: PuzzleVariant, algorithm: str) -> None:
        """Reconstruye el widget con el puzzle y algoritmo dados."""

    def is_ready(self) -> bool:
        """True cuando el widget acepta un algoritmo y el comando "saltar al final"."""

    def jump_to_end(self) -> None:
        """Lleva la vista al estado final del algoritmo (best effort)."""


@dataclass
class SessionState:
    """Estado mutable de la sesión: puzzle activo, algoritmo, conteo y flag busy."""

    variant: PuzzleVariant = DEFAULT_VARIANT
    current_algorithm: str = ""
    move_count: int = 0
    busy: bool = False

    def moves_text(self) -> str:
        return f"Moves: {self.move_count}"

    def algorithm_text(self) -> str:
        return f"Current Algorithm: {self.current_algorithm or 'None'}"


def qt_schedule(delay_ms: int, callback: Callable[[], None]) -> None:
    QTimer.singleShot(delay_ms, callback)


class PuzzleSession(QObject):
    """Orquesta scramble / solve / cambio de puzzle sobre el widget externo.

    Es el único dueño de `SessionState`. Todas las operaciones corren en el hilo
    de la UI; la única protección de concurrencia es el flag `busy`: mientras está
    activo, cualquier petición se ignora en silencio.

    El paso Busy -> Idle tras entregar un algoritmo al widget ocurre después de un
    retardo fijo (`SCRAMBLE_SETTLE_MS` / `SOLVE_SETTLE_MS`). Es una heurística por
    timeout, no un evento real de fin de animación.

    Signals:
        state_changed(object): Se emite con el `SessionState` tras cada cambio.
        busy_changed(bool): Se emite cuando cambia el flag busy.
        variant_changed(object): Se emite con el nuevo `PuzzleVariant`.
        notice(str): Mensaje transitorio para el usuario (errores no fatales).
    """

    state_changed = Signal(object)
    busy_changed = Signal(bool)
    variant_changed = Signal(object)
    notice = Signal(str)

    def __init__(
        self,
        view: PuzzleView,
        variant: PuzzleVariant = DEFAULT_VARIANT,
        switchable: bool = True,
        schedule: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        """Crea la sesión.

        Args:
            view: Widget externo que recibe los algoritmos.
            variant: Puzzle inicial.
            switchable: False para el modo de un solo puzzle (ej: 7x7x7 fijo).
                Solo los puzzles de `SWITCHABLE_VARIANTS` pueden alternarse.
            schedule: Función `(delay_ms, callback)` para diferir trabajo; por
                defecto `QTimer.singleShot`.
            rng: Generador aleatorio para los scrambles (útil en tests).
            parent: QObject padre, opcional.
        """
        super().__init__(parent)
        variant = PuzzleVariant(variant)
        self.view: PuzzleView = view
        self.state: SessionState = SessionState(variant=variant)
        self.switchable: bool = switchable and variant in SWITCHABLE_VARIANTS
        self.schedule: Scheduler = schedule or qt_schedule
        self.rng: Optional[random.Random] = rng
        self._poller: Optional[ReadinessPoller] = None

    # -------------------
    # Helpers
    # -------------------
    @property
    def variant(self) -> PuzzleVariant:
        return self.state.variant

    @property
    def busy(self) -> bool:
        return self.state.busy

    def _set_busy(self, busy: bool) -> None:
        if self.state.busy != busy:
            self.state.busy = busy
            self.busy_changed.emit(busy)

    def _set_algorithm(self, algorithm: str) -> None:
        self.state.current_algorithm = algorithm
        self.state.move_count = count_moves(algorithm)
        self.state_changed.emit(self.state)

    def _load_view(self, algorithm: str, error_message: str) -> bool:
        """Entrega el algoritmo al widget. Devuelve False si la construcción falla."""
        try:
            self.view.load_algorithm(self.state.variant, algorithm)
        except Exception:  # noqa: BLE001
            logger.exception("Puzzle widget failed to load %s", self.state.variant.value)
            self.notice.emit(error_message)
            return False
        return True

    def _wait_until_ready(self, on_done: Callable[[bool], None]) -> None:
        self._poller = ReadinessPoller(self.view.is_ready, on_done, self.schedule)
        self._poller.start()

    def _finish(self) -> None:
        self._set_busy(False)

    # -------------------
    # Acciones
    # -------------------
    def start(self) -> None:
        """Carga el puzzle inicial, espera al widget y agenda el primer scramble."""
        if self.state.busy:
            return

        logger.info("Initializing %s", self.state.variant.value)
        self._set_busy(True)
        self.state_changed.emit(self.state)

        if not self._load_view("", LOAD_FAILED_MESSAGE):
            self._set_busy(False)
            return

        self._wait_until_ready(self._on_initial_ready)

    def _on_ready(self, ready: bool) -> None:
        """Fin de la espera del widget: si se agotó el tope, se avisa al usuario."""
        if not ready:
            logger.error("Puzzle widget for %s never became ready", self.state.variant.value)
            self.notice.emit(LOAD_FAILED_MESSAGE)
        self._set_busy(False)

    def _on_initial_ready(self, ready: bool) -> None:
        self._on_ready(ready)
        self.schedule(INITIAL_SCRAMBLE_DELAY_MS, self._initial_scramble)

    def _initial_scramble(self) -> None:
        # Un switch dentro de la ventana de espera deja la sesión busy: el
        # scramble inicial se descarta como cualquier otra petición concurrente
        if self.state.busy:
            logger.info("Initial scramble skipped: session busy")
            return
        self.scramble()

    def scramble(self) -> None:
        """Genera y muestra un scramble de la longitud configurada para el puzzle."""
        if self.state.busy:
            logger.debug("Scramble ignored: session busy")
            return

        self._set_busy(True)

        variant = self.state.variant
        alg = generate_scramble(variant, SCRAMBLE_LENGTHS[variant], rng=self.rng)
        self._set_algorithm(alg)
        logger.info("Applying scramble: %s...", alg[:50])

        if not self._load_view(alg, "Failed to scramble cube"):
            self._set_busy(False)
            return

        self.schedule(SCRAMBLE_SETTLE_MS, self._finish_scramble)

    def _finish_scramble(self) -> None:
        try:
            self.view.jump_to_end()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Timeline control failed: %s", exc)
            self.notice.emit(TIMELINE_FAILED_MESSAGE)
        finally:
            self._set_busy(False)
        logger.info("Scramble operation completed")

    def solve(self) -> None:
        """Vuelve al algoritmo vacío (no hay solver: "resolver" es resetear)."""
        if self.state.busy:
            logger.debug("Solve ignored: session busy")
            return

        self._set_busy(True)
        self._set_algorithm("")
        logger.info("Resetting %s to solved state", self.state.variant.value)

        if not self._load_view("", "Failed to solve cube"):
            self._set_busy(False)
            return

        self.schedule(SOLVE_SETTLE_MS, self._finish)

    def switch_variant(self) -> None:
        """Alterna entre los dos puzzles soportados y resetea el algoritmo.

        El vocabulario y la política de adyacencia se resuelven por variante en
        cada scramble, así que basta con cambiar `state.variant`.
        """
        if self.state.busy:
            logger.debug("Switch ignored: session busy")
            return
        if not self.switchable:
            logger.info("Switch ignored: %s is a fixed puzzle", self.state.variant.value)
            return

        first, second = SWITCHABLE_VARIANTS
        self.state.variant = second if self.state.variant == first else first
        logger.info("Switching puzzle to %s", self.state.variant.value)

        self._set_busy(True)
        self._set_algorithm("")
        self.variant_changed.emit(self.state.variant)

        if not self._load_view("", LOAD_FAILED_MESSAGE):
            self._set_busy(False)
            return

        self._wait_until_ready(self._on_ready)
