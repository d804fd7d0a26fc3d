# twisty_sim/core/readiness.py
from __future__ import annotations

import logging
from typing import Callable

from twisty_sim.config import READY_POLL_INTERVAL_MS, READY_POLL_MAX_ATTEMPTS

logger = logging.getLogger(__name__)

ReadyPredicate = Callable[[], bool]
OnDoneCallback = Callable[[bool], None]
Scheduler = Callable[[int, Callable[[], None]], None]


class ReadinessPoller:
    """Espera acotada a que el widget externo esté listo.

    Consulta `predicate` cada `interval_ms` hasta que devuelva True o se alcance
    `max_attempts`. En ambos casos llama a `on_done(ready)`: al agotar el tope se
    continúa igualmente (disponibilidad antes que exactitud).
    """

    def __init__(
        self,
        predicate: ReadyPredicate,
        on_done: OnDoneCallback,
        schedule: Scheduler,
        interval_ms: int = READY_POLL_INTERVAL_MS,
        max_attempts: int = READY_POLL_MAX_ATTEMPTS,
    ) -> None:
        self.predicate = predicate
        self.on_done = on_done
        self.schedule = schedule
        self.interval_ms: int = interval_ms
        self.max_attempts: int = max_attempts
        self.attempts: int = 0

    def start(self) -> None:
        self.attempts = 0
        self._check()

    def _is_ready(self) -> bool:
        try:
            return bool(self.predicate())
        except Exception:  # noqa: BLE001
            logger.exception("Readiness check failed")
            return False

    def _check(self) -> None:
        self.attempts += 1

        if self._is_ready():
            logger.info("Puzzle widget ready after %d attempt(s)", self.attempts)
            self.on_done(True)
        elif self.attempts >= self.max_attempts:
            logger.warning(
                "Puzzle widget not ready after %d attempts, proceeding anyway",
                self.attempts,
            )
            self.on_done(False)
        else:
            self.schedule(self.interval_ms, self._check)
