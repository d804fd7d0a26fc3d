# twisty_sim/tests/fakes.py
from __future__ import annotations

from typing import Callable, List, Tuple

from twisty_sim.core.errors import TimelineControlError, WidgetInitError


class ManualScheduler:
    """Reemplaza a QTimer.singleShot: guarda los callbacks y los ejecuta a mano."""

    def __init__(self) -> None:
        self.pending: List[Tuple[int, Callable[[], None]]] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.pending.append((delay_ms, callback))

    def delays(self) -> List[int]:
        return [d for d, _ in self.pending]

    def run_next(self) -> None:
        _, callback = self.pending.pop(0)
        callback()

    def run_all(self, limit: int = 1000) -> int:
        ran = 0
        while self.pending and ran < limit:
            self.run_next()
            ran += 1
        return ran


class FakeView:
    def __init__(self, ready: bool = True) -> None:
        self.ready = ready
        self.fail_load = False
        self.fail_jump = False
        self.loads: List[Tuple[object, str]] = []
        self.jumps = 0
        self.ready_checks = 0

    def load_algorithm(self, variant, algorithm: str) -> None:
        if self.fail_load:
            raise WidgetInitError("boom")
        self.loads.append((variant, algorithm))

    def is_ready(self) -> bool:
        self.ready_checks += 1
        return self.ready

    def jump_to_end(self) -> None:
        if self.fail_jump:
            raise TimelineControlError("no timeline")
        self.jumps += 1
