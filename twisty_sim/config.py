"""
Configuración y constantes globales
===================================
Registro central de valores fijos de la aplicación: longitudes de scramble,
retardos de la interfaz y parámetros del widget externo.

Los retardos de "asentamiento" son heurísticos: el widget externo no expone un
evento fiable de fin de animación, así que se espera un tiempo fijo elegido
empíricamente.
"""
from __future__ import annotations

from typing import Dict

from twisty_sim.logic.moves import PuzzleVariant

# Longitud típica de scramble por puzzle
SCRAMBLE_LENGTHS: Dict[PuzzleVariant, int] = {
    PuzzleVariant.CUBE_3X3X3: 20,
    PuzzleVariant.MEGAMINX: 70,
    PuzzleVariant.CUBE_7X7X7: 80,
}

# Puzzles alternables con el botón "Switch"
SWITCHABLE_VARIANTS = (PuzzleVariant.CUBE_3X3X3, PuzzleVariant.MEGAMINX)
DEFAULT_VARIANT: PuzzleVariant = PuzzleVariant.CUBE_3X3X3

# Retardos (ms)
SCRAMBLE_SETTLE_MS: int = 2000
SOLVE_SETTLE_MS: int = 500
INITIAL_SCRAMBLE_DELAY_MS: int = 1500
NOTICE_TIMEOUT_MS: int = 3000

# Polling de disponibilidad del widget: 50 x 100 ms => ~5 s
READY_POLL_INTERVAL_MS: int = 100
READY_POLL_MAX_ATTEMPTS: int = 50

# Widget externo (cubing.js)
TWISTY_MODULE_URL: str = "https://cdn.cubing.net/js/cubing/twisty"
PLAYER_OPTIONS: Dict[str, str] = {
    "hint-facelets": "none",
    "control-panel": "none",
    "background": "none",
    "visualization": "3D",
}

DEFAULT_THEME: str = "dark"

HEADINGS: Dict[PuzzleVariant, str] = {
    PuzzleVariant.CUBE_3X3X3: "🎲 3x3 Rubik's Cube Simulator",
    PuzzleVariant.MEGAMINX: "🌟 12x12 Dodecahedron Simulator",
    PuzzleVariant.CUBE_7X7X7: "🧊 7x7x7 Cube Simulator",
}
INFO_NOTES: Dict[PuzzleVariant, str] = {
    PuzzleVariant.CUBE_3X3X3: "3x3 Rubik's Cube selected",
    PuzzleVariant.MEGAMINX: "12-faced dodecahedron (megaminx) selected",
    PuzzleVariant.CUBE_7X7X7: "7x7x7 cube selected",
}
SWITCH_LABELS: Dict[PuzzleVariant, str] = {
    PuzzleVariant.CUBE_3X3X3: "Switch to 12x12",
    PuzzleVariant.MEGAMINX: "Switch to 3x3",
}

# Avisos transitorios
TIMELINE_FAILED_MESSAGE: str = "Scramble set, but the view may not show the scrambled state"
