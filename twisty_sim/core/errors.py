# twisty_sim/core/errors.py
from __future__ import annotations


class TwistySimError(Exception):
    """Error base de la aplicación."""


class WidgetInitError(TwistySimError):
    """El widget externo no pudo construirse o cargar el algoritmo."""


class TimelineControlError(TwistySimError):
    """El comando "saltar al final" no está disponible o falló."""
