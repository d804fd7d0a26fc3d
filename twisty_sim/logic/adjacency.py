# twisty_sim/logic/adjacency.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from twisty_sim.logic.moves import PuzzleVariant, base_face

OPPOSITE_FACES: FrozenSet[Tuple[str, str]] = frozenset(
    {("R", "L"), ("L", "R"), ("U", "D"), ("D", "U"), ("F", "B"), ("B", "F")}
)
ROTATION_AXES: Tuple[str, ...] = ("y", "z")


@dataclass(frozen=True)
class AdjacencyPolicy:
    """Reglas que deciden si dos movimientos consecutivos son "demasiado parecidos".

    Siempre se prohíbe repetir el mismo token o la misma cara. Además:
    - `check_opposites`: en cubos, prohíbe pares de caras opuestas (R/L, U/D, F/B),
      comparando sin marcas de capa ("3Rw" cuenta como "R").
    - `check_rotations`: en megaminx, prohíbe repetir una rotación completa
      sobre el mismo eje (y/z).
    """

    variant: PuzzleVariant
    check_opposites: bool = False
    check_rotations: bool = False

    def too_similar(self, prev: str, nxt: str) -> bool:
        if nxt == prev:
            return True

        face_prev = base_face(prev)
        face_next = base_face(nxt)
        if face_next == face_prev:
            return True

        if self.check_opposites and (face_next, face_prev) in OPPOSITE_FACES:
            return True

        if self.check_rotations and face_next in ROTATION_AXES and prev.startswith(face_next):
            return True

        return False

    def is_allowed(self, prev: Optional[str], nxt: str) -> bool:
        """Indica si `nxt` puede seguir a `prev` en un scramble.

        Args:
            prev: Movimiento anterior aceptado; None para el primer movimiento.
            nxt: Candidato.

        Returns:
            True si el par es aceptable (el primer movimiento siempre lo es).
        """
        if prev is None:
            return True
        return not self.too_similar(prev, nxt)


_POLICIES: Dict[PuzzleVariant, AdjacencyPolicy] = {
    PuzzleVariant.CUBE_3X3X3: AdjacencyPolicy(PuzzleVariant.CUBE_3X3X3, check_opposites=True),
    PuzzleVariant.MEGAMINX: AdjacencyPolicy(PuzzleVariant.MEGAMINX, check_rotations=True),
    PuzzleVariant.CUBE_7X7X7: AdjacencyPolicy(PuzzleVariant.CUBE_7X7X7, check_opposites=True),
}


def policy_for(variant: PuzzleVariant) -> AdjacencyPolicy:
    """Devuelve la política de adyacencia de un puzzle."""
    return _POLICIES[PuzzleVariant(variant)]
