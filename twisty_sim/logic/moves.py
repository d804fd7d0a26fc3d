# twisty_sim/logic/moves.py
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

SUFFIX: Tuple[str, ...] = ("", "'", "2")
MODIFIER_CHARS: str = "'2"


class PuzzleVariant(str, Enum):
    """Puzzles soportados. El valor es el id que entiende el widget externo."""

    CUBE_3X3X3 = "3x3x3"
    MEGAMINX = "megaminx"
    CUBE_7X7X7 = "7x7x7"


CUBE_FACES: Tuple[str, ...] = ("R", "U", "F", "L", "B", "D")

MEGAMINX_FACES: Tuple[str, ...] = (
    "R", "U", "F", "L", "BL", "BR", "DR", "D", "DL", "B",
)
MEGAMINX_ROTATIONS: Tuple[str, ...] = ("y", "z")

# Capas por giro en 7x7x7: simple, doble (wide) y triple (wide con prefijo)
BIG_CUBE_LAYER_FORMS: Tuple[str, ...] = ("{f}", "{f}w", "3{f}w")


def _with_suffixes(faces: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(face + suf for face in faces for suf in SUFFIX)


_VOCABULARY: Dict[PuzzleVariant, Tuple[str, ...]] = {
    PuzzleVariant.CUBE_3X3X3: _with_suffixes(CUBE_FACES),
    PuzzleVariant.MEGAMINX: _with_suffixes(MEGAMINX_FACES + MEGAMINX_ROTATIONS),
    PuzzleVariant.CUBE_7X7X7: _with_suffixes(
        tuple(form.format(f=face) for face in CUBE_FACES for form in BIG_CUBE_LAYER_FORMS)
    ),
}


def moves_for(variant: PuzzleVariant) -> Tuple[str, ...]:
    """Devuelve el vocabulario de movimientos legales de un puzzle.

    La tabla es estática y de solo lectura (una tupla por variante).

    Args:
        variant: Puzzle activo.

    Returns:
        Tupla con todos los tokens válidos, por ejemplo ("R", "R'", "R2", ...).
    """
    return _VOCABULARY[PuzzleVariant(variant)]


def split_move(tok: str) -> Tuple[str, str]:
    """Separa un token en (identificador de cara/eje, sufijo).

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Solo se quitan caracteres modificadores al final: los dígitos iniciales
      de capas ("3Rw") se conservan.
    - Corrige el caso típico "D2'" -> sufijo "2".

    Args:
        tok: Token de movimiento (por ejemplo: "R", "BL'", "3Rw2").

    Returns:
        Tupla (cara, sufijo), por ejemplo "3Rw2" -> ("3Rw", "2").
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    face = tok.rstrip(MODIFIER_CHARS)
    suf = tok[len(face):]

    if suf == "2'":
        suf = "2"

    return face, suf


def face_of(move: str) -> str:
    """Identificador de cara/eje con marcas de capa: "3Rw'" -> "3Rw"."""
    return split_move(move)[0]


def base_face(move: str) -> str:
    """Cara sin modificadores ni marcas de capa/wide: "3Rw'" -> "R", "y2" -> "y"."""
    face = face_of(move).lstrip("0123456789")
    if len(face) > 1 and face.endswith("w"):
        face = face[:-1]
    return face


def parse_sequence(text: Optional[str]) -> List[str]:
    """Convierte una secuencia escrita como texto en una lista de tokens.

    La entrada debe separar movimientos por espacios. Por ejemplo:
        "R U R' U'" -> ["R", "U", "R'", "U'"]
    """
    if not text:
        return []
    return [t for t in text.strip().split() if t.strip()]


def count_moves(sequence: Optional[str]) -> int:
    """Cuenta los movimientos de una secuencia.

    Args:
        sequence: Algoritmo separado por espacios; puede ser "" o None.

    Returns:
        Número de tokens no vacíos (0 para "" o None).
    """
    return len(parse_sequence(sequence))
