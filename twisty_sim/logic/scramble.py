# twisty_sim/logic/scramble.py
from __future__ import annotations

import logging
import random
from typing import List, Optional

from twisty_sim.logic.adjacency import policy_for
from twisty_sim.logic.moves import PuzzleVariant, moves_for

logger = logging.getLogger(__name__)

# Tope de intentos por posición; al agotarse se acepta el último candidato sorteado
MAX_ATTEMPTS: int = 10


def generate_moves(
    variant: PuzzleVariant,
    n: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Genera la lista de movimientos de un scramble.

    Muestreo por rechazo acotado: para cada posición se sortea un movimiento
    uniforme del vocabulario y se valida contra el anterior con la política de
    adyacencia. Si se agotan `MAX_ATTEMPTS` intentos se acepta el último
    candidato, por lo que la restricción puede violarse en casos raros.

    Args:
        variant: Puzzle para el que se genera el scramble.
        n: Cantidad de movimientos (>= 0).
        seed: Semilla opcional para resultados reproducibles.
        rng: Generador aleatorio explícito; tiene prioridad sobre `seed`.

    Returns:
        Lista con exactamente `n` tokens.

    Raises:
        ValueError: Si `n` es negativo.
    """
    if n < 0:
        raise ValueError("n no puede ser negativo.")

    if rng is None:
        rng = random.Random(seed)

    variant = PuzzleVariant(variant)
    vocabulary = moves_for(variant)
    policy = policy_for(variant)

    seq: List[str] = []
    last: Optional[str] = None

    for i in range(n):
        attempts = 0
        while True:
            move = rng.choice(vocabulary)
            attempts += 1
            if policy.is_allowed(last, move):
                break
            if attempts >= MAX_ATTEMPTS:
                # Tope agotado: se acepta el candidato aunque viole la adyacencia
                logger.debug(
                    "Scramble %s: retry cap hit at position %d, accepting %s after %s",
                    variant.value, i, move, last,
                )
                break

        seq.append(move)
        last = move

    return seq


def generate_scramble(
    variant: PuzzleVariant,
    n: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Genera una secuencia de mezcla (scramble) aleatoria.

    Returns:
        Un string con movimientos separados por espacios, por ejemplo:
        "R U' F2 L D2 ...". Para `n == 0` retorna "".
    """
    return " ".join(generate_moves(variant, n, seed=seed, rng=rng))
