from twisty_sim.logic.adjacency import AdjacencyPolicy, policy_for
from twisty_sim.logic.moves import PuzzleVariant, count_moves, moves_for
from twisty_sim.logic.scramble import generate_scramble

__all__ = [
    "AdjacencyPolicy",
    "PuzzleVariant",
    "count_moves",
    "generate_scramble",
    "moves_for",
    "policy_for",
]
