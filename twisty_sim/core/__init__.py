from twisty_sim.core.session import PuzzleSession, SessionState

__all__ = ["PuzzleSession", "SessionState"]
