from .board import MOVES_ALLOWED, Board
from .session import HUMAN_BREAKER, HUMAN_MAKER, RoundResult, Scoreboard, Session

__all__ = ["MOVES_ALLOWED", "Board", "HUMAN_BREAKER", "HUMAN_MAKER", "RoundResult",
           "Scoreboard", "Session"]
