from __future__ import annotations

import logging
import random
from typing import Dict, List, Type

from codebreaker.engine import Code, InconsistentFeedbackError, all_codes, as_feedback, \
    filter_candidates

logger = logging.getLogger(__name__)

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}

# Two of one color, two of another.
OPENING_GUESS: Code = ("r", "r", "y", "y")


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Owns the candidate set and the active guess for one game.

    Callers alternate make_guess() and process_feedback(). Subclasses only
    decide how the next guess is picked from the filtered candidates.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, *, seed: int | None = None, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self._candidates: List[Code] = []
        self._guess: Code = OPENING_GUESS
        self._solved = False
        self._rounds = 0
        self.reset()

    def reset(self, *, seed: int | None = None) -> None:
        """Start a new game: full universe, opening guess."""
        if seed is not None:
            self.rng.seed(seed)
        self._candidates = all_codes()
        self._guess = OPENING_GUESS
        self._solved = False
        self._rounds = 0

    @property
    def candidates(self) -> List[Code]:
        return list(self._candidates)

    @property
    def rounds(self) -> int:
        """Number of feedback values processed so far."""
        return self._rounds

    def make_guess(self) -> Code:
        return self._guess

    def is_solved(self) -> bool:
        return self._solved

    def process_feedback(self, observed) -> None:
        """
        Narrow the candidates to those that would have scored `observed`
        against the active guess, then pick the next guess.

        Raises InconsistentFeedbackError (leaving state untouched) if no
        candidate survives.
        """
        fb = as_feedback(observed)
        before = len(self._candidates)
        remaining = filter_candidates(self._candidates, [(self._guess, fb)])
        if not remaining:
            raise InconsistentFeedbackError(
                f"No code is consistent with feedback {fb} for guess "
                f"{''.join(self._guess)} ({before} candidates checked)"
            )

        self._candidates = remaining
        self._solved = fb.solved
        self._rounds += 1
        self._guess = self.next_guess(remaining)
        logger.debug("%s: feedback %s narrowed %d -> %d, next guess %s",
                     self.id, fb, before, len(remaining), "".join(self._guess))

    def next_guess(self, candidates: List[Code]) -> Code:
        raise NotImplementedError("Override in subclass")
