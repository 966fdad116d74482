"""
Random Consistent solver.

Strategy:
  - Open with a fixed guess (rryy).
  - After each feedback, choose uniformly at random from the CURRENT
    candidate set (codes still consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Every guess after the first is a possible secret, so each round removes
    at least the guess itself unless it was the answer. The game therefore
    always ends, typically in 5-6 guesses on the 1296-code board.
  - It does not try to maximize information gain; minimax selection is a
    different algorithm.
"""

from __future__ import annotations

from typing import List

from codebreaker.engine import Code
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, candidates: List[Code]) -> Code:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            candidates: non-empty list of codes consistent with all feedback.
        """
        i = self.rng.randrange(len(candidates))
        return candidates[i]
