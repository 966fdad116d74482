"""
Candidate filtering given game history.

Given:
  - a pool of codes (e.g., every possible code)
  - a history of (guess, feedback) pairs

Return:
  - codes that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
Solvers use this to ensure future guesses remain consistent with the past.
"""

from typing import Iterable, List, Tuple

from .codes import Code, CodeLike, parse_code
from .scoring import Feedback, _exact_partial, as_feedback

# History is a sequence of (guess, feedback) tuples.
History = Iterable[Tuple[CodeLike, Feedback]]


def filter_candidates(codes: Iterable[Code], history: History) -> List[Code]:
    """
    Keep only codes that would produce exactly the recorded feedback for
    every (guess, feedback) in `history`.

    Args:
      codes   : iterable of candidate codes (tuples, already valid)
      history : iterable of (guess, feedback) seen so far

    Returns:
      List of consistent candidates (order preserved as in `codes`).
    """
    # Validate the history once up front rather than once per candidate.
    checks = [(parse_code(g), as_feedback(fb)) for g, fb in history]

    out: List[Code] = []
    for c in codes:
        # A candidate survives only if, had it been the secret, each past
        # guess would have scored exactly what was observed.
        if all(_exact_partial(c, g) == fb for g, fb in checks):
            out.append(c)
    return out
