"""
Mastermind-style scoring (feedback) for a single (secret, guess) pair.

Conventions:
  - exact   : right color in the right position
  - partial : right color in the wrong position, credited at most once per
              occurrence of that color in the secret

This implementation is:
  - duplicate-safe (respects true color multiplicities in the secret)
  - deterministic (same inputs -> same outputs)
  - pure (no state, no I/O)

Algorithm (two-pass):
  1) First pass counts exact matches. Secret positions matched exactly are
     consumed; the rest go into a multiset of still-available colors.
  2) Second pass credits a partial for each non-exact guess color that is
     still available, consuming one occurrence per credit.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator

from .codes import CODE_LENGTH, Code, CodeLike, parse_code
from .errors import InvalidFeedbackError


@dataclass(frozen=True)
class Feedback:
    """Result of comparing a guess against the secret."""
    exact: int
    partial: int

    def __post_init__(self):
        for name in ("exact", "partial"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool) or v < 0:
                raise InvalidFeedbackError(f"{name} must be a non-negative int, got {v!r}")
        if self.exact + self.partial > CODE_LENGTH:
            raise InvalidFeedbackError(
                f"exact + partial must be <= {CODE_LENGTH}, got {self.exact} + {self.partial}"
            )

    @property
    def solved(self) -> bool:
        return self.exact == CODE_LENGTH

    def __iter__(self) -> Iterator[int]:
        # allows `exact, partial = fb`
        yield self.exact
        yield self.partial

    def __str__(self) -> str:
        return f"{self.exact}/{self.partial}"


def as_feedback(value) -> Feedback:
    """Accept a Feedback or an (exact, partial) pair."""
    if isinstance(value, Feedback):
        return value
    try:
        exact, partial = value
    except (TypeError, ValueError) as e:
        raise InvalidFeedbackError(f"Expected (exact, partial), got {value!r}") from e
    return Feedback(exact, partial)


def _exact_partial(secret: Code, guess: Code) -> Feedback:
    """Score two codes already known to be valid."""
    exact = 0
    remaining = Counter()
    for s, g in zip(secret, guess):
        if s == g:
            exact += 1
        else:
            remaining[s] += 1

    partial = 0
    for s, g in zip(secret, guess):
        if s == g:
            continue  # already exact; skip
        if remaining[g] > 0:
            partial += 1
            remaining[g] -= 1  # consume one instance

    return Feedback(exact, partial)


def score(secret: CodeLike, guess: CodeLike) -> Feedback:
    """
    Compute feedback for `guess` against `secret`.

    Both arguments go through parse_code, so strings like "rryy" work and
    invalid codes raise InvalidCodeError.

    Examples:
      score("rryb", "rrry") -> Feedback(exact=2, partial=1)
      score("rybg", "rryy") -> Feedback(exact=1, partial=1)
    """
    return _exact_partial(parse_code(secret), parse_code(guess))
