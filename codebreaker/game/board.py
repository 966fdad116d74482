"""
Game board: the secret, the rows played so far, and a text rendering.

The board is the only place that knows the secret. Feedback for a guess is
always derived from the scorer unless a caller supplies it (the human code
maker typing markers); either way the board stores plain Feedback values
and only turns them into symbols when rendering.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from colors import color  # pip install ansicolors

from codebreaker.engine import (
    COLORS, BoardFullError, Code, CodeLike, Feedback, as_feedback, parse_code, score,
)

MOVES_ALLOWED = 12

CHECK_MARK = "✓"      # exact
WARNING_SIGN = "⚠"    # partial
MOVES_HOLDER = "°"    # empty / no match


def _paint_symbol(s: str, colorize: bool) -> str:
    return color(s, fg=COLORS[s]) if colorize else s


def _feedback_marks(fb: Optional[Feedback], n: int, colorize: bool) -> List[str]:
    exact, partial = fb if fb is not None else (0, 0)
    marks = [CHECK_MARK] * exact + [WARNING_SIGN] * partial
    marks += [MOVES_HOLDER] * (n - len(marks))
    if not colorize:
        return marks
    styles = {CHECK_MARK: {"fg": "green"}, WARNING_SIGN: {"fg": "yellow"},
              MOVES_HOLDER: {"style": "faint"}}
    return [color(m, **styles[m]) for m in marks]


class Board:
    def __init__(self, secret: CodeLike, *, moves_allowed: int = MOVES_ALLOWED):
        if moves_allowed < 1:
            raise ValueError(f"moves_allowed must be >= 1; got {moves_allowed}")
        self._secret: Code = parse_code(secret)
        self.moves_allowed = moves_allowed
        self._rows: List[Tuple[Code, Feedback]] = []

    # ---- state ----
    @property
    def rows(self) -> List[Tuple[Code, Feedback]]:
        return list(self._rows)

    @property
    def moves_used(self) -> int:
        return len(self._rows)

    @property
    def moves_left(self) -> int:
        return self.moves_allowed - len(self._rows)

    @property
    def code_broken(self) -> bool:
        return bool(self._rows) and self._rows[-1][1].solved

    @property
    def is_over(self) -> bool:
        return self.code_broken or self.moves_left == 0

    # ---- moves ----
    def expected_feedback(self, guess: CodeLike) -> Feedback:
        """What the scorer says `guess` earns against the secret."""
        return score(self._secret, guess)

    def add_guess(self, guess: CodeLike, feedback=None) -> Feedback:
        """
        Record a guess and its feedback; returns the feedback stored.

        With no feedback given, it is computed from the secret. Raises
        InvalidCodeError for a bad guess and BoardFullError when no rows
        are left.
        """
        code = parse_code(guess)
        if self.moves_left == 0:
            raise BoardFullError(f"All {self.moves_allowed} moves have been used")
        fb = self.expected_feedback(code) if feedback is None else as_feedback(feedback)
        self._rows.append((code, fb))
        return fb

    # ---- display ----
    def reveal_secret(self, *, colorize: bool = True) -> str:
        return ", ".join(_paint_symbol(s, colorize) for s in self._secret)

    def render(self, *, colorize: bool = True) -> str:
        """Board as text: guesses on the left, feedback marks on the right."""
        width = len(self._secret)
        lines = ["   Moves     | Feedback", " " + "-" * 22 + " "]
        for i in range(self.moves_allowed):
            if i < len(self._rows):
                code, fb = self._rows[i]
                left = [_paint_symbol(s, colorize) for s in code]
            else:
                fb = None
                left = _feedback_marks(None, width, colorize)
            right = _feedback_marks(fb, width, colorize)
            lines.append("|" + "".join(f" {s} " for s in left) + "| " +
                         "".join(f"{m} " for m in right) + "|")
        lines.append(" " + "-" * 22 + " ")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render(colorize=False)
