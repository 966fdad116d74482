"""
Feedback marker strings.

Humans report feedback as a short string of marks, one per peg:
  - 'b' : exact   (black peg)
  - 'w' : partial (white peg)
  - '.' : no match (optional; may be left out)

Only the counts matter. "wb", "bw.." and ".b.w" all mean Feedback(1, 1).
Markers are translated at the boundary and never reach the solver.
"""

from __future__ import annotations

from .codes import CODE_LENGTH
from .errors import InvalidFeedbackError
from .scoring import Feedback

EXACT_MARK = "b"
PARTIAL_MARK = "w"
EMPTY_MARK = "."


def parse_markers(text: str) -> Feedback:
    """
    Translate a marker string into a Feedback.

    Raises InvalidFeedbackError on unknown characters or too many marks.
    """
    if not isinstance(text, str):
        raise InvalidFeedbackError(f"Feedback must be a string, got {text!r}")

    marks = text.strip().lower().replace(" ", "")
    if len(marks) > CODE_LENGTH:
        raise InvalidFeedbackError(
            f"Feedback has {len(marks)} marks; at most {CODE_LENGTH} allowed"
        )
    bad = sorted(set(marks) - {EXACT_MARK, PARTIAL_MARK, EMPTY_MARK})
    if bad:
        raise InvalidFeedbackError(
            f"Feedback should only include '{EMPTY_MARK}', '{PARTIAL_MARK}' and "
            f"'{EXACT_MARK}' (got {''.join(bad)!r})"
        )
    return Feedback(marks.count(EXACT_MARK), marks.count(PARTIAL_MARK))


def format_markers(feedback: Feedback) -> str:
    """Feedback(1, 2) -> 'bww.' (exact first, then partial, padded)."""
    exact, partial = feedback
    marks = EXACT_MARK * exact + PARTIAL_MARK * partial
    return marks.ljust(CODE_LENGTH, EMPTY_MARK)
