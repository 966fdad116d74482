"""
Error types raised by the engine, the solvers and the board.

Everything derives from CodeBreakerError so a UI can catch the whole family
in one place. Input errors also derive from ValueError.
"""


class CodeBreakerError(Exception):
    """Base class for all codebreaker errors."""


class InvalidCodeError(CodeBreakerError, ValueError):
    """A code has the wrong length or a symbol outside the color alphabet."""


class InvalidFeedbackError(CodeBreakerError, ValueError):
    """Feedback counts are out of range, or a marker string is malformed."""


class InconsistentFeedbackError(CodeBreakerError):
    """No remaining candidate could have produced the observed feedback."""


class BoardFullError(CodeBreakerError):
    """A guess was added after every row on the board was used."""
