from .codes import (
    CODE_LENGTH, COLORS, SYMBOLS, Code, CodeLike, all_codes, format_code, parse_code, validate_code,
)
from .errors import (
    BoardFullError, CodeBreakerError, InconsistentFeedbackError, InvalidCodeError,
    InvalidFeedbackError,
)
from .scoring import Feedback, as_feedback, score
from .constraints import filter_candidates
from .markers import format_markers, parse_markers

__all__ = [
    "CODE_LENGTH", "COLORS", "SYMBOLS", "Code", "CodeLike", "all_codes", "format_code", "parse_code",
    "validate_code",
    "CodeBreakerError", "InvalidCodeError", "InvalidFeedbackError",
    "InconsistentFeedbackError", "BoardFullError",
    "Feedback", "as_feedback", "score", "filter_candidates",
    "format_markers", "parse_markers",
]
