"""
Color alphabet and code handling.

A code is a tuple of exactly CODE_LENGTH one-letter symbol ids drawn from
COLORS, with repetition allowed. Users type codes as short strings
("rryy"), so parse_code accepts strings as well as any sequence of ids and
normalizes case and surrounding whitespace.

This module answers the question: "Is this a code we can play?"
  - correct length
  - every symbol in the alphabet
Anything else raises InvalidCodeError.
"""

from __future__ import annotations

from itertools import product
from typing import Dict, Iterable, List, Tuple, Union

from .errors import InvalidCodeError

# Symbol id -> display color name (names understood by ansicolors).
COLORS: Dict[str, str] = {
    "r": "red",
    "y": "yellow",
    "b": "blue",
    "g": "green",
    "m": "magenta",
    "c": "cyan",
}

SYMBOLS: Tuple[str, ...] = tuple(COLORS)
CODE_LENGTH = 4

Code = Tuple[str, ...]
CodeLike = Union[str, Iterable[str]]


def parse_code(raw: CodeLike) -> Code:
    """
    Turn user input into a validated Code.

    Examples:
      parse_code("RRyy")          -> ('r', 'r', 'y', 'y')
      parse_code(["g", "B", ...]) -> ('g', 'b', ...)
      parse_code("rrx")           -> InvalidCodeError
    """
    if isinstance(raw, str):
        symbols = list(raw.strip().replace(" ", ""))
    else:
        try:
            symbols = list(raw)
        except TypeError as e:
            raise InvalidCodeError(f"Not a code: {raw!r}") from e

    code = tuple(s.strip().lower() if isinstance(s, str) else s for s in symbols)
    return validate_code(code)


def validate_code(code: Code) -> Code:
    """
    Check shape and alphabet of an already-normalized code; return it as-is.

    Raises InvalidCodeError with a message naming the first problem found.
    """
    if len(code) != CODE_LENGTH:
        raise InvalidCodeError(
            f"Code length must be {CODE_LENGTH}, but got {len(code)}."
        )
    for s in code:
        if not isinstance(s, str) or s not in COLORS:
            allowed = ", ".join(SYMBOLS)
            raise InvalidCodeError(f"Invalid color {s!r}. Allowed: {allowed}.")
    return tuple(code)


def format_code(code: Code) -> str:
    """('r', 'r', 'y', 'y') -> 'rryy'"""
    return "".join(code)


def all_codes() -> List[Code]:
    """Every possible code (6**4 == 1296), ordered by position in SYMBOLS."""
    return [tuple(p) for p in product(SYMBOLS, repeat=CODE_LENGTH)]
