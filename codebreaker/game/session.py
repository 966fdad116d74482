"""
Multi-round game session between a human and the computer.

Each round the human is either the code maker (the solver guesses) or the
code breaker (the computer picks a random secret). The session only talks
to the outside world through two callables:

  ask(prompt) -> str   read one line from the player
  say(text)   -> None  show text to the player

so the terminal app and the tests can drive it the same way.

Scoring follows the classic board-game rule: the code maker earns one point
per guess the breaker needed, plus one bonus point if the code was never
broken.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable

from codebreaker.engine import (
    CODE_LENGTH, SYMBOLS, Code, Feedback, InconsistentFeedbackError, InvalidCodeError,
    InvalidFeedbackError, format_code, parse_code, parse_markers,
)
from codebreaker.solvers import create_solver
from .board import MOVES_ALLOWED, Board

logger = logging.getLogger(__name__)

HUMAN_MAKER = "maker"
HUMAN_BREAKER = "breaker"

Ask = Callable[[str], str]
Say = Callable[[str], None]


@dataclass
class RoundResult:
    human_role: str
    secret: str
    guesses: int
    broken: bool
    aborted: bool = False

    @property
    def maker_points(self) -> int:
        if self.aborted:
            return 0
        return self.guesses + (0 if self.broken else 1)


@dataclass
class Scoreboard:
    human: int = 0
    computer: int = 0

    def record(self, result: RoundResult) -> None:
        if result.human_role == HUMAN_MAKER:
            self.human += result.maker_points
        else:
            self.computer += result.maker_points

    def leader(self) -> str:
        """'human', 'computer' or 'tie'."""
        if self.human == self.computer:
            return "tie"
        return "human" if self.human > self.computer else "computer"


class Session:
    def __init__(self, ask: Ask, say: Say, *, seed: int | None = None,
                 max_turns: int = MOVES_ALLOWED, colorize: bool = True,
                 solver_id: str = "random_consistent"):
        self.ask = ask
        self.say = say
        self.rng = random.Random(seed)
        self.max_turns = max_turns
        self.colorize = colorize
        self.solver = create_solver(solver_id)
        self.scoreboard = Scoreboard()

    def play_round(self, human_role: str) -> RoundResult:
        if human_role == HUMAN_MAKER:
            result = self._computer_breaks()
        elif human_role == HUMAN_BREAKER:
            result = self._human_breaks()
        else:
            raise ValueError(f"human_role must be {HUMAN_MAKER!r} or {HUMAN_BREAKER!r}")

        self.scoreboard.record(result)
        logger.info("round over: %s", result)
        return result

    # ---- human is the code maker ----
    def _computer_breaks(self) -> RoundResult:
        secret = self._ask_secret()
        board = Board(secret, moves_allowed=self.max_turns)
        self.solver.reset(seed=self.rng.randrange(2 ** 31))

        while not board.is_over:
            guess = self.solver.make_guess()
            self.say(f"Computer's move: {format_code(guess)}")
            fb = self._ask_feedback()
            board.add_guess(guess, fb)
            self.say(board.render(colorize=self.colorize))
            if fb.solved:
                break
            try:
                self.solver.process_feedback(fb)
            except InconsistentFeedbackError as e:
                logger.warning("aborting round: %s", e)
                self.say(f"The feedback contradicts every possible code; round aborted. ({e})")
                return RoundResult(HUMAN_MAKER, format_code(secret), board.moves_used,
                                   broken=False, aborted=True)

        return self._finish(board, HUMAN_MAKER, secret)

    def _ask_secret(self) -> Code:
        self.say("You've chosen to be the code maker. Now choose your secret")
        self.say("Available colors: " + ", ".join(SYMBOLS))
        self.say("Example: ymbr. This will select Yellow, Magenta, Blue and Red")
        while True:
            raw = self.ask("~>: ")
            try:
                return parse_code(raw)
            except InvalidCodeError as e:
                self.say(f"Invalid secret {raw!r}: {e} Try again")

    def _ask_feedback(self) -> Feedback:
        """Read marker feedback. It is taken at face value, not checked against the secret."""
        self.say("Feedback marks: 'b' right color and place, 'w' right color only, '.' miss")
        while True:
            raw = self.ask("Provide feedback for move: ~> ")
            if not raw.strip():
                self.say("Feedback can't be empty (use '....' for no matches)")
                continue
            try:
                fb = parse_markers(raw)
            except InvalidFeedbackError as e:
                self.say(str(e))
                continue
            return fb

    # ---- human is the code breaker ----
    def _human_breaks(self) -> RoundResult:
        secret = tuple(self.rng.choice(SYMBOLS) for _ in range(CODE_LENGTH))
        board = Board(secret, moves_allowed=self.max_turns)
        self.say("Your move: make a guess. Colors: " + ", ".join(SYMBOLS))

        while not board.is_over:
            raw = self.ask(f"Guess {board.moves_used + 1}/{board.moves_allowed} ~>: ")
            try:
                board.add_guess(raw)
            except InvalidCodeError as e:
                self.say(f"Your guess {raw} has invalid colors: {e} Try again")
                continue
            self.say(board.render(colorize=self.colorize))

        return self._finish(board, HUMAN_BREAKER, secret)

    def _finish(self, board: Board, human_role: str, secret: Code) -> RoundResult:
        if board.code_broken:
            self.say("Hurray, the secret code was cracked")
        self.say(f"The secret code was: {board.reveal_secret(colorize=self.colorize)}")
        return RoundResult(human_role, format_code(secret), board.moves_used,
                           broken=board.code_broken)
