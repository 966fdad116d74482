"""
Experiment harness core primitives.

- run_case:  play a single game (one hidden secret) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- Enforces the board's 12-row limit at the harness layer.

Feedback always comes from the deterministic scorer against the real
secret, so an InconsistentFeedbackError here means a solver bug and is
allowed to propagate.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or the tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from codebreaker.engine import CodeLike, format_code, format_markers, parse_code, score

logger = logging.getLogger(__name__)

# Single source of truth for the turn budget (rows on a classic board).
MAX_TURNS = 12


def run_case(
        solver,
        secret: CodeLike,
        *,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver (make_guess / process_feedback / is_solved)
        secret:    the hidden code for this case
        max_turns: guess budget
        seed:      RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, markers)]), candidates_left (list[int]),
            secret (str)
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")

    secret_code = parse_code(secret)
    solver.reset(seed=seed)

    history: List = []
    candidates_left: List[int] = []

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        guess = solver.make_guess()
        fb = score(secret_code, guess)
        history.append((format_code(guess), format_markers(fb)))

        solver.process_feedback(fb)
        candidates_left.append(len(solver.candidates))
        logger.debug("turn %d: %s -> %s (%d left)",
                     turn, format_code(guess), fb, candidates_left[-1])

        if solver.is_solved():
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": solver.is_solved(),
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "candidates_left": candidates_left,
        "secret": format_code(secret_code),
    }


def run_batch(
        solver,
        secrets: Iterable[CodeLike],
        *,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, secret, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """Aggregate a batch: games, wins, success rate, mean/max guesses over wins."""
    n = len(results)
    wins = [r for r in results if r["success"]]
    guesses = [r["guesses"] for r in wins]
    return {
        "games": n,
        "wins": len(wins),
        "success_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(guesses) / len(guesses)) if guesses else 0.0,
        "max_guesses": max(guesses) if guesses else 0,
    }
