from __future__ import annotations

from typing import List

from .base import OPENING_GUESS, BaseSolver, REGISTRY, register

from . import random_consistent  # noqa: F401
from .random_consistent import RandomConsistentSolver


def create_solver(solver_id: str, *, seed: int | None = None) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(seed=seed)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseSolver", "OPENING_GUESS", "REGISTRY", "RandomConsistentSolver", "create_solver",
           "get_solver_ids", "register"]
