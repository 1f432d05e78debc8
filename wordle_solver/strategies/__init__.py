from __future__ import annotations
from typing import List
from .base import BaseStrategy, REGISTRY, register

from . import random_choice  # noqa: F401
from . import letter_freq  # noqa: F401

DEFAULT_STRATEGY = "random"


def create_strategy(strategy_id: str = DEFAULT_STRATEGY) -> BaseStrategy:
    """
    Factory: instantiate a registered strategy by id.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseStrategy", "REGISTRY", "register", "create_strategy",
           "get_strategy_ids", "DEFAULT_STRATEGY"]
