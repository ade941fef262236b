from __future__ import annotations
from typing import List
from .base import BaseOracle, REGISTRY, register

from . import wordlist  # noqa: F401
from . import remote  # noqa: F401


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id, forwarding constructor kwargs.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
