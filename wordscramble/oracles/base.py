from __future__ import annotations
from typing import Dict, Type

from wordscramble.config import DEFAULT_LANGUAGE

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["BaseOracle"]] = {}


def register(cls: Type["BaseOracle"]) -> Type["BaseOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that oracles inherit ----
class BaseOracle:
    """
    Answers "is this a recognized word in `language`?".

    Implementations raise OracleUnavailableError when they cannot answer
    (missing resource, network failure, unsupported language). They must
    never answer True for a word they could not check.
    """
    id = "base"
    name = "Base"

    def is_recognized_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")

    def close(self) -> None:
        """Release any resources held by the oracle. No-op by default."""
