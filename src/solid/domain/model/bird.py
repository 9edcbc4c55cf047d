"""Liskov Substitution: anything that reports how it flies.

Callers hold a ``FlyBehavior`` and call ``fly()``. A penguin is a
valid ``FlyBehavior``; it answers differently but never raises, so no
caller has to check which variant it was given.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solid.domain.exceptions import ValidationError

CAN_FLY = "I can fly"
CANNOT_FLY = "I cannot fly, I swim instead"


class FlyBehavior(ABC):

    @abstractmethod
    def fly(self) -> str:
        """Describe how this creature gets around."""


class Bird(FlyBehavior):

    def fly(self) -> str:
        return CAN_FLY


class Penguin(FlyBehavior):

    def fly(self) -> str:
        return CANNOT_FLY


_KINDS: dict[str, type[FlyBehavior]] = {
    "bird": Bird,
    "penguin": Penguin,
}


def bird_from_kind(kind: str) -> FlyBehavior:
    """Build a flying (or swimming) creature by its lowercase name."""
    try:
        return _KINDS[kind.strip().lower()]()
    except KeyError:
        raise ValidationError(
            f"Unknown bird kind '{kind}'. Expected one of: {', '.join(sorted(_KINDS))}"
        ) from None


def bird_kinds() -> list[str]:
    return sorted(_KINDS)
