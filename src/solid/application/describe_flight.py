"""Application service: ask every creature how it flies."""

from __future__ import annotations

from solid.application.dto import FlightDTO
from solid.domain.model.bird import FlyBehavior


class DescribeFlightHandler:

    def handle(self, birds: list[FlyBehavior]) -> list[FlightDTO]:
        """Call ``fly()`` on each one; no variant gets special treatment."""
        return [
            FlightDTO(kind=type(bird).__name__, message=bird.fly())
            for bird in birds
        ]
