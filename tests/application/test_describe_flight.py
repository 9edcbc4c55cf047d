"""Tests for the DescribeFlight use case."""

from solid.application.describe_flight import DescribeFlightHandler
from solid.domain.model.bird import CAN_FLY, CANNOT_FLY, Bird, Penguin


class TestDescribeFlight:

    def test_describes_every_creature(self):
        flights = DescribeFlightHandler().handle([Bird(), Penguin(), Bird()])
        assert [(f.kind, f.message) for f in flights] == [
            ("Bird", CAN_FLY),
            ("Penguin", CANNOT_FLY),
            ("Bird", CAN_FLY),
        ]

    def test_empty_flock(self):
        assert DescribeFlightHandler().handle([]) == []
