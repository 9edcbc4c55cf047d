"""Unit tests for the flight behaviours."""

import pytest

from solid.domain.exceptions import ValidationError
from solid.domain.model.bird import (
    CAN_FLY,
    CANNOT_FLY,
    Bird,
    FlyBehavior,
    Penguin,
    bird_from_kind,
    bird_kinds,
)


class TestFlyBehavior:

    def test_bird_can_fly(self):
        assert Bird().fly() == CAN_FLY

    def test_penguin_swims_instead(self):
        assert Penguin().fly() == CANNOT_FLY

    @pytest.mark.parametrize("creature", [Bird(), Penguin()])
    def test_either_variant_through_the_contract(self, creature):
        def describe(flyer: FlyBehavior) -> str:
            return flyer.fly()

        assert describe(creature) in (CAN_FLY, CANNOT_FLY)

    def test_penguin_is_not_a_bird_subclass(self):
        assert not issubclass(Penguin, Bird)
        assert issubclass(Penguin, FlyBehavior)

    def test_contract_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            FlyBehavior()  # type: ignore[abstract]


class TestBirdFromKind:

    def test_known_kinds(self):
        assert isinstance(bird_from_kind("bird"), Bird)
        assert isinstance(bird_from_kind(" Penguin "), Penguin)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match="Unknown bird kind 'ostrich'"):
            bird_from_kind("ostrich")

    def test_kinds_are_sorted(self):
        assert bird_kinds() == ["bird", "penguin"]
