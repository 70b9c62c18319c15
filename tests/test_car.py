"""Tests for cars and the car facade."""

import pytest

from carworks.parts import Part, DamageCategory
from carworks.car import Car, Ford, Fiat, BodyStyle, assemble_facade
from carworks.damage import DamageHandler
from carworks.output import BufferSink


@pytest.fixture
def sink():
    return BufferSink()


@pytest.fixture
def car(sink):
    return Fiat("Fiat Stilo 2.4", BodyStyle.HATCHBACK, sink)


class TestCar:
    """Test car construction."""

    def test_car_initialization(self, car):
        """Test car has one of each part in layout order."""
        assert [p.category for p in car.parts] == [
            DamageCategory.SUSPENSION,
            DamageCategory.TIRES,
            DamageCategory.ENGINE,
        ]
        assert all(p.condition == 100 for p in car.parts)
        assert car.owner_name is None
        assert car.model == "Fiat Stilo 2.4"
        assert car.body_style == BodyStyle.HATCHBACK

    def test_base_car_is_abstract(self, sink):
        """Test the base class cannot be built directly."""
        with pytest.raises(TypeError):
            Car("Generic", BodyStyle.SEDAN, sink)

    def test_manufacturers_differ_only_in_label(self, sink):
        """Test variants behave the same apart from their label."""
        ford = Ford("Ford Fusion", BodyStyle.SEDAN, sink)
        fiat = Fiat("Fiat Stilo 2.4", BodyStyle.SEDAN, sink)

        assert ford.manufacturer == "Ford"
        assert fiat.manufacturer == "Fiat"

        ford.facade.accelerate()
        fiat.facade.accelerate()
        assert ford.get_state()["parts"] == fiat.get_state()["parts"]

    def test_set_owner_overwrites(self, car):
        """Test owner assignment replaces the previous owner."""
        car.set_owner("Dimon")
        car.set_owner("Alex")

        assert car.owner_name == "Alex"

    def test_parts_property_is_copy(self, car):
        """Test callers cannot change the car's part list."""
        car.parts.clear()

        assert len(car.parts) == 3

    def test_get_part(self, car):
        """Test part lookup by category."""
        tires = car.get_part(DamageCategory.TIRES)

        assert tires.category == DamageCategory.TIRES
        assert tires is car.parts[1]

    def test_car_state(self, car):
        """Test car status report."""
        car.set_owner("Dimon")
        car.facade.accelerate()
        state = car.get_state()

        assert state["manufacturer"] == "Fiat"
        assert state["body_style"] == "hatchback"
        assert state["owner"] == "Dimon"
        assert len(state["parts"]) == 3
        assert state["avg_condition"] == pytest.approx(80.0)

    def test_handler_subscribed_once(self, car):
        """Test the damage handler is wired exactly once."""
        handlers = car.facade.router.handlers

        assert len(handlers) == 1
        assert handlers[0] is car.facade.handler


class TestCarFacade:
    """Test facade operations."""

    def test_fresh_car_needs_no_repair(self, car):
        """Test diagnosis of a new car is empty."""
        assert car.facade.diagnose() == []

    def test_accelerate_wears_tires(self, car, sink):
        """Test one acceleration drops only the tires to 40."""
        car.facade.accelerate()
        tires = car.get_part(DamageCategory.TIRES)

        assert tires.condition == 40
        assert tires.needs_repair
        assert car.get_part(DamageCategory.SUSPENSION).condition == 100
        assert car.get_part(DamageCategory.ENGINE).condition == 100
        assert car.facade.diagnose() == [tires]
        assert sink.lines[:3] == ["Move Forward", "Step On The Gas", "Damage Tires: 60"]

    def test_brake_clamps_suspension(self, car):
        """Test three brakes drive suspension to zero, not below."""
        for _ in range(3):
            car.facade.brake()

        assert car.get_part(DamageCategory.SUSPENSION).condition == 0

    def test_brake_log(self, car, sink):
        """Test brake logs movement before the control action."""
        car.facade.brake()

        assert sink.lines == ["Move Backward", "Hit The Brake", "Damage Suspension: 60"]

    def test_repair_diagnosed_parts(self, car):
        """Test repairing a diagnosis restores every listed part."""
        car.facade.accelerate()
        car.facade.brake()
        worn = car.facade.diagnose()
        assert len(worn) == 2

        car.facade.repair(worn)

        for part in worn:
            assert part.condition == 100
            assert not part.needs_repair
        assert car.facade.diagnose() == []

    def test_repair_is_permissive(self, car, sink):
        """Test repair accepts healthy and foreign parts."""
        stranger = Part(DamageCategory.ENGINE, sink=sink)
        stranger.damage(90)

        car.facade.repair([car.get_part(DamageCategory.ENGINE), stranger])

        assert stranger.condition == 100
        assert sink.lines[-2:] == ["Repair Engine", "Repair Engine"]

    def test_gear_and_steering_pass_through(self, car, sink):
        """Test non-damaging controls are reachable through the facade."""
        car.facade.change_gear()
        car.facade.steer(-10)

        assert sink.lines == ["Change Gear", "Turn The Wheel on angle: -10"]
        assert car.facade.diagnose() == []

    def test_assemble_facade(self, sink):
        """Test assembly wires handler to router over the given parts."""
        parts = [Part(DamageCategory.TIRES, sink=sink)]
        facade = assemble_facade(parts, sink)

        assert isinstance(facade.handler, DamageHandler)
        assert facade.router.handlers == (facade.handler,)

        facade.accelerate()
        assert parts[0].condition == 40
