"""Tests for load plan validation."""

from __future__ import annotations

import pytest

from containership_app.models import (
    ContainerShip,
    DuplicateContainerError,
    GasContainer,
    WeightExceededError,
)
from containership_app.services.validation import ValidationSeverity, validate_ship_load


class TestValidateShipLoad:
    def test_clean_plan(self, large_ship, make_liquid):
        plan = [make_liquid(100), make_liquid(200)]
        v = validate_ship_load(large_ship, plan)
        assert v.valid
        assert not v.has_errors
        assert not v.has_warnings
        assert v.container_count == 2
        assert v.total_weight_t == pytest.approx(1.3)
        assert v.accepted == [c.serial_number for c in plan]

    def test_does_not_mutate_ship(self, small_ship, make_liquid):
        validate_ship_load(small_ship, [make_liquid(900) for _ in range(10)])
        assert len(small_ship) == 0

    def test_weight_over_matches_actual_load(self, small_ship, make_liquid, allocator):
        heavy = GasContainer(150, 500, 120, 10_000, 3.0, allocator=allocator)
        heavy.load_cargo(8000)
        plan = [make_liquid(900), make_liquid(900), heavy]

        v = validate_ship_load(small_ship, plan)
        assert not v.valid
        over = [i for i in v.issues if i.code == "WEIGHT_OVER"]
        assert len(over) == 1
        assert over[0].serial_number == heavy.serial_number
        assert over[0].value == pytest.approx(11.3)
        assert over[0].severity == ValidationSeverity.ERROR
        assert v.accepted == [plan[0].serial_number, plan[1].serial_number]

        with pytest.raises(WeightExceededError):
            small_ship.load_containers(plan)
        assert [c.serial_number for c in small_ship] == v.accepted

    def test_count_over_reports_every_extra(self, make_liquid):
        ship = ContainerShip(10, 2, 100)
        plan = [make_liquid() for _ in range(4)]
        v = validate_ship_load(ship, plan)
        codes = [i.code for i in v.issues if i.severity == ValidationSeverity.ERROR]
        assert codes == ["COUNT_OVER", "COUNT_OVER"]
        assert v.accepted == [plan[0].serial_number, plan[1].serial_number]

    def test_accepted_stops_at_first_error(self, make_liquid, allocator):
        ship = ContainerShip(10, 5, 3)
        heavy = GasContainer(150, 500, 120, 10_000, 3.0, allocator=allocator)
        heavy.load_cargo(5000)
        plan = [make_liquid(), heavy, make_liquid()]
        v = validate_ship_load(ship, plan)
        assert v.accepted == [plan[0].serial_number]
        assert v.container_count == 2

    def test_duplicates(self, small_ship, liquid, gas):
        small_ship.load_container(liquid)
        v = validate_ship_load(small_ship, [liquid, gas, gas])
        codes = {i.code for i in v.issues}
        assert "ALREADY_ON_SHIP" in codes
        assert "DUPLICATE_SERIAL" in codes
        assert v.accepted == []

        with pytest.raises(DuplicateContainerError):
            small_ship.load_containers([liquid, gas, gas])
        assert [c.serial_number for c in small_ship] == [liquid.serial_number] + v.accepted

    def test_duplicate_in_plan_matches_actual_load(self, small_ship, liquid, gas):
        plan = [liquid, gas, gas]
        v = validate_ship_load(small_ship, plan)
        assert not v.valid
        assert [i.code for i in v.issues if i.severity == ValidationSeverity.ERROR] == ["DUPLICATE_SERIAL"]
        assert v.accepted == [liquid.serial_number, gas.serial_number]

        with pytest.raises(DuplicateContainerError):
            small_ship.load_containers(plan)
        assert [c.serial_number for c in small_ship] == v.accepted

    def test_already_aboard_matches_actual_load(self, small_ship, liquid):
        small_ship.load_container(liquid)
        v = validate_ship_load(small_ship, [liquid])
        assert not v.valid
        assert v.accepted == []

        with pytest.raises(DuplicateContainerError):
            small_ship.load_container(liquid)
        assert len(small_ship) == 1

    def test_marginal_utilisation(self, make_liquid):
        ship = ContainerShip(10, 10, 5)
        plan = [make_liquid() for _ in range(10)]
        v = validate_ship_load(ship, plan)
        assert v.valid
        assert v.has_warnings
        codes = {i.code for i in v.issues}
        assert codes == {"COUNT_MARGINAL", "WEIGHT_MARGINAL"}

    def test_counts_containers_already_aboard(self, make_liquid):
        ship = ContainerShip(10, 3, 100)
        ship.load_containers([make_liquid(), make_liquid()])
        v = validate_ship_load(ship, [make_liquid(), make_liquid()])
        assert [i.code for i in v.issues if i.severity == ValidationSeverity.ERROR] == ["COUNT_OVER"]
