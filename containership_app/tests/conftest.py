"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from containership_app.models import (
    ContainerShip,
    GasContainer,
    LiquidContainer,
    ProductType,
    RefrigeratedContainer,
    SerialNumberAllocator,
)


@pytest.fixture
def allocator():
    """Fresh serial counter starting at 1, independent of the process default."""
    return SerialNumberAllocator()


@pytest.fixture
def liquid(allocator):
    """Non-hazardous liquid container: 1000 kg payload, 500 kg tare."""
    return LiquidContainer(200, 500, 100, 1000, False, allocator=allocator)


@pytest.fixture
def hazardous_liquid(allocator):
    return LiquidContainer(200, 500, 100, 1000, True, allocator=allocator)


@pytest.fixture
def gas(allocator):
    return GasContainer(150, 400, 120, 800, 2.5, allocator=allocator)


@pytest.fixture
def reefer(allocator):
    return RefrigeratedContainer(250, 600, 150, 1200, ProductType.BANANAS, 13.3, allocator=allocator)


@pytest.fixture
def small_ship():
    """20 kn, 5 containers, 10 t."""
    return ContainerShip(20, 5, 10, name="Small")


@pytest.fixture
def large_ship():
    return ContainerShip(15, 10, 20, name="Large")


@pytest.fixture
def make_liquid(allocator):
    """Factory for non-hazardous liquid containers already holding cargo."""

    def _make(cargo_kg: float = 0.0, tare_kg: float = 500.0, max_payload: float = 1000.0):
        c = LiquidContainer(200, tare_kg, 100, max_payload, False, allocator=allocator)
        if cargo_kg:
            c.load_cargo(cargo_kg)
        return c

    return _make
