"""
Domain models for containership_app.

These are pure Python in-memory classes; nothing here is persisted.
"""

from containership_app.models.errors import (
    CapacityExceededError,
    ContainerShipError,
    DuplicateContainerError,
    InvalidProductError,
    InvalidTemperatureError,
    NotFoundError,
    OverfillError,
    WeightExceededError,
)
from containership_app.models.serials import DEFAULT_ALLOCATOR, SerialNumberAllocator
from containership_app.models.product import MIN_TEMPERATURE_C, ProductType
from containership_app.models.container import (
    Container,
    GasContainer,
    HazardNotifier,
    LiquidContainer,
    RefrigeratedContainer,
)
from containership_app.models.ship import ContainerShip

__all__ = [
    "CapacityExceededError",
    "ContainerShipError",
    "DuplicateContainerError",
    "InvalidProductError",
    "InvalidTemperatureError",
    "NotFoundError",
    "OverfillError",
    "WeightExceededError",
    "DEFAULT_ALLOCATOR",
    "SerialNumberAllocator",
    "MIN_TEMPERATURE_C",
    "ProductType",
    "Container",
    "GasContainer",
    "HazardNotifier",
    "LiquidContainer",
    "RefrigeratedContainer",
    "ContainerShip",
]
