"""
In-memory model of cargo containers and the container ships that carry them.
"""

from containership_app.models import (
    CapacityExceededError,
    Container,
    ContainerShip,
    ContainerShipError,
    DuplicateContainerError,
    GasContainer,
    HazardNotifier,
    InvalidProductError,
    InvalidTemperatureError,
    LiquidContainer,
    NotFoundError,
    OverfillError,
    ProductType,
    RefrigeratedContainer,
    SerialNumberAllocator,
    WeightExceededError,
)

__all__ = [
    "CapacityExceededError",
    "Container",
    "ContainerShip",
    "ContainerShipError",
    "DuplicateContainerError",
    "GasContainer",
    "HazardNotifier",
    "InvalidProductError",
    "InvalidTemperatureError",
    "LiquidContainer",
    "NotFoundError",
    "OverfillError",
    "ProductType",
    "RefrigeratedContainer",
    "SerialNumberAllocator",
    "WeightExceededError",
]
