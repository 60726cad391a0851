"""
Errors raised by containers and ships.

All are raised at the point of violation; callers decide whether to log,
abort or retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from containership_app.models.container import Container


class ContainerShipError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class OverfillError(ContainerShipError):
    """Attempted cargo mass exceeds the limit that applies to the container."""

    def __init__(self, mass: float, limit: float, serial_number: str | None = None) -> None:
        self.mass = mass
        self.limit = limit
        self.serial_number = serial_number
        where = f" into {serial_number}" if serial_number else ""
        super().__init__(
            f"Attempted to load {mass} kg{where}, but the allowed maximum is {limit} kg"
        )


class InvalidProductError(ContainerShipError, ValueError):
    def __init__(self, product_type: object) -> None:
        self.product_type = product_type
        super().__init__(f"Unknown product type: {product_type}")


class InvalidTemperatureError(ContainerShipError, ValueError):
    def __init__(self, product_type: object, temperature: float, minimum: float) -> None:
        self.product_type = product_type
        self.temperature = temperature
        self.minimum = minimum
        super().__init__(
            f"Temperature {temperature}°C is below the required {minimum}°C for {product_type}"
        )


class CapacityExceededError(ContainerShipError):
    """Ship already carries its maximum number of containers.

    ``container`` is the rejected container, which the caller still owns.
    """

    def __init__(self, container: "Container", max_container_count: int) -> None:
        self.container = container
        self.max_container_count = max_container_count
        super().__init__(
            f"Cannot load {container.serial_number}: ship is full "
            f"(maximum {max_container_count} containers)"
        )


class WeightExceededError(ContainerShipError):
    """Loading the container would take the ship over its weight limit."""

    def __init__(self, container: "Container", total_weight: float, max_weight: float) -> None:
        self.container = container
        self.total_weight = total_weight
        self.max_weight = max_weight
        super().__init__(
            f"Cannot load {container.serial_number}: total weight {total_weight:.3f} t "
            f"would exceed the maximum of {max_weight} t"
        )


class NotFoundError(ContainerShipError, LookupError):
    def __init__(self, serial_number: str) -> None:
        self.serial_number = serial_number
        super().__init__(f"Container {serial_number} was not found on the ship")


class DuplicateContainerError(ContainerShipError, ValueError):
    """A container with the same serial number is already aboard the ship."""

    def __init__(self, container: "Container", ship_name: str) -> None:
        self.container = container
        self.ship_name = ship_name
        super().__init__(f"Cannot load {container.serial_number}: already aboard {ship_name}")
