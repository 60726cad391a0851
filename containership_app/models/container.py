"""
Cargo containers: the abstract base and its liquid, gas and refrigerated kinds.

Masses are in kg, dimensions in cm. Only ``cargo_mass`` changes after
construction, through ``load_cargo`` and ``empty_cargo``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from containership_app.config.limits import (
    GAS_RESIDUE_RATIO,
    HAZARDOUS_LIQUID_FILL_RATIO,
    LIQUID_FILL_RATIO,
)
from containership_app.models.errors import InvalidTemperatureError, OverfillError
from containership_app.models.product import ProductType
from containership_app.models.serials import DEFAULT_ALLOCATOR, SerialNumberAllocator

_LOG = logging.getLogger(__name__)


class HazardNotifier(ABC):
    """Capability of containers whose overfill is a hazard worth signalling."""

    @abstractmethod
    def notify_hazard(self, serial_number: str) -> None:
        ...


class Container(ABC):
    """Base container with the plain max-payload loading rule."""

    # Kind tag used in the serial number (L, G, C); set by each concrete kind
    kind: ClassVar[str] = ""

    def __init__(
        self,
        height: float,
        tare_weight: float,
        depth: float,
        max_payload: float,
        *,
        allocator: SerialNumberAllocator | None = None,
    ) -> None:
        if not self.kind:
            raise TypeError(f"{type(self).__name__} is abstract; use a concrete container kind.")
        for name, value in (
            ("height", height),
            ("tare_weight", tare_weight),
            ("depth", depth),
            ("max_payload", max_payload),
        ):
            if value < 0:
                raise ValueError(f"{name} must not be negative (got {value}).")

        self._serial_number = (allocator or DEFAULT_ALLOCATOR).allocate(self.kind)
        self._height = height
        self._tare_weight = tare_weight
        self._depth = depth
        self._max_payload = max_payload
        self._cargo_mass = 0.0

    @property
    def serial_number(self) -> str:
        return self._serial_number

    @property
    def cargo_mass(self) -> float:
        return self._cargo_mass

    @property
    def height(self) -> float:
        return self._height

    @property
    def tare_weight(self) -> float:
        return self._tare_weight

    @property
    def depth(self) -> float:
        return self._depth

    @property
    def max_payload(self) -> float:
        return self._max_payload

    @property
    def gross_weight(self) -> float:
        """Cargo plus tare (kg)."""
        return self._cargo_mass + self._tare_weight

    def load_cargo(self, mass: float) -> None:
        """Set the cargo mass (absolute, not added to the current load)."""
        if mass < 0:
            raise ValueError(f"Cargo mass must not be negative (got {mass}).")
        if mass > self._max_payload:
            raise OverfillError(mass, self._max_payload, self._serial_number)
        self._cargo_mass = mass

    def empty_cargo(self) -> None:
        self._cargo_mass = 0.0

    def describe(self) -> str:
        return (
            f"{self._serial_number} - Cargo mass: {self._cargo_mass} kg, "
            f"Height: {self._height} cm, Tare weight: {self._tare_weight} kg, "
            f"Depth: {self._depth} cm, Max payload: {self._max_payload} kg"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._serial_number} cargo={self._cargo_mass}kg>"


class LiquidContainer(Container, HazardNotifier):
    """Liquid cargo: 90% fill limit, 50% when the cargo is hazardous."""

    kind = "L"

    def __init__(
        self,
        height: float,
        tare_weight: float,
        depth: float,
        max_payload: float,
        is_hazardous: bool,
        *,
        allocator: SerialNumberAllocator | None = None,
    ) -> None:
        super().__init__(height, tare_weight, depth, max_payload, allocator=allocator)
        self._is_hazardous = bool(is_hazardous)

    @property
    def is_hazardous(self) -> bool:
        return self._is_hazardous

    @property
    def fill_limit(self) -> float:
        ratio = HAZARDOUS_LIQUID_FILL_RATIO if self._is_hazardous else LIQUID_FILL_RATIO
        return self.max_payload * ratio

    def load_cargo(self, mass: float) -> None:
        limit = self.fill_limit
        if mass > limit:
            self.notify_hazard(self.serial_number)
            raise OverfillError(mass, limit, self.serial_number)
        # Base rule re-checks against max_payload, which never trips since limit <= max_payload
        super().load_cargo(mass)

    def notify_hazard(self, serial_number: str) -> None:
        _LOG.warning("HAZARD: dangerous operation on liquid container %s", serial_number)

    def describe(self) -> str:
        return super().describe() + f", Hazardous: {'yes' if self._is_hazardous else 'no'}"


class GasContainer(Container, HazardNotifier):
    """Pressurised gas: every overfill is a hazard, emptying leaves 5% residue."""

    kind = "G"

    def __init__(
        self,
        height: float,
        tare_weight: float,
        depth: float,
        max_payload: float,
        pressure: float,
        *,
        allocator: SerialNumberAllocator | None = None,
    ) -> None:
        super().__init__(height, tare_weight, depth, max_payload, allocator=allocator)
        self._pressure = pressure

    @property
    def pressure(self) -> float:
        """Gas pressure in atm (informational)."""
        return self._pressure

    def load_cargo(self, mass: float) -> None:
        if mass > self.max_payload:
            self.notify_hazard(self.serial_number)
            raise OverfillError(mass, self.max_payload, self.serial_number)
        super().load_cargo(mass)

    def empty_cargo(self) -> None:
        self._cargo_mass = self._cargo_mass * GAS_RESIDUE_RATIO

    def notify_hazard(self, serial_number: str) -> None:
        _LOG.warning(
            "HAZARD: dangerous operation on gas container %s under pressure %s atm",
            serial_number,
            self._pressure,
        )

    def describe(self) -> str:
        return super().describe() + f", Pressure: {self._pressure} atm"


class RefrigeratedContainer(Container):
    """Chilled or frozen products kept at or above the product's minimum temperature."""

    kind = "C"

    def __init__(
        self,
        height: float,
        tare_weight: float,
        depth: float,
        max_payload: float,
        product_type: ProductType | str,
        temperature: float,
        *,
        allocator: SerialNumberAllocator | None = None,
    ) -> None:
        # Validate before allocating so rejected containers do not consume a serial
        product = ProductType.parse(product_type)
        minimum = product.min_temperature_c
        if temperature < minimum:
            raise InvalidTemperatureError(product.value, temperature, minimum)

        super().__init__(height, tare_weight, depth, max_payload, allocator=allocator)
        self._product_type = product
        self._temperature = temperature

    @property
    def product_type(self) -> ProductType:
        return self._product_type

    @property
    def temperature(self) -> float:
        return self._temperature

    def describe(self) -> str:
        return (
            super().describe()
            + f", Product: {self._product_type.value}, Temperature: {self._temperature}°C"
        )
