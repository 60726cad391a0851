"""
Container ship: an ordered collection of containers under count and weight limits.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Iterable, Iterator, List, Tuple

from containership_app.config.limits import KG_PER_TONNE
from containership_app.models.container import Container
from containership_app.models.errors import (
    CapacityExceededError,
    DuplicateContainerError,
    NotFoundError,
    WeightExceededError,
)

_LOG = logging.getLogger(__name__)

# Stable ids order lock acquisition when two ships are involved
_SHIP_IDS = itertools.count(1)


class ContainerShip:
    """
    Holds containers in load order.

    Every successful mutation leaves ``len(ship) <= max_container_count`` and
    ``total_weight <= max_weight``. Replace and move are composed of a remove
    followed by a load and are not rolled back when the load fails.
    """

    def __init__(
        self,
        max_speed: float,
        max_container_count: int,
        max_weight: float,
        name: str = "",
    ) -> None:
        if max_container_count < 0:
            raise ValueError("Maximum container count must not be negative.")
        if max_weight < 0:
            raise ValueError("Maximum weight must not be negative.")
        self.ship_id = next(_SHIP_IDS)
        self.name = name or f"Ship {self.ship_id}"
        self._max_speed = max_speed
        self._max_container_count = max_container_count
        self._max_weight = max_weight
        self._containers: List[Container] = []
        self._lock = threading.RLock()

    # -- limits ----------------------------------------------------------

    @property
    def max_speed(self) -> float:
        """Knots (informational)."""
        return self._max_speed

    @property
    def max_container_count(self) -> int:
        return self._max_container_count

    @property
    def max_weight(self) -> float:
        """Tonnes."""
        return self._max_weight

    # -- queries ---------------------------------------------------------

    @property
    def containers(self) -> Tuple[Container, ...]:
        with self._lock:
            return tuple(self._containers)

    @property
    def total_weight(self) -> float:
        """Cargo plus tare of every container aboard, in tonnes."""
        with self._lock:
            return self._gross_kg() / KG_PER_TONNE

    @property
    def remaining_capacity(self) -> int:
        with self._lock:
            return max(0, self._max_container_count - len(self._containers))

    @property
    def remaining_weight(self) -> float:
        return max(0.0, self._max_weight - self.total_weight)

    def find_container(self, serial_number: str) -> Container | None:
        with self._lock:
            return self._find(serial_number)

    def __len__(self) -> int:
        with self._lock:
            return len(self._containers)

    def __iter__(self) -> Iterator[Container]:
        return iter(self.containers)

    def __contains__(self, serial_number: object) -> bool:
        if not isinstance(serial_number, str):
            return False
        return self.find_container(serial_number) is not None

    def __repr__(self) -> str:
        return (
            f"<ContainerShip {self.name!r} {len(self)}/{self._max_container_count} "
            f"containers, {self.total_weight:.3f}/{self._max_weight} t>"
        )

    # -- mutations -------------------------------------------------------

    def load_container(self, container: Container) -> None:
        with self._lock:
            if self._find(container.serial_number) is not None:
                raise DuplicateContainerError(container, self.name)
            if len(self._containers) >= self._max_container_count:
                raise CapacityExceededError(container, self._max_container_count)

            total = (self._gross_kg() + container.gross_weight) / KG_PER_TONNE
            if total > self._max_weight:
                raise WeightExceededError(container, total, self._max_weight)

            self._containers.append(container)
        _LOG.info("Loaded %s onto %s (%.3f t aboard)", container.serial_number, self.name, total)

    def load_containers(self, containers: Iterable[Container]) -> None:
        """
        Load containers one by one in order.

        Stops at the first rejected container; those loaded before it stay
        aboard. Use services.validation.validate_ship_load to check a batch first.
        """
        with self._lock:
            for container in containers:
                self.load_container(container)

    def remove_container(self, serial_number: str) -> Container:
        """Take a container off the ship and hand it back to the caller."""
        with self._lock:
            container = self._find(serial_number)
            if container is None:
                raise NotFoundError(serial_number)
            self._containers.remove(container)
        _LOG.info("Removed %s from %s", serial_number, self.name)
        return container

    def replace_container(self, serial_number: str, new_container: Container) -> Container:
        """
        Swap the container with ``serial_number`` for ``new_container``.

        If the new container is rejected the old one has already been removed
        and is not reloaded. Callers that may need it back should hold a
        reference (``find_container``) before replacing.
        """
        with self._lock:
            removed = self.remove_container(serial_number)
            self.load_container(new_container)
        return removed

    def unload_container(self, serial_number: str) -> None:
        """Empty the cargo of a container aboard; unknown serials are ignored."""
        with self._lock:
            container = self._find(serial_number)
            if container is None:
                _LOG.debug("Unload of %s on %s ignored: not aboard", serial_number, self.name)
                return
            container.empty_cargo()
        _LOG.info("Unloaded %s on %s (%s kg left)", serial_number, self.name, container.cargo_mass)

    def move_container_to_another_ship(self, serial_number: str, target: "ContainerShip") -> None:
        """
        Transfer a container to ``target``.

        When ``target`` rejects it, the container is already off this ship and
        belongs to neither; the raised error's ``container`` holds the reference.
        """
        first, second = sorted((self, target), key=lambda ship: ship.ship_id)
        with first._lock, second._lock:
            container = self.remove_container(serial_number)
            try:
                target.load_container(container)
            except (CapacityExceededError, DuplicateContainerError, WeightExceededError):
                _LOG.warning(
                    "%s removed from %s but rejected by %s; it is on neither ship",
                    serial_number,
                    self.name,
                    target.name,
                )
                raise
        _LOG.info("Moved %s from %s to %s", serial_number, self.name, target.name)

    # -- internals -------------------------------------------------------

    def _find(self, serial_number: str) -> Container | None:
        for container in self._containers:
            if container.serial_number == serial_number:
                return container
        return None

    def _gross_kg(self) -> float:
        return sum(c.gross_weight for c in self._containers)
