"""
Load plan checks for container ships.

Previews what loading a batch of containers would do to a ship without
mutating it: count over limit, weight over limit, duplicate serials, and
marginal utilisation near either limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from containership_app.config.limits import KG_PER_TONNE, MARGINAL_UTILISATION
from containership_app.models import Container, ContainerShip


class ValidationSeverity(Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class ValidationIssue:
    code: str
    severity: ValidationSeverity
    message: str
    serial_number: str | None = None
    value: float | None = None
    limit: float | None = None


@dataclass(slots=True)
class ValidationResult:
    valid: bool
    container_count: int
    total_weight_t: float
    # Serials ahead of the first container with an error, in plan order
    accepted: List[str] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == ValidationSeverity.WARNING for i in self.issues)


def validate_ship_load(ship: ContainerShip, candidates: Iterable[Container]) -> ValidationResult:
    """
    Check loading ``candidates`` onto ``ship`` in order.

    Every candidate is checked, not just those up to the first failure, so the
    result lists all problems. ``accepted`` stops at the first container with an
    error, which is where the non-transactional load_containers stops too.
    """
    issues: List[ValidationIssue] = []
    accepted: List[str] = []

    current = ship.containers
    aboard = {c.serial_number for c in current}
    count = len(current)
    gross_kg = sum(c.gross_weight for c in current)
    seen: set[str] = set()
    blocked = False

    for container in candidates:
        serial = container.serial_number
        rejected = False

        if serial in aboard:
            issues.append(
                ValidationIssue(
                    code="ALREADY_ON_SHIP",
                    severity=ValidationSeverity.ERROR,
                    message=f"{serial} is already aboard {ship.name}.",
                    serial_number=serial,
                )
            )
            rejected = True
        elif serial in seen:
            issues.append(
                ValidationIssue(
                    code="DUPLICATE_SERIAL",
                    severity=ValidationSeverity.ERROR,
                    message=f"{serial} appears more than once in the load plan.",
                    serial_number=serial,
                )
            )
            rejected = True
        seen.add(serial)

        # 1. Container count
        if count + 1 > ship.max_container_count:
            issues.append(
                ValidationIssue(
                    code="COUNT_OVER",
                    severity=ValidationSeverity.ERROR,
                    message=f"{serial} would be container {count + 1}; limit is {ship.max_container_count}.",
                    serial_number=serial,
                    value=float(count + 1),
                    limit=float(ship.max_container_count),
                )
            )
            rejected = True
        else:
            # 2. Weight, only checked once the count fits, as load_container does
            weight_t = (gross_kg + container.gross_weight) / KG_PER_TONNE
            if weight_t > ship.max_weight:
                issues.append(
                    ValidationIssue(
                        code="WEIGHT_OVER",
                        severity=ValidationSeverity.ERROR,
                        message=f"{serial} would bring total weight to {weight_t:.3f} t; limit is {ship.max_weight} t.",
                        serial_number=serial,
                        value=weight_t,
                        limit=ship.max_weight,
                    )
                )
                rejected = True

        if rejected:
            blocked = True
            continue

        count += 1
        gross_kg += container.gross_weight
        if not blocked:
            accepted.append(serial)

    total_weight_t = gross_kg / KG_PER_TONNE

    # 3. Marginal utilisation of the planned result
    if ship.max_container_count > 0 and count >= ship.max_container_count * MARGINAL_UTILISATION:
        issues.append(
            ValidationIssue(
                code="COUNT_MARGINAL",
                severity=ValidationSeverity.WARNING,
                message=f"{count} of {ship.max_container_count} container slots used.",
                value=float(count),
                limit=float(ship.max_container_count),
            )
        )
    if ship.max_weight > 0 and total_weight_t >= ship.max_weight * MARGINAL_UTILISATION:
        issues.append(
            ValidationIssue(
                code="WEIGHT_MARGINAL",
                severity=ValidationSeverity.WARNING,
                message=f"{total_weight_t:.3f} t of {ship.max_weight} t weight limit used.",
                value=total_weight_t,
                limit=ship.max_weight,
            )
        )

    valid = not any(i.severity == ValidationSeverity.ERROR for i in issues)
    return ValidationResult(
        valid=valid,
        container_count=count,
        total_weight_t=total_weight_t,
        accepted=accepted,
        issues=issues,
    )
