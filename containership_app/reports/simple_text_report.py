"""
Simple text-based report builder for a container ship.
"""

from __future__ import annotations

import sys
from typing import TextIO

from containership_app.models import ContainerShip


def build_ship_summary_text(ship: ContainerShip) -> str:
    lines: list[str] = []
    lines.append(
        f"Ship: {ship.name} (max speed: {ship.max_speed} kn, "
        f"max containers: {ship.max_container_count}, max weight: {ship.max_weight} t)"
    )
    lines.append(f"Loaded: {len(ship)} containers, {ship.total_weight:.3f} t")
    lines.append("Containers:")
    for container in ship.containers:
        lines.append(f"- {container.describe()}")
    return "\n".join(lines)


def print_ship_info(ship: ContainerShip, file: TextIO | None = None) -> None:
    print(build_ship_summary_text(ship), file=file or sys.stdout)
