"""
Tabular cargo manifest of a container ship, built with pandas.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from containership_app.config.limits import KG_PER_TONNE
from containership_app.models import (
    Container,
    ContainerShip,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)

MANIFEST_COLUMNS = [
    "serial_number",
    "kind",
    "cargo_mass_kg",
    "tare_weight_kg",
    "gross_weight_kg",
    "max_payload_kg",
    "height_cm",
    "depth_cm",
    "hazardous",
    "pressure_atm",
    "product",
    "temperature_c",
]


def _container_row(container: Container) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "serial_number": container.serial_number,
        "kind": container.kind,
        "cargo_mass_kg": container.cargo_mass,
        "tare_weight_kg": container.tare_weight,
        "gross_weight_kg": container.gross_weight,
        "max_payload_kg": container.max_payload,
        "height_cm": container.height,
        "depth_cm": container.depth,
        "hazardous": None,
        "pressure_atm": None,
        "product": None,
        "temperature_c": None,
    }
    if isinstance(container, LiquidContainer):
        row["hazardous"] = container.is_hazardous
    elif isinstance(container, GasContainer):
        row["pressure_atm"] = container.pressure
    elif isinstance(container, RefrigeratedContainer):
        row["product"] = container.product_type.value
        row["temperature_c"] = container.temperature
    return row


def build_manifest_frame(ship: ContainerShip) -> pd.DataFrame:
    """One row per container aboard, in load order."""
    rows: List[Dict[str, Any]] = [_container_row(c) for c in ship.containers]
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)


def summarize_by_kind(ship: ContainerShip) -> pd.DataFrame:
    """Container count, cargo and gross tonnes per kind tag, indexed by kind."""
    df = build_manifest_frame(ship)
    if df.empty:
        return pd.DataFrame(
            columns=["count", "cargo_t", "gross_t"], index=pd.Index([], name="kind")
        )
    summary = df.groupby("kind").agg(
        count=("serial_number", "size"),
        cargo_t=("cargo_mass_kg", "sum"),
        gross_t=("gross_weight_kg", "sum"),
    )
    summary["cargo_t"] = summary["cargo_t"] / KG_PER_TONNE
    summary["gross_t"] = summary["gross_t"] / KG_PER_TONNE
    return summary
