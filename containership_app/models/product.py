"""
Refrigerated product types and their minimum safe storage temperatures (°C).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from containership_app.models.errors import InvalidProductError


class ProductType(Enum):
    BANANAS = "Bananas"
    CHOCOLATE = "Chocolate"
    FISH = "Fish"
    MEAT = "Meat"
    ICE_CREAM = "Ice cream"
    FROZEN_PIZZA = "Frozen pizza"
    CHEESE = "Cheese"
    SAUSAGES = "Sausages"
    BUTTER = "Butter"
    EGGS = "Eggs"

    @property
    def min_temperature_c(self) -> float:
        return MIN_TEMPERATURE_C[self]

    @classmethod
    def parse(cls, value: "ProductType | str") -> "ProductType":
        """Resolve a ProductType or its display name ("Ice cream")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
            wanted = value.strip().casefold()
            for product in cls:
                if product.value.casefold() == wanted:
                    return product
        raise InvalidProductError(value)


MIN_TEMPERATURE_C: Dict[ProductType, float] = {
    ProductType.BANANAS: 13.3,
    ProductType.CHOCOLATE: 18.0,
    ProductType.FISH: 2.0,
    ProductType.MEAT: -15.0,
    ProductType.ICE_CREAM: -18.0,
    ProductType.FROZEN_PIZZA: -30.0,
    ProductType.CHEESE: 7.2,
    ProductType.SAUSAGES: 5.0,
    ProductType.BUTTER: 20.5,
    ProductType.EGGS: 19.0,
}
