"""
Domain enums for the recipe catalog.
Contains the enumeration types and fixed labels used by search and filtering.
"""

import enum
from typing import Optional


# Category labels offered by the catalog UI; "All" means no category constraint.
ALL_CATEGORIES = "All"
RECIPE_CATEGORIES = [
    "Appetizer",
    "Main Course",
    "Dessert",
    "Salad",
    "Soup",
    "Beverage",
]


class PriceRange(str, enum.Enum):
    """Price brackets for recipe filtering.

    Lower bounds are inclusive, upper bounds exclusive.
    """

    ALL = "All"
    UNDER_10 = "under-10"
    FROM_10_TO_20 = "10-20"
    FROM_20_TO_30 = "20-30"
    OVER_30 = "over-30"

    @property
    def bounds(self) -> tuple[Optional[float], Optional[float]]:
        """Return (lower, upper); ``None`` means unbounded on that side."""
        return _PRICE_BOUNDS[self]

    def contains(self, price: float) -> bool:
        lower, upper = self.bounds
        if lower is not None and price < lower:
            return False
        if upper is not None and price >= upper:
            return False
        return True

    @classmethod
    def parse(cls, value) -> "PriceRange":
        """Accept enum values as well as the storefront labels ("Under $10", ...)."""
        if isinstance(value, cls):
            return value
        if value is None or value == "":
            return cls.ALL
        key = str(value).strip()
        if key in _PRICE_LABELS:
            return _PRICE_LABELS[key]
        if key.lower() == "all":
            return cls.ALL
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown price range: {value!r}")


_PRICE_BOUNDS = {
    PriceRange.ALL: (None, None),
    PriceRange.UNDER_10: (None, 10.0),
    PriceRange.FROM_10_TO_20: (10.0, 20.0),
    PriceRange.FROM_20_TO_30: (20.0, 30.0),
    PriceRange.OVER_30: (30.0, None),
}

_PRICE_LABELS = {
    "Under $10": PriceRange.UNDER_10,
    "$10-$20": PriceRange.FROM_10_TO_20,
    "$20-$30": PriceRange.FROM_20_TO_30,
    "Over $30": PriceRange.OVER_30,
    "<10": PriceRange.UNDER_10,
    ">=30": PriceRange.OVER_30,
}


class AdminRole(str, enum.Enum):
    """Roles stored in the signed session cookie"""

    ADMIN = "admin"
