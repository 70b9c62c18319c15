"""
Car catalog - Cars offered for sale.

Provides:
- Filtering by body style
- Ownership transfer on purchase
"""

import logging
from typing import Iterator, List

from carworks.car.car import BodyStyle, Car


logger = logging.getLogger(__name__)


class CarCatalog:
    """List of cars available for sale.

    The catalog references the cars but does not own them; filtering
    never changes the underlying list.

    Usage:
        catalog = CarCatalog([ford, fiat])
        hatchbacks = catalog.filter_by_body_style(BodyStyle.HATCHBACK)
        catalog.transfer_ownership(hatchbacks[0], "Dimon")
    """

    def __init__(self, cars: List[Car]):
        """Initialize catalog.

        Args:
            cars: Cars offered for sale
        """
        if cars is None:
            raise ValueError("Catalog requires a list of cars")
        self._cars: List[Car] = list(cars)

    @property
    def cars(self) -> List[Car]:
        """Cars for sale, in catalog order."""
        return list(self._cars)

    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(list(self._cars))

    def filter_by_body_style(self, style: BodyStyle) -> List[Car]:
        """Get cars with the given body style.

        Args:
            style: Body style to match

        Returns:
            New list of matching cars, in catalog order
        """
        if style is None:
            raise ValueError("Body style is required")
        matches = [car for car in self._cars if car.body_style == style]
        logger.debug("Filter %s matched %d of %d cars", style.value, len(matches), len(self._cars))
        return matches

    def transfer_ownership(self, car: Car, new_owner_name: str) -> None:
        """Record the purchase of a car.

        Args:
            car: Car being bought
            new_owner_name: Name of the buyer
        """
        if car is None:
            raise ValueError("Cannot transfer ownership of a missing car")
        car.set_owner(new_owner_name)
