"""
Car - Base car and manufacturer variants.

Each car owns one suspension, one set of tires and one engine, and
exposes them through a CarFacade assembled at construction time.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional
import numpy as np

from carworks.parts import DamageCategory, Part, PartConfig
from carworks.car.facade import CarFacade, assemble_facade
from carworks.output import ConsoleSink, OutputSink


logger = logging.getLogger(__name__)


class BodyStyle(Enum):
    """Car body types."""
    CABRIOLET = "cabriolet"
    HATCHBACK = "hatchback"
    SEDAN = "sedan"


# Part creation order; diagnostics report in this order
PART_LAYOUT = (
    DamageCategory.SUSPENSION,
    DamageCategory.TIRES,
    DamageCategory.ENGINE,
)


class Car:
    """Base class for all cars.

    Not instantiated directly; manufacturer variants supply the
    model name and label.

    Usage:
        car = Ford("Ford Fusion", BodyStyle.SEDAN)
        car.facade.accelerate()
        worn = car.facade.diagnose()
    """

    manufacturer: str = ""

    def __init__(
        self,
        model: str,
        body_style: BodyStyle,
        sink: OutputSink | None = None,
        part_config: PartConfig | None = None,
    ):
        """Initialize car with fresh parts.

        Args:
            model: Model name
            body_style: Body type
            sink: Destination for action log lines. Console if None.
            part_config: Condition limits for the parts. Uses defaults if None.
        """
        if type(self) is Car:
            raise TypeError("Car is abstract, use a manufacturer variant")

        self.model = model
        self.body_style = body_style
        self.owner_name: Optional[str] = None

        sink = sink or ConsoleSink()
        self._parts: List[Part] = [
            Part(category, part_config, sink) for category in PART_LAYOUT
        ]
        self.facade: CarFacade = assemble_facade(self._parts, sink)

    @property
    def parts(self) -> List[Part]:
        """Parts in layout order (suspension, tires, engine)."""
        return list(self._parts)

    def get_part(self, category: DamageCategory) -> Part:
        """Get the part of the given category.

        Args:
            category: Damage category to look up

        Returns:
            The matching part
        """
        for part in self._parts:
            if part.category == category:
                return part
        raise KeyError(category)

    def set_owner(self, name: str) -> None:
        """Set the owner, replacing any previous one.

        Args:
            name: New owner name
        """
        logger.debug("%s owner changed from %r to %r", self.model, self.owner_name, name)
        self.owner_name = name

    def get_state(self) -> Dict[str, Any]:
        """Get a status report for the car.

        Returns:
            Dictionary containing car identity and part states
        """
        return {
            "manufacturer": self.manufacturer,
            "model": self.model,
            "body_style": self.body_style.value,
            "owner": self.owner_name,
            "parts": [part.get_state() for part in self._parts],
            "avg_condition": float(np.mean([part.condition for part in self._parts])),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.model!r}, {self.body_style.name})"


class Ford(Car):
    manufacturer = "Ford"


class Fiat(Car):
    manufacturer = "Fiat"
