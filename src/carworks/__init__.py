"""
CarWorks - A small car model demonstrating the Facade and Observer patterns.

This package provides:
- Repairable parts (suspension, tires, engine) with a condition score
- Driver controls that broadcast damage events to observers
- A facade for driving, diagnosing and repairing a car
- A catalog of cars for sale, filterable by body style
"""

__version__ = "0.1.0"

from carworks.parts import Part, DamageCategory
from carworks.car.car import Car, Ford, Fiat, BodyStyle
from carworks.catalog.catalog import CarCatalog

__all__ = [
    "Part",
    "DamageCategory",
    "Car",
    "Ford",
    "Fiat",
    "BodyStyle",
    "CarCatalog",
    "__version__",
]
