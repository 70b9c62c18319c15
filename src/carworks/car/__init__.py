"""
Car module - Cars and their facade.

This module contains:
- Car: Base car owning its parts and facade
- Ford, Fiat: Manufacturer variants
- CarFacade: Simplified access to driving, diagnosis and repair
"""

from carworks.car.car import Car, Ford, Fiat, BodyStyle
from carworks.car.facade import CarFacade, Movement, assemble_facade

__all__ = [
    "Car",
    "Ford",
    "Fiat",
    "BodyStyle",
    "CarFacade",
    "Movement",
    "assemble_facade",
]
