"""
Damage module - Observer wiring between driver controls and parts.

This module contains:
- DamageRouter: Driver controls that broadcast damage events
- DamageObserver: Interface for damage event subscribers
- DamageHandler: Observer that wears down matching parts
- DiagnosticService: Scan for parts needing repair
"""

from carworks.damage.router import DamageRouter, DamageObserver
from carworks.damage.handler import DamageHandler, DAMAGE_PER_HIT
from carworks.damage.diagnostic import DiagnosticService

__all__ = [
    "DamageRouter",
    "DamageObserver",
    "DamageHandler",
    "DAMAGE_PER_HIT",
    "DiagnosticService",
]
