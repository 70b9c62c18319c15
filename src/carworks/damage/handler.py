"""
Damage handler - Applies damage events to the matching parts.
"""

import logging
from typing import List

from carworks.parts import DamageCategory, Part
from carworks.damage.router import DamageObserver


logger = logging.getLogger(__name__)


# Condition points lost by a part each time its category is hit
DAMAGE_PER_HIT = 60


class DamageHandler(DamageObserver):
    """Degrades every part whose category matches the event."""

    def __init__(self, parts: List[Part]):
        """Initialize handler.

        Args:
            parts: Parts this handler is responsible for
        """
        self._parts = parts

    def handle_damage(self, category: DamageCategory) -> None:
        """Damage all parts of the given category.

        Args:
            category: Category of parts affected
        """
        hit = [part for part in self._parts if part.category == category]
        logger.debug("%s damage hits %d part(s)", category.value, len(hit))
        for part in hit:
            part.damage(DAMAGE_PER_HIT)
