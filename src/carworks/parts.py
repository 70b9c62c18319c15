"""
Part component - Repairable car parts with a condition score.

A single Part type covers suspension, tires and engine; the damage
category selects which driving actions wear it down and how it is
labelled in the action log.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict
import numpy as np

from carworks.output import ConsoleSink, OutputSink


logger = logging.getLogger(__name__)


class DamageCategory(Enum):
    """Classification used to route damage to the affected parts."""
    TIRES = "tires"
    SUSPENSION = "suspension"
    ENGINE = "engine"


PART_LABELS: Dict[DamageCategory, str] = {
    DamageCategory.TIRES: "Tires",
    DamageCategory.SUSPENSION: "Suspension",
    DamageCategory.ENGINE: "Engine",
}


@dataclass
class PartConfig:
    """Condition limits shared by all parts.

    Default values give the standard 0-100 condition scale with
    parts flagged for repair below half condition.
    """
    max_condition: int = 100
    repair_threshold: int = 50


class Part:
    """A car part tracked by condition and damage category.

    Condition starts at the maximum, drops on damage and is restored
    by repair. It always stays within [0, max_condition].

    Usage:
        tires = Part(DamageCategory.TIRES)
        tires.damage(60)
        tires.needs_repair  # True
        tires.repair()
    """

    def __init__(
        self,
        category: DamageCategory,
        config: PartConfig | None = None,
        sink: OutputSink | None = None,
    ):
        """Initialize part in perfect condition.

        Args:
            category: Damage category of this part
            config: Condition limits. Uses defaults if None.
            sink: Destination for action log lines. Console if None.
        """
        self.config = config or PartConfig()
        self.category = category
        self._sink = sink or ConsoleSink()
        self._condition: int = self.config.max_condition

    @property
    def label(self) -> str:
        """Human-readable part name."""
        return PART_LABELS[self.category]

    @property
    def condition(self) -> int:
        """Current condition (0 to max_condition)."""
        return self._condition

    @condition.setter
    def condition(self, value: int) -> None:
        """Set condition, clamped to valid range."""
        self._condition = int(np.clip(value, 0, self.config.max_condition))

    @property
    def needs_repair(self) -> bool:
        """Check if condition has fallen below the repair threshold."""
        return self._condition < self.config.repair_threshold

    def damage(self, amount: int) -> None:
        """Reduce condition by the given amount.

        Out-of-range amounts are clamped, never rejected.

        Args:
            amount: Condition points to remove
        """
        self.condition = self._condition - amount
        logger.debug("%s damaged by %s, condition now %d", self.label, amount, self._condition)
        self._sink.write(f"Damage {self.label}: {amount}")

    def repair(self) -> None:
        """Restore part to full condition."""
        self.condition = self.config.max_condition
        logger.debug("%s repaired", self.label)
        self._sink.write(f"Repair {self.label}")

    def get_state(self) -> dict:
        """Get current part state.

        Returns:
            Dictionary containing part state values
        """
        return {
            "category": self.category.value,
            "label": self.label,
            "condition": self._condition,
            "needs_repair": self.needs_repair,
        }

    def __repr__(self) -> str:
        return f"Part({self.label}, condition={self._condition})"
