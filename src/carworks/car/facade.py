"""
Car facade - Single entry point over the car's subsystems.

Wraps:
- Movement logging
- Driver controls (damage router)
- Damage handling
- Diagnostics
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List

from carworks.parts import Part
from carworks.damage.router import DamageRouter
from carworks.damage.handler import DamageHandler
from carworks.damage.diagnostic import DiagnosticService
from carworks.output import ConsoleSink, OutputSink


logger = logging.getLogger(__name__)


class Movement:
    """Logs the direction the car is moving in."""

    def __init__(self, sink: OutputSink | None = None):
        self._sink = sink or ConsoleSink()

    def move_forward(self) -> None:
        self._sink.write("Move Forward")

    def move_backward(self) -> None:
        self._sink.write("Move Backward")


@dataclass
class CarFacade:
    """Coarse-grained car operations.

    Built once per car by assemble_facade(); the collaborators are not
    swapped afterwards.

    Usage:
        facade = assemble_facade(parts)
        facade.accelerate()
        facade.repair(facade.diagnose())
    """
    router: DamageRouter
    handler: DamageHandler
    diagnostics: DiagnosticService
    movement: Movement

    def accelerate(self) -> None:
        """Move forward and step on the gas."""
        self.movement.move_forward()
        self.router.accelerate()

    def brake(self) -> None:
        """Move backward and hit the brake."""
        self.movement.move_backward()
        self.router.brake()

    def change_gear(self) -> None:
        self.router.change_gear()

    def steer(self, angle: float) -> None:
        self.router.steer(angle)

    def diagnose(self) -> List[Part]:
        """Get parts needing repair.

        Returns:
            Parts below their repair threshold, in part order
        """
        return self.diagnostics.diagnose()

    def repair(self, parts: Iterable[Part]) -> None:
        """Repair every given part.

        Parts are repaired unconditionally, whether or not they were
        diagnosed or belong to this car.

        Args:
            parts: Parts to restore to full condition
        """
        parts = list(parts)
        logger.debug("Repairing %d part(s)", len(parts))
        for part in parts:
            part.repair()


def assemble_facade(parts: List[Part], sink: OutputSink | None = None) -> CarFacade:
    """Build the facade and wire the damage observer.

    Args:
        parts: Parts owned by the car
        sink: Destination for action log lines. Console if None.

    Returns:
        Facade with its damage handler subscribed to the router
    """
    sink = sink or ConsoleSink()
    router = DamageRouter(sink)
    handler = DamageHandler(parts)
    router.subscribe(handler)
    return CarFacade(
        router=router,
        handler=handler,
        diagnostics=DiagnosticService(parts, sink),
        movement=Movement(sink),
    )
