"""
Damage router - Driver controls that broadcast damage events.

Driving actions are reported to every subscribed observer, which
decides what the action does to the car's parts.
"""

import logging
from typing import List, Tuple

from carworks.parts import DamageCategory
from carworks.output import ConsoleSink, OutputSink


logger = logging.getLogger(__name__)


class DamageObserver:
    """Interface for objects that react to damage events."""

    def handle_damage(self, category: DamageCategory) -> None:
        """Called by the router once per damaging action.

        Args:
            category: Category of parts affected by the action
        """
        raise NotImplementedError


class DamageRouter:
    """Car controls acting as the damage event subject.

    Handlers are notified synchronously, in subscription order. The
    router only references its handlers; it does not own them.

    Usage:
        router = DamageRouter()
        router.subscribe(handler)
        router.accelerate()  # handler.handle_damage(DamageCategory.TIRES)
    """

    def __init__(self, sink: OutputSink | None = None):
        """Initialize router with no subscribers.

        Args:
            sink: Destination for action log lines. Console if None.
        """
        self._sink = sink or ConsoleSink()
        self._handlers: List[DamageObserver] = []

    @property
    def handlers(self) -> Tuple[DamageObserver, ...]:
        """Subscribed handlers in notification order."""
        return tuple(self._handlers)

    def subscribe(self, handler: DamageObserver) -> None:
        """Add a handler to the end of the notification list.

        Args:
            handler: Observer to notify on damaging actions
        """
        if handler is None:
            raise ValueError("Cannot subscribe a missing handler")
        self._handlers.append(handler)
        logger.debug("Subscribed %s (%d handlers)", type(handler).__name__, len(self._handlers))

    def unsubscribe(self, handler: DamageObserver) -> None:
        """Remove a handler. Unknown handlers are ignored.

        Args:
            handler: Observer to remove
        """
        for i, subscribed in enumerate(self._handlers):
            if subscribed is handler:
                del self._handlers[i]
                logger.debug("Unsubscribed %s", type(handler).__name__)
                return

    def notify(self, category: DamageCategory) -> None:
        """Report a damage event to all subscribed handlers.

        Args:
            category: Category of parts affected
        """
        logger.debug("Notifying %d handlers of %s damage", len(self._handlers), category.value)
        for handler in list(self._handlers):
            handler.handle_damage(category)

    def accelerate(self) -> None:
        """Step on the gas. Wears the tires."""
        self._sink.write("Step On The Gas")
        self.notify(DamageCategory.TIRES)

    def brake(self) -> None:
        """Hit the brake. Wears the suspension."""
        self._sink.write("Hit The Brake")
        self.notify(DamageCategory.SUSPENSION)

    def change_gear(self) -> None:
        self._sink.write("Change Gear")

    def steer(self, angle: float) -> None:
        """Turn the steering wheel.

        Args:
            angle: Steering angle in degrees
        """
        self._sink.write(f"Turn The Wheel on angle: {angle}")
