"""Synchronous change notification bus."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ChangeEvent:
    """One attribute of one object changed."""
    owner: Any
    attribute: str


ChangeCallback = Callable[[ChangeEvent], None]


class Subscription:
    """Handle returned by ChangeBus.subscribe; usable as a context manager."""

    def __init__(self, bus: "ChangeBus", callback: ChangeCallback):
        self._bus = bus
        self.callback = callback

    @property
    def active(self) -> bool:
        return self._bus.is_subscribed(self)

    def unsubscribe(self) -> None:
        self._bus.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unsubscribe()


class ChangeBus:
    """
    Delivers change events to subscribers in subscription order.

    Delivery is synchronous: every subscriber has seen the event before
    publish() returns. A subscriber that raises is logged and skipped; the
    remaining subscribers still receive the event.
    """

    def __init__(self):
        self.logger = logger
        self._subscriptions: list[Subscription] = []
        self._published_count = 0
        self._error_count = 0

    def subscribe(self, callback: ChangeCallback) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def is_subscribed(self, subscription: Subscription) -> bool:
        return subscription in self._subscriptions

    def publish(self, owner: Any, attribute: str) -> ChangeEvent:
        """Deliver a change event to every current subscriber."""
        event = ChangeEvent(owner=owner, attribute=attribute)
        self._published_count += 1

        # Snapshot so callbacks may unsubscribe during delivery
        for subscription in list(self._subscriptions):
            try:
                subscription.callback(event)
            except Exception:
                self._error_count += 1
                self.logger.exception(
                    "Change subscriber failed",
                    attribute=attribute,
                    owner_type=type(owner).__name__
                )

        return event

    def get_stats(self) -> dict[str, int]:
        return {
            "subscribers": len(self._subscriptions),
            "published": self._published_count,
            "errors": self._error_count,
        }


def collect_events(bus: ChangeBus, events: Optional[list[ChangeEvent]] = None) -> tuple[Subscription, list[ChangeEvent]]:
    """Subscribe a recorder that appends every event to a list."""
    recorded = events if events is not None else []
    return bus.subscribe(recorded.append), recorded
