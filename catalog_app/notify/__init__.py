"""
Change notification module.

Explicit publish/subscribe channel the edit coordinator uses to tell the
display layer which attribute of which object changed.
"""
from .bus import ChangeBus, ChangeEvent, Subscription

__all__ = ["ChangeBus", "ChangeEvent", "Subscription"]
