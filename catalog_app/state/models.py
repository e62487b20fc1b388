"""
State machine data models for the edit-mode lifecycle.

This module defines the editor modes, the triggers that move between them and
the immutable result value each trigger returns.
"""

from dataclasses import dataclass
from enum import Enum


class EditMode(str, Enum):
    """Detail form modes."""
    BROWSE = "Browse"
    ADD = "Add"
    EDIT = "Edit"


class Trigger(str, Enum):
    """External triggers accepted by the edit coordinator."""
    START_ADD = "start_add"
    START_EDIT = "start_edit"
    START_DELETE = "start_delete"
    COMMIT = "commit"
    CANCEL = "cancel"


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a single trigger."""

    trigger: Trigger
    from_mode: EditMode
    to_mode: EditMode

    # False when a guard refused the trigger; nothing changed in that case
    accepted: bool = True

    # Attribute names published while handling the trigger, in order
    changed: tuple[str, ...] = ()

    @property
    def mode_changed(self) -> bool:
        return self.from_mode != self.to_mode
