"""
Action gate: the five editor actions and their availability predicates.

Predicates are pure functions of coordinator state and are recomputed on every
call. The gate keeps no state of its own, so a display layer simply re-polls
availability() after each change event.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from ..errors import UnknownActionError
from ..logging.config import get_action_logger, log_action_decision
from .coordinator import EditCoordinator
from .models import TransitionResult

action_logger = get_action_logger(__name__)


def can_new(coordinator: EditCoordinator) -> bool:
    return coordinator.is_browsing


def can_edit(coordinator: EditCoordinator) -> bool:
    return coordinator.is_browsing and coordinator.selected is not None


def can_delete(coordinator: EditCoordinator) -> bool:
    return coordinator.is_browsing and coordinator.selected is not None


def can_commit(coordinator: EditCoordinator) -> bool:
    return coordinator.is_editing and coordinator.is_buffer_valid


def can_cancel(coordinator: EditCoordinator) -> bool:
    return coordinator.is_editing


@dataclass(frozen=True)
class Action:
    """A named editor action."""
    name: str
    predicate: Callable[[EditCoordinator], bool]
    handler: Callable[[EditCoordinator], TransitionResult]
    description: str


ACTIONS: dict[str, Action] = {
    action.name: action for action in (
        Action("new", can_new, EditCoordinator.start_add, "Start adding a product"),
        Action("edit", can_edit, EditCoordinator.start_edit, "Edit the selected product"),
        Action("delete", can_delete, EditCoordinator.start_delete, "Delete the selected product"),
        Action("commit", can_commit, EditCoordinator.commit, "Save the edited product"),
        Action("cancel", can_cancel, EditCoordinator.cancel, "Discard the current edit"),
    )
}

ACTION_NAMES = tuple(ACTIONS)


class ActionGate:
    """Exposes the editor actions of one coordinator to a trigger layer."""

    def __init__(self, coordinator: EditCoordinator):
        self.coordinator = coordinator
        self.logger = action_logger

    def can_execute(self, name: str) -> bool:
        return self._get_action(name).predicate(self.coordinator)

    def availability(self) -> dict[str, bool]:
        """Current availability of every action, in declaration order."""
        return {name: action.predicate(self.coordinator) for name, action in ACTIONS.items()}

    def execute(self, name: str) -> Optional[TransitionResult]:
        """
        Run the named action if it is available.

        Returns:
            The coordinator's transition result, or None when the action was
            unavailable and nothing happened

        Raises:
            UnknownActionError: ``name`` is not an editor action
        """
        action = self._get_action(name)
        available = action.predicate(self.coordinator)

        log_action_decision(
            self.logger,
            action_name=name,
            available=available,
            mode=self.coordinator.mode.value,
            reason=action.description if available else "predicate false",
            context={"selected_id": self.coordinator.selected.id if self.coordinator.selected else None}
        )

        if not available:
            return None

        return action.handler(self.coordinator)

    def _get_action(self, name: str) -> Action:
        try:
            return ACTIONS[name]
        except KeyError:
            raise UnknownActionError(
                f"Unknown editor action: {name}",
                action_name=name,
                context={"known_actions": list(ACTION_NAMES)}
            ) from None
