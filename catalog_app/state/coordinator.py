"""
Edit coordinator: the Browse/Add/Edit state machine.

The coordinator is the only caller into the product store and the only source
of change notifications for the display layer. It owns three pieces of
transient state besides the mode:

- the displayed product list, replaced wholesale on every reload
- the edit buffer, a copy that never aliases a stored or displayed record
- the rollback snapshot, taken when editing starts and dropped on return to Browse

Transitions:

    Browse --start_add-->    Add
    Browse --start_edit-->   Edit     (needs a selection)
    Browse --start_delete--> Browse   (needs a selection)
    Add    --commit-->       Browse   (needs a valid buffer)
    Edit   --commit-->       Browse   (needs a valid buffer)
    Add    --cancel-->       Browse
    Edit   --cancel-->       Browse
"""

from collections.abc import Callable
from typing import Any, Optional

from ..config.defaults import EditorParams
from ..errors import MalformedRecordError
from ..logging.config import get_state_logger, log_state_transition
from ..models import EDITABLE_FIELDS, ProductRecord, coerce_field
from ..notify import ChangeBus
from ..store import ProductStore
from .models import EditMode, TransitionResult, Trigger
from .validation import FieldError, validate_record, validation_errors

state_logger = get_state_logger(__name__)

# Attributes derived from the mode; published together with it
MODE_ATTRIBUTES = ("mode", "is_browsing", "is_editing", "mode_label")


class EditCoordinator:
    """Coordinates selection, the edit buffer and store mutations."""

    def __init__(
        self,
        store: ProductStore,
        bus: Optional[ChangeBus] = None,
        labels: Optional[EditorParams] = None
    ):
        self.store = store
        self.bus = bus if bus is not None else ChangeBus()
        self.logger = state_logger

        labels = labels or EditorParams()
        self._labels = {
            EditMode.BROWSE: labels.browse_label,
            EditMode.ADD: labels.add_label,
            EditMode.EDIT: labels.edit_label,
        }

        self._mode = EditMode.BROWSE
        self._products: list[ProductRecord] = []
        self._selected: Optional[ProductRecord] = None
        self._buffer = ProductRecord.empty()
        self._rollback: Optional[ProductRecord] = None

        # Attribute names published during the trigger being handled
        self._changed: Optional[list[str]] = None

        self.reload()

    # ------------------------------------------------------------------
    # Read-only state for the display layer
    # ------------------------------------------------------------------
    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def mode_label(self) -> str:
        return self._labels[self._mode]

    @property
    def is_browsing(self) -> bool:
        return self._mode == EditMode.BROWSE

    @property
    def is_editing(self) -> bool:
        return self._mode != EditMode.BROWSE

    @property
    def products(self) -> list[ProductRecord]:
        """The displayed list, as of the last reload."""
        return list(self._products)

    @property
    def selected(self) -> Optional[ProductRecord]:
        return self._selected

    @property
    def buffer(self) -> ProductRecord:
        """
        The live edit buffer.

        Display layers bind to it for reading; changes must go through
        update_buffer() so that validity is re-evaluated and published.
        """
        return self._buffer

    @property
    def rollback_snapshot(self) -> Optional[ProductRecord]:
        return self._rollback

    @property
    def is_buffer_valid(self) -> bool:
        return validate_record(self._buffer)

    @property
    def validation_errors(self) -> list[FieldError]:
        return validation_errors(self._buffer)

    # ------------------------------------------------------------------
    # Selection and list
    # ------------------------------------------------------------------
    def select(self, record: Optional[ProductRecord]) -> Optional[ProductRecord]:
        """
        Select the displayed record with the same id as ``record``.

        Returns the selected displayed record, or None when ``record`` is None
        or no longer displayed.
        """
        target = None if record is None else self._find_displayed(record.id)
        self._set_selected(target)
        return target

    def select_id(self, product_id: int) -> Optional[ProductRecord]:
        target = self._find_displayed(product_id)
        self._set_selected(target)
        return target

    def reload(self) -> None:
        """Replace the displayed list with the store's current contents."""
        self._products = self.store.list()
        self._publish(self, "products")

        # Keep the selection pointing into the new list
        if self._selected is not None:
            self._set_selected(self._find_displayed(self._selected.id))

    # ------------------------------------------------------------------
    # Buffer editing
    # ------------------------------------------------------------------
    def update_buffer(self, **fields: Any) -> list[str]:
        """
        Set fields on the edit buffer.

        Values are coerced to the field types before anything is changed.
        Outside Add/Edit mode the buffer mirrors the selection and is left
        untouched.

        Returns:
            Names of the fields whose value actually changed

        Raises:
            MalformedRecordError: unknown field, ``id``, or an uncoercible value
        """
        for name in fields:
            if name not in EDITABLE_FIELDS:
                raise MalformedRecordError(
                    f"Field cannot be edited: {name}",
                    field=name,
                    value=fields[name]
                )
        values = {name: coerce_field(name, value) for name, value in fields.items()}

        if self.is_browsing:
            self.logger.warning(
                "Buffer edit ignored outside edit mode",
                mode=self._mode.value,
                fields=sorted(values)
            )
            return []

        changed = []
        for name, value in values.items():
            if getattr(self._buffer, name) != value:
                setattr(self._buffer, name, value)
                changed.append(name)
                self._publish(self._buffer, name)

        if changed:
            self._publish(self, "is_buffer_valid")

        return changed

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------
    def start_add(self) -> TransitionResult:
        return self._run(
            Trigger.START_ADD,
            refused=None if self.is_browsing else "not browsing",
            action=self._do_start_add
        )

    def start_edit(self) -> TransitionResult:
        return self._run(
            Trigger.START_EDIT,
            refused=self._selection_refusal(),
            action=self._do_start_edit
        )

    def start_delete(self) -> TransitionResult:
        return self._run(
            Trigger.START_DELETE,
            refused=self._selection_refusal(),
            action=self._do_start_delete
        )

    def commit(self) -> TransitionResult:
        if self.is_browsing:
            refused = "not editing"
        elif not self.is_buffer_valid:
            refused = "buffer invalid"
        else:
            refused = None

        return self._run(Trigger.COMMIT, refused=refused, action=self._do_commit)

    def cancel(self) -> TransitionResult:
        return self._run(
            Trigger.CANCEL,
            refused="not editing" if self.is_browsing else None,
            action=self._do_cancel
        )

    def _selection_refusal(self) -> Optional[str]:
        if not self.is_browsing:
            return "not browsing"
        if self._selected is None:
            return "nothing selected"
        return None

    def _run(
        self,
        trigger: Trigger,
        refused: Optional[str],
        action: Callable[[], None]
    ) -> TransitionResult:
        from_mode = self._mode

        if refused is not None:
            context = {"reason": refused}
            if refused == "buffer invalid":
                context["errors"] = [error.field for error in self.validation_errors]
            log_state_transition(
                self.logger,
                trigger=trigger.value,
                from_state=from_mode.value,
                to_state=from_mode.value,
                accepted=False,
                context=context
            )
            return TransitionResult(
                trigger=trigger,
                from_mode=from_mode,
                to_mode=from_mode,
                accepted=False
            )

        self._changed = []
        try:
            action()
            changed = tuple(self._changed)
        finally:
            self._changed = None

        log_state_transition(
            self.logger,
            trigger=trigger.value,
            from_state=from_mode.value,
            to_state=self._mode.value,
            context={
                "selected_id": self._selected.id if self._selected else None,
                "store_size": len(self.store),
            }
        )
        return TransitionResult(
            trigger=trigger,
            from_mode=from_mode,
            to_mode=self._mode,
            changed=changed
        )

    def _do_start_add(self) -> None:
        # Mode first, so clearing the selection leaves the buffer alone
        self._set_mode(EditMode.ADD)
        self._set_selected(None)
        self._rollback = None
        self._set_buffer(ProductRecord.empty())

    def _do_start_edit(self) -> None:
        source = self._selected
        self._set_mode(EditMode.EDIT)
        self._rollback = source.copy()
        self._set_buffer(source.copy())

    def _do_start_delete(self) -> None:
        product_id = self._selected.id
        self.store.delete(product_id)

        self._products = [p for p in self._products if p.id != product_id]
        self._publish(self, "products")

        self._set_selected(None)
        self._set_buffer(ProductRecord.empty())

    def _do_commit(self) -> None:
        # Selection churn from the reload below must not touch the buffer,
        # so the mode stays Add/Edit until the very end.
        if self._mode == EditMode.ADD:
            product_id = self.store.add(self._buffer)
            self._publish(self._buffer, "id")
        else:
            product_id = self._buffer.id
            self.store.update(self._buffer)

        self.reload()
        self.select_id(product_id)

        self._rollback = None
        self._set_mode(EditMode.BROWSE)
        self._set_buffer(self._selected.copy() if self._selected else ProductRecord.empty())

    def _do_cancel(self) -> None:
        if self._mode == EditMode.EDIT and self._rollback is not None:
            self._set_buffer(self._rollback.copy())
        else:
            self._set_buffer(ProductRecord.empty())
            self._set_selected(None)

        self._rollback = None
        self._set_mode(EditMode.BROWSE)

    # ------------------------------------------------------------------
    # Change propagation
    # ------------------------------------------------------------------
    def _set_mode(self, mode: EditMode) -> None:
        self._mode = mode
        for attribute in MODE_ATTRIBUTES:
            self._publish(self, attribute)

    def _set_selected(self, record: Optional[ProductRecord]) -> None:
        self._selected = record
        self._publish(self, "selected")

        if self._mode == EditMode.BROWSE and record is not None:
            self._set_buffer(record.copy())

    def _set_buffer(self, record: ProductRecord) -> None:
        self._buffer = record
        self._publish(self, "buffer")
        self._publish(self, "is_buffer_valid")

    def _publish(self, owner: Any, attribute: str) -> None:
        if self._changed is not None:
            self._changed.append(attribute)
        self.bus.publish(owner, attribute)

    def _find_displayed(self, product_id: int) -> Optional[ProductRecord]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None
