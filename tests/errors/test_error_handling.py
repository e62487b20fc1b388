"""Tests for the error classification system."""

import pytest

from catalog_app.errors import (
    CatalogError,
    ConfigurationError,
    MalformedRecordError,
    SystemFailureError,
    UnknownActionError,
)
from catalog_app.models import ProductRecord


class TestErrorClassification:
    """Test error hierarchy and attributes."""

    def test_catalog_error_defaults(self):
        error = CatalogError("base error")

        assert error.recoverable is True
        assert error.context == {}
        assert str(error) == "base error"

    def test_malformed_record_error(self):
        error = MalformedRecordError("bad price", field="price", value="lots",
                                     context={"source": "seed"})

        assert isinstance(error, CatalogError)
        assert error.recoverable is True
        assert error.field == "price"
        assert error.value == "lots"
        assert error.context == {"source": "seed"}

    def test_system_failures_are_unrecoverable(self):
        config_error = ConfigurationError("bad config", issues=["x"])
        action_error = UnknownActionError("no such action", action_name="undo")

        for error in (config_error, action_error):
            assert isinstance(error, SystemFailureError)
            assert isinstance(error, CatalogError)
            assert error.recoverable is False

        assert config_error.issues == ["x"]
        assert action_error.action_name == "undo"


class TestNormalEditingNeverRaises:
    """Guards refuse invalid operations instead of raising."""

    def test_invalid_sequence_of_triggers(self, coordinator, store):
        # Every trigger in every reachable mode, none may raise
        for trigger in ("commit", "cancel", "start_edit", "start_delete",
                        "start_add", "start_add", "start_edit", "start_delete",
                        "commit", "cancel", "cancel"):
            getattr(coordinator, trigger)()

        assert len(store) == 6

    def test_store_unknown_ids(self, store):
        store.update(ProductRecord(id=-1))
        store.delete(-1)

        assert len(store) == 6

    def test_malformed_record_error_chains_cause(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            ProductRecord.from_dict({"stock_quantity": "ten"})

        assert isinstance(exc_info.value.__cause__, ValueError)
