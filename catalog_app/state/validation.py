"""Commit-time validation of product records."""

from dataclasses import dataclass
from typing import Any

from ..models import ProductRecord

TEXT_FIELDS = ("title", "company", "category")


@dataclass(frozen=True)
class FieldError:
    """A single reason a record cannot be committed."""
    field: str
    message: str
    value: Any


def validation_errors(record: ProductRecord) -> list[FieldError]:
    """Every reason ``record`` cannot be committed; empty when it can."""
    errors = []

    for name in TEXT_FIELDS:
        value = getattr(record, name)
        if value is None or not str(value).strip():
            errors.append(FieldError(field=name, message="Must not be blank", value=value))

    if record.price is None or record.price <= 0:
        errors.append(FieldError(field="price", message="Must be greater than zero", value=record.price))

    if record.stock_quantity is None or record.stock_quantity < 0:
        errors.append(FieldError(field="stock_quantity", message="Must not be negative", value=record.stock_quantity))

    return errors


def validate_record(record: ProductRecord) -> bool:
    """True iff the record satisfies every commit constraint."""
    return not validation_errors(record)
