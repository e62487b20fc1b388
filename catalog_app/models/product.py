"""
Product record model.

ProductRecord is deliberately mutable: the edit buffer is filled in field by
field, and an incomplete record may exist until commit. Validity is checked by
the edit coordinator at commit time, never here.
"""

from dataclasses import asdict, dataclass, fields, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from ..errors import MalformedRecordError

EDITABLE_FIELDS = ("title", "company", "category", "price", "stock_quantity")
PRODUCT_FIELDS = ("id",) + EDITABLE_FIELDS


@dataclass
class ProductRecord:
    """A single catalog entry."""
    id: int = 0                      # Store-assigned; 0 until added
    title: str = ""
    company: str = ""
    category: str = ""
    price: Decimal = Decimal("0")
    stock_quantity: int = 0

    @classmethod
    def empty(cls) -> "ProductRecord":
        """Blank record used as the buffer for a new product."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductRecord":
        """Build a record from a mapping, coercing field types."""
        unknown = set(data) - set(PRODUCT_FIELDS)
        if unknown:
            raise MalformedRecordError(
                f"Unknown product fields: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
                context={"data": dict(data)}
            )

        values = {name: coerce_field(name, value) for name, value in data.items()}
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def copy(self) -> "ProductRecord":
        """Return a copy sharing no state with this record."""
        return replace(self)

    def assign_from(self, other: "ProductRecord") -> None:
        """Overwrite every editable field with the values of ``other``."""
        for name in EDITABLE_FIELDS:
            setattr(self, name, getattr(other, name))


def coerce_field(name: str, value: Any) -> Any:
    """
    Convert a raw value to the type of the named record field.

    Raises:
        MalformedRecordError: unknown field or a value that cannot be converted
    """
    if name not in {f.name for f in fields(ProductRecord)}:
        raise MalformedRecordError(f"Unknown product field: {name}", field=name, value=value)

    if name == "price":
        return _coerce_decimal(name, value)
    if name in ("id", "stock_quantity"):
        return _coerce_int(name, value)

    # Text fields
    if value is None:
        return ""
    return str(value)


def _coerce_decimal(name: str, value: Any) -> Decimal:
    if isinstance(value, bool):
        raise MalformedRecordError(f"{name} must be a number", field=name, value=value)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            # via str() so 0.1 stays 0.1
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as e:
            raise MalformedRecordError(f"{name} must be a number", field=name, value=value) from e
    if not result.is_finite():
        raise MalformedRecordError(f"{name} must be finite", field=name, value=value)
    return result


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise MalformedRecordError(f"{name} must be an integer", field=name, value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise MalformedRecordError(f"{name} must be an integer", field=name, value=value)
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise MalformedRecordError(f"{name} must be an integer", field=name, value=value) from e
