"""
Data models module.

Record-shaped values edited and stored by the catalog editor.
"""
from .product import EDITABLE_FIELDS, PRODUCT_FIELDS, ProductRecord, coerce_field

__all__ = ["EDITABLE_FIELDS", "PRODUCT_FIELDS", "ProductRecord", "coerce_field"]
