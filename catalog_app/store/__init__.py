"""
In-memory product store.

Owns the authoritative product collection and assigns record identities.
Knows nothing about editing state.
"""
from .product_store import ProductStore

__all__ = ["ProductStore"]
