"""In-memory product store with store-assigned integer ids."""

from collections.abc import Iterable
from typing import Optional

import structlog

from ..models import ProductRecord

logger = structlog.get_logger(__name__)


class ProductStore:
    """
    Ordered, in-memory collection of product records.

    Records handed in are copied on the way in and on the way out, so no
    caller ever holds a reference into the store's own records. The id
    counter only moves forward: ids of deleted records are never reused.
    """

    def __init__(self, seed: Optional[Iterable[ProductRecord]] = None, id_start: int = 1):
        self.logger = logger
        self._products: list[ProductRecord] = []
        self._next_id = id_start

        if seed is not None:
            for record in seed:
                self.add(record.copy())

    @property
    def next_id(self) -> int:
        """Id the next added record will receive."""
        return self._next_id

    def list(self) -> list[ProductRecord]:
        """Copies of all records in insertion order."""
        return [product.copy() for product in self._products]

    def get(self, product_id: int) -> Optional[ProductRecord]:
        existing = self._find(product_id)
        return existing.copy() if existing else None

    def add(self, record: ProductRecord) -> int:
        """
        Assign the next id to ``record`` and append a copy of it.

        Field values are not validated; the caller commits only valid records.

        Returns:
            The assigned id
        """
        record.id = self._next_id
        self._next_id += 1
        self._products.append(record.copy())

        self.logger.info(
            "Added product",
            product_id=record.id,
            title=record.title,
            company=record.company,
            store_size=len(self._products)
        )
        return record.id

    def update(self, record: ProductRecord) -> None:
        """Overwrite the stored record with the same id; unknown ids are ignored."""
        existing = self._find(record.id)
        if existing is None:
            # TODO: decide with product owners whether a lost write should surface to the caller
            self.logger.warning("Update for unknown product id ignored", product_id=record.id)
            return

        existing.assign_from(record)
        self.logger.info("Updated product", product_id=record.id, title=record.title)

    def delete(self, product_id: int) -> None:
        """Remove the record with ``product_id``; unknown ids are ignored."""
        existing = self._find(product_id)
        if existing is None:
            self.logger.warning("Delete for unknown product id ignored", product_id=product_id)
            return

        self._products.remove(existing)
        self.logger.info(
            "Deleted product",
            product_id=product_id,
            store_size=len(self._products)
        )

    def _find(self, product_id: int) -> Optional[ProductRecord]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return any(product.id == product_id for product in self._products)
