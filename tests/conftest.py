"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List

from catalog_app.config.defaults import DEFAULT_SEED_PRODUCTS
from catalog_app.models import ProductRecord
from catalog_app.notify import ChangeBus, ChangeEvent
from catalog_app.state.actions import ActionGate
from catalog_app.state.coordinator import EditCoordinator
from catalog_app.store import ProductStore


@pytest.fixture
def seed_products() -> List[ProductRecord]:
    """The six built-in seed products, without ids."""
    return [ProductRecord.from_dict(item) for item in DEFAULT_SEED_PRODUCTS]


@pytest.fixture
def store(seed_products) -> ProductStore:
    """Store seeded with ids 1..6."""
    return ProductStore(seed=seed_products)


@pytest.fixture
def bus() -> ChangeBus:
    return ChangeBus()


@pytest.fixture
def coordinator(store, bus) -> EditCoordinator:
    return EditCoordinator(store, bus=bus)


@pytest.fixture
def gate(coordinator) -> ActionGate:
    return ActionGate(coordinator)


@pytest.fixture
def events(bus) -> List[ChangeEvent]:
    """Every change event published after the fixture is created."""
    recorded: List[ChangeEvent] = []
    bus.subscribe(recorded.append)
    return recorded


@pytest.fixture
def pixel_fields() -> Dict[str, Any]:
    """A complete, valid product not in the seed set."""
    return {
        "title": "Pixel 9",
        "company": "Google",
        "category": "Смартфоны",
        "price": 69990,
        "stock_quantity": 10,
    }
