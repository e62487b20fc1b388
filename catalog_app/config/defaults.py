"""Default configuration parameters for the catalog editor."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StoreParams:
    """Product store parameters."""
    id_start: int = 1                  # First id handed out by the store
    seed_enabled: bool = True          # Load seed products at startup


@dataclass(frozen=True)
class EditorParams:
    """Human-readable mode labels shown by the display layer."""
    browse_label: str = "viewing"
    add_label: str = "adding"
    edit_label: str = "editing"


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    store: StoreParams
    editor: EditorParams
    logging: LoggingParams


DEFAULT_SEED_PRODUCTS: tuple[dict[str, Any], ...] = (
    {"title": "iPhone 15 Pro", "company": "Apple", "category": "Смартфоны", "price": 99990, "stock_quantity": 15},
    {"title": "Samsung Galaxy S24", "company": "Samsung", "category": "Смартфоны", "price": 79990, "stock_quantity": 8},
    {"title": "MacBook Pro 16\"", "company": "Apple", "category": "Ноутбуки", "price": 249990, "stock_quantity": 5},
    {"title": "Dell XPS 13", "company": "Dell", "category": "Ноутбуки", "price": 89990, "stock_quantity": 12},
    {"title": "Sony WH-1000XM5", "company": "Sony", "category": "Наушники", "price": 29990, "stock_quantity": 25},
    {"title": "AirPods Pro 2", "company": "Apple", "category": "Наушники", "price": 24990, "stock_quantity": 18},
)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        store=StoreParams(),
        editor=EditorParams(),
        logging=LoggingParams(),
    )
