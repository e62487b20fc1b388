"""
Catalog editor assembly.

Builds the editing core from configuration in one place:
Config → Seed data → Store → Change bus → Edit coordinator → Action gate
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import EditorParams
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .logging.config import configure_logging
from .models import ProductRecord
from .notify import ChangeBus
from .state.actions import ActionGate
from .state.coordinator import EditCoordinator
from .store import ProductStore

logger = structlog.get_logger(__name__)


class CatalogEditor:
    """
    One store, one coordinator and one action gate, wired together.

    The store is created here and handed to the coordinator explicitly; there
    is no process-wide catalog.
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        seed: Optional[Iterable[ProductRecord]] = None,
        setup_logging: bool = False
    ) -> None:
        """
        Initialize the editor.

        Args:
            config_dir: Directory holding catalog.yaml; defaults to ./config
            overrides: Highest-precedence configuration values
            seed: Products to load instead of the configured seed set
            setup_logging: Configure structlog from the logging section

        Raises:
            ConfigurationError: the merged configuration failed validation
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(config_dir)
        self.config = self.config_loader.merge_config(overrides)

        issues = ConfigValidator.validate_config(self.config)
        if issues:
            raise ConfigurationError(
                f"Invalid catalog configuration: {len(issues)} issue(s)",
                issues=issues,
                context={"config_dir": str(self.config_loader.config_dir)}
            )

        if setup_logging:
            configure_logging(
                level=self.config["logging"]["level"],
                format_json=self.config["logging"]["format_json"]
            )

        store_config = self.config["store"]
        if seed is None:
            seed = self.config_loader.load_seed_products() if store_config["seed_enabled"] else []

        self.store = ProductStore(seed=seed, id_start=store_config["id_start"])
        self.bus = ChangeBus()
        self.coordinator = EditCoordinator(
            self.store,
            bus=self.bus,
            labels=EditorParams(**self.config["editor"])
        )
        self.actions = ActionGate(self.coordinator)

        self.logger.info(
            "Catalog editor ready",
            products=len(self.store),
            next_id=self.store.next_id,
            mode=self.coordinator.mode.value
        )

    def get_editor_state(self) -> dict[str, Any]:
        """Snapshot of editor state for diagnostics and scripted front ends."""
        selected = self.coordinator.selected
        return {
            "mode": self.coordinator.mode.value,
            "mode_label": self.coordinator.mode_label,
            "selected_id": selected.id if selected else None,
            "buffer": self.coordinator.buffer.to_dict(),
            "buffer_valid": self.coordinator.is_buffer_valid,
            "product_count": len(self.coordinator.products),
            "actions": self.actions.availability(),
        }
