"""Unit tests for configuration management."""

import pytest
from decimal import Decimal
from pathlib import Path

from catalog_app.config.defaults import DEFAULT_SEED_PRODUCTS, get_default_config
from catalog_app.config.loader import ConfigLoader
from catalog_app.config.validation import ConfigValidator
from catalog_app.errors import MalformedRecordError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()

        assert config.store.id_start == 1
        assert config.store.seed_enabled is True
        assert config.editor.browse_label == "viewing"
        assert config.editor.add_label == "adding"
        assert config.editor.edit_label == "editing"
        assert config.logging.level == "INFO"

    def test_seed_has_six_products(self) -> None:
        assert len(DEFAULT_SEED_PRODUCTS) == 6
        assert DEFAULT_SEED_PRODUCTS[0]["title"] == "iPhone 15 Pro"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["store"] == {"id_start": 1, "seed_enabled": True}
        assert config["editor"]["add_label"] == "adding"

    def test_file_overrides_defaults(self, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text(
            "store:\n  id_start: 50\neditor:\n  browse_label: Просмотр\n",
            encoding="utf-8"
        )
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config()

        assert config["store"]["id_start"] == 50
        assert config["store"]["seed_enabled"] is True
        assert config["editor"]["browse_label"] == "Просмотр"
        assert config["editor"]["edit_label"] == "editing"

    def test_explicit_overrides_win(self, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text("store:\n  id_start: 50\n", encoding="utf-8")
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"store": {"id_start": 500}})

        assert config["store"]["id_start"] == 500

    def test_empty_file(self, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text("", encoding="utf-8")
        loader = ConfigLoader.create(tmp_path)

        assert loader.merge_config()["store"]["id_start"] == 1

    def test_default_seed_products(self, tmp_path) -> None:
        seed = ConfigLoader.create(tmp_path).load_seed_products()

        assert len(seed) == 6
        assert seed[2].title == 'MacBook Pro 16"'
        assert seed[2].price == Decimal("249990")
        assert all(record.id == 0 for record in seed)

    def test_seed_products_from_file(self, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text(
            "seed_products:\n"
            "  - {title: Pixel 9, company: Google, category: Смартфоны, price: 69990, stock_quantity: 10}\n",
            encoding="utf-8"
        )
        loader = ConfigLoader.create(tmp_path)

        seed = loader.load_seed_products()

        assert [record.title for record in seed] == ["Pixel 9"]
        assert "seed_products" not in loader.merge_config()

    def test_malformed_seed_product(self, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text(
            "seed_products:\n  - {title: Broken, price: lots}\n",
            encoding="utf-8"
        )

        with pytest.raises(MalformedRecordError):
            ConfigLoader.create(tmp_path).load_seed_products()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self, tmp_path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    def test_shipped_config_is_valid(self) -> None:
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("value", [0, -3, "1", True, 1.5])
    def test_invalid_id_start(self, value) -> None:
        errors = ConfigValidator.validate_store_params({"id_start": value})

        assert len(errors) == 1
        assert errors[0].field == "id_start"

    def test_invalid_label(self) -> None:
        errors = ConfigValidator.validate_editor_params({"add_label": "  "})
        assert [e.field for e in errors] == ["add_label"]

    def test_invalid_log_level(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})
        assert [e.field for e in errors] == ["level", "format_json"]

    def test_lowercase_log_level_accepted(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []

    def test_unknown_parameter(self) -> None:
        errors = ConfigValidator.validate_config({"editor": {"colour": "blue"}})

        assert len(errors) == 1
        assert errors[0].field == "editor.colour"

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"store": None})
        assert [e.field for e in errors] == ["store"]

    def test_unknown_section(self) -> None:
        errors = ConfigValidator.validate_config({"stroe": {"id_start": 5}})

        assert [(e.field, e.message) for e in errors] == [("stroe", "Unknown section")]

    def test_misspelled_section_in_file(self, tmp_path) -> None:
        """A typo in catalog.yaml is reported, not silently ignored."""
        (tmp_path / "catalog.yaml").write_text("stroe:\n  id_start: 50\n", encoding="utf-8")
        config = ConfigLoader.create(tmp_path).merge_config()

        errors = ConfigValidator.validate_config(config)

        assert [e.field for e in errors] == ["stroe"]

    def test_seed_products_section_allowed_in_file(self, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text(
            "seed_products:\n  - title: Pixel 9\n    price: 69990\n",
            encoding="utf-8"
        )
        config = ConfigLoader.create(tmp_path).merge_config()

        assert ConfigValidator.validate_config(config) == []
