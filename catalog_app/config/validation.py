"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import EditorParams, LoggingParams, StoreParams

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SECTION_PARAMS = {
    "store": StoreParams,
    "editor": EditorParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_store_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate store parameters."""
        errors = []

        if "id_start" in params:
            value = params["id_start"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="id_start",
                    message="Must be a positive integer",
                    value=value
                ))

        if "seed_enabled" in params:
            value = params["seed_enabled"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="seed_enabled",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_editor_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate mode label parameters."""
        errors = []

        for label in ("browse_label", "add_label", "edit_label"):
            if label in params:
                value = params[label]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=label,
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_known_keys(section: str, params: Any) -> list[ValidationError]:
        """Reject sections that are not mappings or carry unknown keys."""
        if not isinstance(params, dict):
            return [ValidationError(field=section, message="Must be a mapping", value=params)]

        known = {f.name for f in fields(SECTION_PARAMS[section])}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=value)
            for key, value in params.items() if key not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = [
            ValidationError(field=str(key), message="Unknown section", value=value)
            for key, value in config.items() if key not in SECTION_PARAMS
        ]

        for section in SECTION_PARAMS:
            if section in config:
                errors.extend(ConfigValidator.validate_known_keys(section, config[section]))
        if errors:
            return errors

        if "store" in config:
            errors.extend(ConfigValidator.validate_store_params(config["store"]))

        if "editor" in config:
            errors.extend(ConfigValidator.validate_editor_params(config["editor"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
