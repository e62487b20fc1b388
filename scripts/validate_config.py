#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from catalog_app.config.loader import ConfigLoader
from catalog_app.config.validation import ConfigValidator, ValidationError
from catalog_app.errors import MalformedRecordError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating catalog configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_config_dir(config_dir)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Settings are valid")

    print("\n📦 Checking seed products...")
    try:
        seed = loader.load_seed_products()
        print(f"✅ {len(seed)} seed products parsed")
    except MalformedRecordError as e:
        print(f"❌ Seed product error: {e} (field: {e.field}, value: {e.value})")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
