#!/usr/bin/env python3
"""Configuration validation script."""

import argparse
import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wiselife_app.config.loader import ConfigLoader
from wiselife_app.config.validation import ConfigValidator, ValidationError


def validate_config_dir(config_dir: Path) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    parser = argparse.ArgumentParser(description="Validate WiseLife client configuration")
    parser.add_argument(
        "config_dir",
        nargs="?",
        default=str(project_root / "config"),
        help="Directory containing client.yaml"
    )
    args = parser.parse_args()
    config_dir = Path(args.config_dir)

    print(f"🔍 Validating WiseLife client configuration in {config_dir}...")

    if not (config_dir / "client.yaml").exists():
        print("ℹ️  No client.yaml found, validating built-in defaults")

    try:
        errors = validate_config_dir(config_dir)
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)

    print(f"\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
