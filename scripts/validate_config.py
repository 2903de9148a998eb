#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from revdecision.config.loader import ConfigLoader, build_config
from revdecision.config.validation import ConfigValidator, ValidationError


def validate_profile_config(loader: ConfigLoader, profile: Optional[str]) -> List[ValidationError]:
    """Validate the merged configuration for one profile."""
    config = loader.merge_config(profile)
    errors = ConfigValidator.validate_config(config)
    if not errors:
        # Must also build into typed sections
        build_config(config)
    return errors


def main():
    """Main validation function."""
    print("🔍 Validating revdecision configuration...")

    loader = ConfigLoader.create()
    profiles = [None] + loader.list_profiles()

    all_valid = True

    for profile in profiles:
        name = profile or "defaults"
        print(f"\n📊 Validating {name}...")

        try:
            errors = validate_profile_config(loader, profile)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
            else:
                print(f"✅ {name} configuration is valid")

        except (TypeError, ValueError) as e:
            print(f"❌ Error validating {name}: {e}")
            all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
