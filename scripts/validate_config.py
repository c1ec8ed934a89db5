#!/usr/bin/env python3
"""Currency table validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from devex_app.config.loader import ConfigLoader
from devex_app.config.validation import ConfigValidator
from devex_app.conversion.formatting import format_localized, format_rate
from devex_app.errors import ConfigurationError


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating currency tables in {loader.currencies_file}...")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ Could not read overrides: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        print("\n❌ Configuration validation failed!")
        sys.exit(1)

    tables = loader.load_tables()
    for code in tables.codes:
        sample = format_localized(1000 * tables.rates[code], code, tables.locales,
                                  tables.default_locale)
        print(f"✅ {code.value}: rate {format_rate(tables.rates[code])}, "
              f"symbol {tables.symbols[code]}, 1,000 {tables.unit_name} = {sample}")

    print("\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
