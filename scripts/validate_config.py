#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bubble_app.config.loader import ConfigLoader
from bubble_app.config.validation import ConfigValidator


def main():
    """Main validation function."""
    print("🔍 Validating dashboard configuration...")

    loader = ConfigLoader.create()
    config = loader.merge_config()
    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    typed = loader.load()
    print(f"✅ {len(typed.fetch.proxy_templates)} proxies, "
          f"series TTL {typed.cache.series_ttl_ms} ms, "
          f"roster TTL {typed.cache.roster_ttl_ms} ms, "
          f"max points {typed.downsample.max_points}")
    print("\n🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
