"""
Example 01: Upgrading stored connection configurations

This example demonstrates upgrading configurations with ConfigurationUpgrader,
both with a descriptor for one type and with a lookup over a library of types.
"""

import logging
import tempfile
from pathlib import Path

from config_upgrade import (
    Config,
    Configuration,
    ConfigurationUpgrader,
    TypeDescriptor,
    UpgraderSettings,
)


class Library:
    """A tiny stand-in for a stage library: type name -> descriptor."""

    def __init__(self, descriptors):
        self._descriptors = descriptors

    def definition_for(self, type_name):
        return self._descriptors.get(type_name)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    definitions_dir = Path(tempfile.mkdtemp())
    (definitions_dir / "jdbc.yaml").write_text("""
upgraderVersion: 1
upgrades:
  - toVersion: 2
    actions:
      - setConfig:
          name: conn.queryTimeout
          value: 30
  - toVersion: 3
    actions:
      - renameConfig:
          oldNamePattern: conn\\.(.*)
          newNamePattern: connection.\\1
""")

    upgrader = ConfigurationUpgrader.from_settings(
        UpgraderSettings(definition_roots=[definitions_dir])
    )

    print("=== Configuration Upgrade ===\n")

    # 1. Direct descriptor for a single configuration
    print("1. Upgrade with a descriptor:")
    config = Configuration("jdbc", 1, [Config("conn.url", "jdbc:postgresql://db/app")])
    issues = []
    upgrader.upgrade_if_necessary(TypeDescriptor(3, "jdbc.yaml"), config, "orders-db", issues)
    print(f"   Version: {config.version}")
    for c in config.configs:
        print(f"   - {c.name} = {c.value}")
    print(f"   Issues: {len(issues)}\n")

    # 2. Lookup by type across a whole validation pass
    print("2. Upgrade a validation pass:")
    library = Library({"jdbc": TypeDescriptor(3, "jdbc.yaml"), "kafka": TypeDescriptor(1, None)})
    configurations = {
        "users-db": Configuration("jdbc", 2, [Config("conn.url", "jdbc:mysql://db/users")]),
        "events": Configuration("kafka", 4),
        "legacy": Configuration("ftp", 1),
    }
    issues = []
    upgrader.upgrade_all(library, configurations, issues)
    for instance_id, c in configurations.items():
        print(f"   - {instance_id}: version {c.version}")
    for issue in issues:
        print(f"   ! {issue}")
    print()

    # Clean up
    for file in definitions_dir.glob("*.yaml"):
        file.unlink()
    definitions_dir.rmdir()


if __name__ == "__main__":
    main()
