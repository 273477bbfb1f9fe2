"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "drift-checks.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Drift-check manifest template for es-diff-suppress.
# Replace every <REQUIRED> placeholder before running `run`.
# Replace <OPTIONAL> placeholders only when your setup needs them.
# `es-diff-suppress list-attributes` prints every supported resource/attribute pair.

checks:
  - name: "<OPTIONAL>"
    # Provider resource type and JSON attribute, e.g. elasticsearch_index_template / template.
    resource: "<REQUIRED>"
    attribute: "<REQUIRED>"
    # Resource identifier; required for index and data-stream templates.
    identifier: "<OPTIONAL>"
    # Stored document (state or API response). Provide either inline text or a path.
    old:
      path: "<REQUIRED>"
      # inline: "<OPTIONAL>"
    # Configured document. Inline values may also be written as YAML mappings.
    new:
      inline: "<REQUIRED>"
      # path: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a drift-check manifest template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder manifest to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
