"""
Build Utility Functions
-----------------------

Common functions used by the data build scripts (codes, locales) and by
the loaders that read their static configuration.

Functions:
  - load_yaml_file: Load and parse YAML file
  - write_json_file: Write a JSON document with stable formatting
"""

import json
from pathlib import Path


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary

    Raises:
        FileNotFoundError: If file does not exist

    Examples:
        >>> data = load_yaml_file(Path("supported_locales.yaml"))
        >>> data['locales'][:2]
        ['de', 'en']
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def write_json_file(path: Path, data) -> None:
    """
    Write data as pretty-printed UTF-8 JSON (non-ASCII kept verbatim).

    Args:
        path: Destination path, parent directories are created
        data: JSON-serializable object
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.write("\n")
