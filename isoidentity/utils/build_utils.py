"""
Build Utility Functions
-----------------------

Common functions used by the code-table loaders and data build scripts.

Functions:
  - load_yaml_file: Load and parse YAML file
  - join_codes: Flatten a list of codes into one delimited string column
"""

from pathlib import Path
from typing import Iterable, Optional


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
        >>> data = load_yaml_file(Path("countries.yaml"))
        >>> len(data['countries'])
        270
    """
    try:
        import yaml
    except ImportError as e:
        raise ImportError("pyyaml not installed. pip install pyyaml") from e

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def join_codes(codes: Optional[Iterable[str]], sep: str = ";") -> str:
    """
    Flatten a list of codes into a single string column.

    Examples:
        >>> join_codes(["CW", "SX"])
        'CW;SX'

        >>> join_codes(None)
        ''
    """
    if not codes:
        return ""
    return sep.join(str(c) for c in codes)


__all__ = [
    "load_yaml_file",
    "join_codes",
]
