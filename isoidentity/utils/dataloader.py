"""Shared data loading utilities for the code tables.

Every code space ships its table as YAML next to the module that consumes it
(e.g. isoidentity/countries/data/countries.yaml). A directory named by the
ISOIDENTITY_DATA_DIR environment variable takes precedence, which lets callers
swap in a newer ISO release without reinstalling the package.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple, Union

from isoidentity.utils.build_utils import load_yaml_file

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "ISOIDENTITY_DATA_DIR"


def find_data_file(
    module_file: str,
    filenames: List[str],
    path: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Find a data file by searching standard locations.

    Search priority:
    1. Explicit path (if given and it exists)
    2. Directory named by ISOIDENTITY_DATA_DIR
    3. Module-local data: {module_dir}/data/

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames to search for (e.g., ['countries.yaml'])
        path: Optional explicit path supplied by the caller

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From countries/countryapi.py
        >>> path = find_data_file(__file__, ['countries.yaml'])
    """
    if path is not None:
        p = Path(path)
        if p.exists():
            return p
        logger.warning(f"Explicit data path does not exist: {p}")

    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        for filename in filenames:
            p = Path(env_dir) / filename
            if p.exists():
                return p
        logger.debug(f"{DATA_DIR_ENV}={env_dir} has none of {filenames}")

    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_table_file(file_path: Path) -> dict:
    """Load a YAML code table.

    The suffix is checked before the file is read, so a Parquet export of a
    table (see the build scripts) is rejected up front.

    Raises:
        ValueError: If the file is not .yaml/.yml or does not hold a mapping
    """
    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(
            f"Unsupported file format: {file_path.suffix}. Code tables load from .yaml; "
            f"Parquet and CSV are build outputs only"
        )

    data = load_yaml_file(file_path)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path} must be a YAML mapping of table sections")
    return data


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, object]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Code space name (e.g., 'countries', 'currencies')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


def load_code_table(
    module_file: str,
    subdirectory: str,
    filename: str,
    path: Optional[Union[str, Path]] = None,
) -> dict:
    """Locate and parse the YAML code table of one code space.

    Raises:
        FileNotFoundError: If the table is in none of the searched locations
    """
    found_path = find_data_file(module_file, [filename], path=path)

    if found_path is None:
        error_msg = format_not_found_error(
            subdirectory=subdirectory,
            searched_locations=[
                ("Explicit path", path if path else "Not provided"),
                ("Environment variable", os.environ.get(DATA_DIR_ENV, "Not set")),
                ("Package data", Path(module_file).parent / "data"),
            ],
            fix_instructions=[
                f"Set {DATA_DIR_ENV} to a directory containing {filename}",
                f"Or reinstall isoidentity so that {subdirectory}/data/{filename} is present",
            ],
        )
        raise FileNotFoundError(error_msg)

    data = load_table_file(found_path)

    logger.info(f"Loaded {subdirectory} table from {found_path}")
    return data


__all__ = [
    "DATA_DIR_ENV",
    "find_data_file",
    "load_table_file",
    "format_not_found_error",
    "load_code_table",
]
