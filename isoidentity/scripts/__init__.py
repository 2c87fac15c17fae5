"""Script code resolution (ISO 15924)."""

from isoidentity.scripts.scriptidentity import Script
from isoidentity.scripts.scriptapi import (
    load_scripts,
    script_by_code,
    script_by_numeric,
    find_scripts,
    list_scripts,
)

__all__ = [
    "Script",
    "load_scripts",
    "script_by_code",
    "script_by_numeric",
    "find_scripts",
    "list_scripts",
]
