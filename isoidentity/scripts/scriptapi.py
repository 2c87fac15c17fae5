"""Script code resolution API.

Public API for ISO 15924 lookups by code and numeric code.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from isoidentity.scripts.scriptidentity import (
    Script,
    ScriptTable,
    build_script_table,
    resolve_script_code,
    resolve_script_numeric,
)
from isoidentity.utils.dataloader import load_code_table
from isoidentity.utils.resolver import find_by_pattern


@lru_cache(maxsize=1)
def load_scripts(path: Optional[Union[str, Path]] = None) -> ScriptTable:
    """Load scripts.yaml into an immutable ScriptTable.

    Raises:
        FileNotFoundError: If no table is found
        ValueError: If the table is structurally invalid
    """
    document = load_code_table(__file__, "scripts", "scripts.yaml", path=path)
    return build_script_table(document)


def script_by_code(code: Optional[str], case_sensitive: bool = True) -> Optional[Script]:
    """Look up a script by ISO 15924 code.

    Examples:
        >>> script_by_code("Jpan").numeric
        413
        >>> script_by_code("JPAN") is None
        True
        >>> script_by_code("JPAN", case_sensitive=False).code
        'Jpan'
    """
    return resolve_script_code(load_scripts(), code, case_sensitive)


def script_by_numeric(numeric: Optional[int]) -> Optional[Script]:
    """Look up a script by ISO 15924 numeric code; n <= 0 returns None."""
    return resolve_script_numeric(load_scripts(), numeric)


def find_scripts(pattern) -> List[Script]:
    """Scripts whose name fully matches a regular expression, in table order.

    Examples:
        >>> [s.code for s in find_scripts("Egyptian.*")]
        ['Egyd', 'Egyh', 'Egyp']

    Raises:
        ValueError: If pattern is None
    """
    return find_by_pattern(load_scripts().entries, pattern, lambda s: s.name)


def list_scripts() -> pd.DataFrame:
    """List scripts as a DataFrame (code, name, numeric)."""
    df = pd.DataFrame([s.to_dict() for s in load_scripts().entries])
    if not df.empty:
        df["numeric"] = df["numeric"].astype("Int64")
    return df


__all__ = [
    "load_scripts",
    "script_by_code",
    "script_by_numeric",
    "find_scripts",
    "list_scripts",
]
