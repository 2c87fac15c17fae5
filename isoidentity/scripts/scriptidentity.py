"""
Script code resolution core (ISO 15924).

A flat table of four-letter codes with their numeric codes. Aliases such as
Jpan (Han + Hiragana + Katakana) are ordinary entries with their own
numeric code.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from isoidentity.scripts.scriptnormalize import canonicalize_script_code
from isoidentity.utils.resolver import build_index

logger = logging.getLogger(__name__)

UNDEFINED_KEY = "Undefined"

_CODE_RE = re.compile(r"[A-Z][a-z]{3}")


@dataclass(frozen=True)
class Script:
    """One ISO 15924 entry. str(script) is its code."""

    code: str
    name: str
    numeric: Optional[int] = None

    @property
    def is_undefined(self) -> bool:
        return self.code == UNDEFINED_KEY

    def to_dict(self) -> dict:
        return {"code": self.code, "name": self.name, "numeric": self.numeric}

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class ScriptTable:
    """Immutable script table with its lookup indexes."""

    entries: Tuple[Script, ...]
    by_code: Mapping[str, Script] = field(repr=False)
    by_numeric: Mapping[int, Script] = field(repr=False)


def validate_script_document(document: dict) -> List[str]:
    """Structural checks on a parsed scripts.yaml document."""
    issues = []
    entries = document.get("scripts") or []

    for label, keys in (
        ("code", [str(e.get("code", "")) for e in entries]),
        ("numeric", [e["numeric"] for e in entries if e.get("numeric") is not None]),
    ):
        duplicates = sorted(k for k, n in Counter(keys).items() if n > 1)
        if duplicates:
            issues.append(f"Duplicate script {label}s: {duplicates}")

    for e in entries:
        code = str(e.get("code", ""))
        numeric = e.get("numeric")
        if code == UNDEFINED_KEY:
            if numeric is not None:
                issues.append("The Undefined entry must not carry a numeric code")
            continue
        if not _CODE_RE.fullmatch(code):
            issues.append(f"Script code {code!r} is not four letters in title case")
        if numeric is None or not 0 < numeric < 1000:
            issues.append(f"Script {code} has no numeric code in 1..999")

    return issues


def build_script_table(document: dict) -> ScriptTable:
    """Build the immutable script table.

    Raises:
        ValueError: If the document fails structural validation
    """
    issues = validate_script_document(document)
    if issues:
        raise ValueError(f"Invalid script table: {issues}")

    entries = tuple(
        Script(code=str(e["code"]), name=str(e["name"]), numeric=e.get("numeric"))
        for e in document["scripts"]
    )

    by_code = build_index(entries, [lambda s: s.code], lambda s: s.code, label="script code")
    by_numeric = build_index(
        [s for s in entries if not s.is_undefined],
        [lambda s: s.numeric],
        lambda s: s.code,
        label="numeric script code",
    )

    logger.info(f"Built script table: {len(entries)} entries")
    return ScriptTable(entries=entries, by_code=by_code, by_numeric=by_numeric)


def resolve_script_code(
    table: ScriptTable,
    code: Optional[str],
    case_sensitive: bool = True,
) -> Optional[Script]:
    """Look up an ISO 15924 code. Misses return None."""
    key = canonicalize_script_code(code, case_sensitive)
    if key is None:
        return None
    return table.by_code.get(key)


def resolve_script_numeric(table: ScriptTable, numeric: Optional[int]) -> Optional[Script]:
    """Look up an ISO 15924 numeric code. Zero and negative numbers never match."""
    if numeric is None or numeric <= 0:
        return None
    return table.by_numeric.get(numeric)


__all__ = [
    "UNDEFINED_KEY",
    "Script",
    "ScriptTable",
    "validate_script_document",
    "build_script_table",
    "resolve_script_code",
    "resolve_script_numeric",
]
