"""
International dialing prefix resolution (ITU-T E.164 country calling codes).

Calling codes form a prefix-free set except where several countries share
one code (+1 for the North American Numbering Plan, +7 for Russia and
Kazakhstan). A shared code resolves to the entry flagged `preferred`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from isoidentity.countries.countryidentity import Country, CountryTable
from isoidentity.utils.resolver import build_index, group_by_keys

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"^[0-9]{1,4}$")


@dataclass(frozen=True)
class DialCode:
    """Calling code of one country. str(dialcode) is "+<prefix>"."""

    country: Country
    prefix: str
    preferred: bool = False

    def to_dict(self) -> dict:
        return {"country": self.country.alpha2, "prefix": self.prefix, "preferred": self.preferred}

    def __str__(self) -> str:
        return f"+{self.prefix}"


@dataclass(frozen=True)
class DialCodeTable:
    entries: Tuple[DialCode, ...]
    by_prefix: Mapping[str, DialCode] = field(repr=False)
    max_prefix_length: int = 0


def validate_dialcode_document(document: dict, countries: CountryTable) -> List[str]:
    """Structural checks on a parsed dialcodes.yaml document."""
    issues = []
    entries = document.get("dialcodes") or []

    for e in entries:
        if e.get("country") not in countries.by_code:
            issues.append(f"Dial code +{e.get('prefix')} has unknown country {e.get('country')}")
        if not _PREFIX_RE.match(str(e.get("prefix", ""))):
            issues.append(f"Dial code {e.get('prefix')!r} for {e.get('country')} is not 1-4 digits")

    groups = group_by_keys(entries, [lambda e: str(e.get("prefix"))])
    for prefix, members in groups.items():
        flagged = [m for m in members if m.get("preferred")]
        if len(members) > 1 and len(flagged) != 1:
            issues.append(
                f"Dial code +{prefix} shared by {[m.get('country') for m in members]} "
                f"needs exactly one preferred entry"
            )

    return issues


def build_dialcode_table(document: dict, countries: CountryTable) -> DialCodeTable:
    """Build the immutable dial code table.

    Raises:
        ValueError: If the document fails structural validation
    """
    issues = validate_dialcode_document(document, countries)
    if issues:
        raise ValueError(f"Invalid dial code table: {issues}")

    entries = tuple(
        DialCode(
            country=countries.by_code[e["country"]],
            prefix=str(e["prefix"]),
            preferred=bool(e.get("preferred", False)),
        )
        for e in document["dialcodes"]
    )
    by_prefix = build_index(
        entries,
        [lambda d: d.prefix],
        lambda d: d.country.alpha2,
        is_current=lambda d: d.preferred,
        label="dial code",
    )

    logger.info(f"Built dial code table: {len(entries)} entries")
    return DialCodeTable(
        entries=entries,
        by_prefix=by_prefix,
        max_prefix_length=max((len(d.prefix) for d in entries), default=0),
    )


def resolve_prefix(table: DialCodeTable, prefix: Optional[str]) -> Optional[DialCode]:
    """Look up a calling code, with or without the leading '+'."""
    if not prefix:
        return None
    return table.by_prefix.get(prefix.strip().lstrip("+"))


def resolve_phone(table: DialCodeTable, phone: Optional[str]) -> Optional[DialCode]:
    """Calling code of an international phone number ("+81 3 1234 5678").

    The number must start with '+' (after trimming); the longest matching
    prefix wins.
    """
    if not phone:
        return None

    number = phone.strip()
    if not number.startswith("+"):
        return None

    digits = number[1:]
    for length in range(min(table.max_prefix_length, len(digits)), 0, -1):
        hit = table.by_prefix.get(digits[:length])
        if hit is not None:
            return hit

    return None


def strip_prefix(table: DialCodeTable, phone: str) -> str:
    """The subscriber part of a phone number; unchanged if no prefix matches."""
    hit = resolve_phone(table, phone)
    if hit is None:
        return phone
    return phone.strip()[len(hit.prefix) + 1:].strip()


def dialcodes_for_country(table: DialCodeTable, country: Optional[Country]) -> List[DialCode]:
    if country is None:
        return []
    return [d for d in table.entries if d.country == country]


__all__ = [
    "DialCode",
    "DialCodeTable",
    "validate_dialcode_document",
    "build_dialcode_table",
    "resolve_prefix",
    "resolve_phone",
    "strip_prefix",
    "dialcodes_for_country",
]
