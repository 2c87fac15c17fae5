"""Shared resolution utilities.

Index construction with table-driven collision policies, regex search in
table order, and RapidFuzz scoring for free-text names. Used by every code
space (countries, languages, currencies, locales, dial codes).
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

logger = logging.getLogger(__name__)

E = TypeVar("E")
K = TypeVar("K", bound=Hashable)


def group_by_keys(
    entries: Iterable[E],
    key_fns: Sequence[Callable[[E], Optional[K]]],
) -> Dict[K, List[E]]:
    """Group entries under every key produced by key_fns (None keys skipped)."""
    groups: Dict[K, List[E]] = {}
    for entry in entries:
        for key_fn in key_fns:
            key = key_fn(entry)
            if key is None or key == "":
                continue
            members = groups.setdefault(key, [])
            if not any(m is entry for m in members):
                members.append(entry)
    return groups


def resolve_collisions(
    groups: Mapping[K, List[E]],
    canonical_key: Callable[[E], str],
    *,
    preferred: Optional[Mapping[K, str]] = None,
    is_current: Optional[Callable[[E], bool]] = None,
    label: str = "key",
) -> Mapping[K, E]:
    """Collapse grouped entries to one entry per key.

    Keys shared by several entries are resolved in this order:
      1. The explicit preferred table (key -> canonical key of the winner)
      2. The single member for which is_current() holds
      3. Otherwise the key is left out of the index and a warning is logged

    Args:
        groups: Output of group_by_keys
        canonical_key: Returns the canonical key of an entry
        preferred: Collision override table
        is_current: Predicate marking non-deprecated entries
        label: Name of the key kind, used in log and error messages

    Returns:
        Read-only mapping key -> entry

    Raises:
        ValueError: If a preferred winner is not among the colliding entries
    """
    preferred = preferred or {}
    index: Dict[K, E] = {}

    for key, members in groups.items():
        if len(members) == 1:
            index[key] = members[0]
            continue

        member_keys = [canonical_key(m) for m in members]

        winner_key = preferred.get(key)
        if winner_key is not None:
            winner = next((m for m in members if canonical_key(m) == winner_key), None)
            if winner is None:
                raise ValueError(
                    f"Preferred {label} {key!r} -> {winner_key!r} is not among {member_keys}"
                )
            index[key] = winner
            logger.debug(f"{label} {key!r} shared by {member_keys}, preferring {winner_key}")
            continue

        if is_current is not None:
            current = [m for m in members if is_current(m)]
            if len(current) == 1:
                index[key] = current[0]
                logger.debug(
                    f"{label} {key!r} shared by {member_keys}, "
                    f"using current entry {canonical_key(current[0])}"
                )
                continue

        logger.warning(f"Unresolved {label} collision {key!r} between {member_keys}; lookups will miss")

    return MappingProxyType(index)


def build_index(
    entries: Iterable[E],
    key_fns: Sequence[Callable[[E], Optional[K]]],
    canonical_key: Callable[[E], str],
    *,
    preferred: Optional[Mapping[K, str]] = None,
    is_current: Optional[Callable[[E], bool]] = None,
    label: str = "key",
) -> Mapping[K, E]:
    """group_by_keys followed by resolve_collisions."""
    return resolve_collisions(
        group_by_keys(entries, key_fns),
        canonical_key,
        preferred=preferred,
        is_current=is_current,
        label=label,
    )


def find_by_pattern(
    entries: Iterable[E],
    pattern,
    field_fn: Callable[[E], Optional[str]],
) -> List[E]:
    """Return entries whose field fully matches a regular expression.

    Args:
        entries: Entries in table order
        pattern: Regex string or compiled pattern
        field_fn: Returns the string to match (usually the display name)

    Returns:
        Matching entries in table order (possibly empty)

    Raises:
        ValueError: If pattern is None
        re.error: If pattern is not a valid regular expression

    Examples:
        >>> [c.alpha2 for c in find_by_pattern(countries, ".*United.*", lambda c: c.name)]
        ['AE', 'GB', 'TZ', 'UK', 'UM', 'US']
    """
    if pattern is None:
        raise ValueError("pattern must not be None")

    regex = re.compile(pattern)
    matches = []
    for e in entries:
        value = field_fn(e)
        if value is not None and regex.fullmatch(value):
            matches.append(e)
    return matches


def topk_matches(
    query_norm: str,
    choices: Mapping[str, E],
    k: int = 5,
) -> List[Tuple[E, float]]:
    """Return top-K entries for a normalized query with RapidFuzz WRatio scores.

    choices maps normalized names (official names and aliases) to entries;
    an entry reachable under several names is reported once, with its best
    score.

    Examples:
        >>> topk_matches("untied states", choices, k=2)
        [(Country(alpha2='US', ...), 92.3), (Country(alpha2='UM', ...), 85.5)]
    """
    if not query_norm or not choices:
        return []

    names = list(choices.keys())
    scored = process.extract(query_norm, names, scorer=fuzz.WRatio, limit=None)

    results: List[Tuple[E, float]] = []
    seen = []
    for name, score, _ in scored:
        entry = choices[name]
        if any(entry is s for s in seen):
            continue
        seen.append(entry)
        results.append((entry, float(score)))
        if len(results) >= k:
            break

    return results


def find_best_match(
    query_norm: str,
    choices: Mapping[str, E],
    threshold: int = 85,
) -> Optional[Tuple[E, float]]:
    """Best RapidFuzz WRatio match at or above threshold, else None."""
    if not query_norm or not choices:
        return None

    match = process.extractOne(query_norm, list(choices.keys()), scorer=fuzz.WRatio)
    if match is None:
        return None

    name, score, _ = match
    if score < threshold:
        return None

    return choices[name], float(score)


__all__ = [
    "group_by_keys",
    "resolve_collisions",
    "build_index",
    "find_by_pattern",
    "topk_matches",
    "find_best_match",
]
