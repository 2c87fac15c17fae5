"""Shared utilities for the isoidentity package."""

from isoidentity.utils.dataloader import (
    DATA_DIR_ENV,
    find_data_file,
    load_table_file,
    format_not_found_error,
    load_code_table,
)
from isoidentity.utils.normalize import (
    canonicalize_code,
    normalize_name,
)
from isoidentity.utils.resolver import (
    group_by_keys,
    resolve_collisions,
    build_index,
    find_by_pattern,
    topk_matches,
    find_best_match,
)
from isoidentity.utils.build_utils import (
    load_yaml_file,
    join_codes,
)

__all__ = [
    # Data loading
    "DATA_DIR_ENV",
    "find_data_file",
    "load_table_file",
    "format_not_found_error",
    "load_code_table",
    # Normalization
    "canonicalize_code",
    "normalize_name",
    # Resolution
    "group_by_keys",
    "resolve_collisions",
    "build_index",
    "find_by_pattern",
    "topk_matches",
    "find_best_match",
    # Build utilities
    "load_yaml_file",
    "join_codes",
]
