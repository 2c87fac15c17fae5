"""
Shared framework for validating code tables and exporting them to Parquet.

Each code space has a data/build_<space>.py script that supplies the
space-specific callbacks; this module runs the common load -> flatten ->
validate -> export -> summary pipeline.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional
from dataclasses import dataclass

import pandas as pd

from isoidentity.utils.build_utils import load_yaml_file


@dataclass
class BuildConfig:
    """Configuration for building one code table export."""

    # Input source (one of these required)
    input_yaml: Optional[Path] = None  # YAML table shipped with the package
    input_data: Optional[dict] = None  # Already parsed table (tests, ad-hoc data)

    # Output file (required)
    output_parquet: Path = None

    # Space-specific callbacks (required)
    process_entry: Callable[[dict], dict] = None  # Convert YAML entry to DataFrame row
    validate_data: Callable[[pd.DataFrame, dict], List[str]] = None  # Return validation issues
    generate_summary: Callable[[pd.DataFrame, dict], None] = None  # Print summary stats

    # Space metadata (required)
    entity_plural: str = None  # "countries", "currencies", etc.
    yaml_key: str = None  # Key of the entry list in the YAML document


def build_code_table(config: BuildConfig) -> int:
    """
    Generic build process for a code table.

    Row order of the YAML table is preserved: it is the order lookups and
    listings report.

    Returns:
        0 on success, 1 if validation issues found
    """
    if config.input_data is not None:
        print(f"Building {config.entity_plural} table from direct data")
        document = config.input_data
    elif config.input_yaml is not None:
        print(f"Building {config.entity_plural} table from {config.input_yaml}")
        document = load_yaml_file(config.input_yaml)
    else:
        raise ValueError("Either input_yaml or input_data must be provided")

    entries = document.get(config.yaml_key) or []
    print(f"Processing {len(entries)} {config.entity_plural}...")

    rows = [config.process_entry(entry) for entry in entries]
    df = pd.DataFrame(rows)

    print("\nValidating data...")
    issues = config.validate_data(df, document)

    if issues:
        print("\n⚠️  Validation issues found:")
        for issue in issues:
            print(f"  - {issue}")
        print()
    else:
        print("✅ All validations passed")

    print(f"\nWriting {len(df)} {config.entity_plural} to {config.output_parquet}")
    df.to_parquet(config.output_parquet, index=False, engine='pyarrow')

    print("\n" + "=" * 60)
    print("BUILD SUMMARY")
    print("=" * 60)
    print(f"Total {config.entity_plural}: {len(df)}")
    print(f"Output file: {config.output_parquet}")
    print(f"File size: {config.output_parquet.stat().st_size / 1024:.1f} KB")

    config.generate_summary(df, document)

    if issues:
        print(f"\n⚠️  Build completed with {len(issues)} validation issues")
        return 1
    else:
        print("\n✅ Build completed successfully")
        return 0


def validate_duplicate_keys(df: pd.DataFrame, key_field: str) -> List[str]:
    """Check for duplicate non-empty keys."""
    issues = []
    keyed = df[df[key_field].notna() & (df[key_field] != "")]
    dup_keys = keyed[keyed.duplicated(subset=[key_field], keep=False)]
    if not dup_keys.empty:
        dup_key_names = dup_keys[['name', key_field]].to_dict('records')
        issues.append(f"Duplicate {key_field}s found: {dup_key_names}")
    return issues


def validate_required_fields(df: pd.DataFrame, required_fields: List[str]) -> List[str]:
    """Check for missing required fields."""
    issues = []
    for field in required_fields:
        missing = df[df[field].isna() | (df[field] == "")]
        if not missing.empty:
            missing_names = missing['name'].tolist()
            issues.append(f"Missing {field} for entries: {missing_names}")
    return issues


def validate_references(
    references: Iterable[tuple],
    valid_keys: Iterable[str],
    what: str,
) -> List[str]:
    """Check that every referenced key exists.

    Args:
        references: (source, target_key) pairs, e.g. ("EUR", "XK")
        valid_keys: Canonical keys the targets must belong to
        what: Description used in the issue message

    Examples:
        >>> validate_references([("iw", "he")], {"he", "yi"}, "legacy alias target")
        []
    """
    valid = set(valid_keys)
    dangling = [f"{source} -> {target}" for source, target in references if target not in valid]
    if dangling:
        return [f"Unknown {what}: {dangling}"]
    return []


__all__ = [
    "BuildConfig",
    "build_code_table",
    "validate_duplicate_keys",
    "validate_required_fields",
    "validate_references",
]
