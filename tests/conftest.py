"""Shared test fixtures and utilities for isoidentity tests."""

from pathlib import Path

import pytest

import isoidentity
from isoidentity.utils.build_utils import load_yaml_file

PACKAGE_DIR = Path(isoidentity.__file__).parent


def package_table(space: str) -> dict:
    """Parsed YAML document shipped with the package for one code space."""
    return load_yaml_file(PACKAGE_DIR / space / "data" / f"{space}.yaml")


@pytest.fixture
def countries():
    """Country table loaded once per test"""
    return isoidentity.load_countries()


@pytest.fixture
def languages():
    """Language table loaded once per test"""
    return isoidentity.load_languages()


@pytest.fixture
def currencies():
    """Currency table loaded once per test"""
    return isoidentity.load_currencies()


@pytest.fixture
def locales():
    """Locale table loaded once per test"""
    return isoidentity.load_locales()


@pytest.fixture
def dialcodes():
    """Dial code table loaded once per test"""
    return isoidentity.load_dialcodes()


@pytest.fixture
def scripts():
    """Script table loaded once per test"""
    return isoidentity.load_scripts()


@pytest.fixture
def country_document():
    """Parsed countries.yaml"""
    return package_table("countries")


@pytest.fixture
def language_document():
    """Parsed languages.yaml"""
    return package_table("languages")


@pytest.fixture
def fresh_cache():
    """Clear every table cache before and after the test.

    Use in tests that point the loaders at other data (ISOIDENTITY_DATA_DIR).
    """
    isoidentity.clear_cache()
    yield
    isoidentity.clear_cache()


@pytest.fixture
def mini_country_document():
    """Small country table with one numeric collision and one alias.

    Example:
        def test_collision(mini_country_document):
            table = build_country_table(mini_country_document)
            assert table.by_numeric[104].alpha2 == "MM"
    """
    return {
        "countries": [
            {"alpha2": "UNDEFINED", "name": "Undefined", "assignment": "USER_ASSIGNED"},
            {"alpha2": "BU", "name": "Burma", "alpha3": "BUR", "numeric": 104,
             "assignment": "TRANSITIONALLY_RESERVED", "alpha4": "BUMM"},
            {"alpha2": "JP", "name": "Japan", "alpha3": "JPN", "numeric": 392},
            {"alpha2": "MM", "name": "Myanmar", "alpha3": "MMR", "numeric": 104},
        ],
        "numeric_preferred": {104: "MM"},
        "name_aliases": {"nippon": "JP"},
    }
