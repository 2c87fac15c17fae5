"""International dialing prefixes."""

from isoidentity.dialcodes.dialcodeidentity import DialCode
from isoidentity.dialcodes.dialcodeapi import (
    load_dialcodes,
    dialcode_by_prefix,
    dialcode_by_phone,
    country_by_phone,
    prefix_by_phone,
    remove_dial_prefix,
    dialcodes_by_country,
    list_dialcodes,
)

__all__ = [
    "DialCode",
    "load_dialcodes",
    "dialcode_by_prefix",
    "dialcode_by_phone",
    "country_by_phone",
    "prefix_by_phone",
    "remove_dial_prefix",
    "dialcodes_by_country",
    "list_dialcodes",
]
