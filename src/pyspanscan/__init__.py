"""pyspanscan - Zero-copy scanners for query strings and JSON properties."""

from __future__ import annotations

__version__ = "0.1.0"

from pyspanscan._constants import MAX_ENTRIES, MAX_PROPERTY_NAME_LENGTH
from pyspanscan._errors import (
    BufferNotWritableError,
    InvalidCapacityError,
    InvalidLengthError,
    InvalidPropertyNameError,
    ScanError,
)
from pyspanscan._scanner import block_length
from pyspanscan._span import Span
from pyspanscan.dictionary import (
    BuildStatus,
    KeyValueDictionary,
    LookupResult,
    LookupStatus,
    build_dictionary,
    lookup,
)
from pyspanscan.json_locator import JsonPropertyValue, JsonPropType, find_property
from pyspanscan.strings import decode_escapes, find_bounded, replace_byte

__all__ = [
    "build_dictionary",
    "lookup",
    "find_property",
    "block_length",
    "decode_escapes",
    "find_bounded",
    "replace_byte",
    "Span",
    "KeyValueDictionary",
    "BuildStatus",
    "LookupResult",
    "LookupStatus",
    "JsonPropertyValue",
    "JsonPropType",
    "ScanError",
    "BufferNotWritableError",
    "InvalidCapacityError",
    "InvalidLengthError",
    "InvalidPropertyNameError",
    "MAX_ENTRIES",
    "MAX_PROPERTY_NAME_LENGTH",
]
