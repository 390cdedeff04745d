"""Pure encoding helpers shared by the payload builder and the API.

This package has no I/O and should not depend on use cases or infrastructure.
"""

from .keys import detect_key_type, normalize_key
from .text import normalize_text
from .tlv import field, nested, parse_fields

__all__ = [
    "detect_key_type",
    "normalize_key",
    "normalize_text",
    "field",
    "nested",
    "parse_fields",
]
