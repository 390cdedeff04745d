"""Free-text normalization for merchant name and city fields."""

from __future__ import annotations

import re
import unicodedata

_NOT_ALLOWED = re.compile(r"[^A-Za-z0-9 ]")


def normalize_text(value: str, max_length: int) -> str:
    """Strip accents and symbols, upper-case, then cut to ``max_length``.

    ``"São Paulo"`` becomes ``"SAO PAULO"``. Truncation happens last so that
    removed characters never count against the limit. Empty or fully stripped
    input gives ``""``; callers apply their own defaults beforehand.
    """
    decomposed = unicodedata.normalize("NFD", value or "")
    without_marks = "".join(c for c in decomposed if not unicodedata.combining(c))
    cleaned = _NOT_ALLOWED.sub("", without_marks).upper()
    return cleaned[: max(max_length, 0)]
