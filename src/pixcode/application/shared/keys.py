"""Pix key normalization and shape-based type detection. Pure functions."""

from __future__ import annotations

import re
from typing import Optional

from ...domain.entities import KeyType


_NON_DIGIT = re.compile(r"\D")
# whitespace, control and non-ASCII characters
_NOT_PRINTABLE_ASCII = re.compile(r"[^\x21-\x7E]")

_UUID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
# 00.000.000/0001-00, punctuation optional
_CNPJ = re.compile(r"^\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}$")
# 000.000.000-00, punctuation optional
_CPF = re.compile(r"^\d{3}\.?\d{3}\.?\d{3}-?\d{2}$")


def normalize_key(raw: str, key_type: KeyType) -> str:
    """Return the on-wire form of a key for its declared type.

    - CPF/CNPJ: digits only.
    - PHONE: digits only, prefixed with a single ``+`` (any typed ``+`` is
      stripped with the rest of the punctuation, then put back).
    - EMAIL/EVP: whitespace and non-ASCII characters removed, printable
      ASCII (including ``@``, ``.`` and ``-``) preserved.

    No validation beyond formatting is done; a wrong digit count passes
    through. Blank input gives ``""``.
    """
    value = (raw or "").strip()
    if not value:
        return ""

    if key_type in (KeyType.NATIONAL_ID_ENTITY, KeyType.NATIONAL_ID_INDIVIDUAL):
        return _NON_DIGIT.sub("", value)

    if key_type == KeyType.PHONE:
        return f"+{_NON_DIGIT.sub('', value)}"

    return _NOT_PRINTABLE_ASCII.sub("", value)


def detect_key_type(raw: str) -> Optional[KeyType]:
    """Guess the key type from its shape, or ``None`` when nothing matches.

    Checked in order, first match wins: UUID, ``@``, CNPJ, leading ``+``,
    CPF. A ``None`` result means the caller keeps its current type.
    """
    value = (raw or "").strip()
    if not value:
        return None
    if _UUID.match(value):
        return KeyType.RANDOM_TOKEN
    if "@" in value:
        return KeyType.EMAIL
    if _CNPJ.match(value):
        return KeyType.NATIONAL_ID_ENTITY
    if value.startswith("+"):
        return KeyType.PHONE
    if _CPF.match(value):
        return KeyType.NATIONAL_ID_INDIVIDUAL
    return None
