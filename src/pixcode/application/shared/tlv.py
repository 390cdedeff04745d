"""EMV tag-length-value encoding used by the BR Code payload."""

from __future__ import annotations

from typing import Final

from ...domain.errors import FieldLengthError


TAG_LENGTH: Final[int] = 2
MAX_VALUE_LENGTH: Final[int] = 99


def field(tag: str, value: str) -> str:
    """Encode one field: ``TAG(2) + LEN(2) + VALUE``.

    LEN is the character count of VALUE, zero-padded to two digits, so
    ``field("00", "01") == "000201"``.

    Raises:
        FieldLengthError: If the tag is not 2 characters or VALUE is longer
            than 99 characters. Callers normalize/truncate before encoding.
    """
    if len(tag) != TAG_LENGTH:
        raise FieldLengthError(f"Tag must be {TAG_LENGTH} characters, got {tag!r}")
    if len(value) > MAX_VALUE_LENGTH:
        raise FieldLengthError(
            f"Value for tag {tag} has {len(value)} characters, "
            f"max is {MAX_VALUE_LENGTH}"
        )
    return f"{tag}{len(value):02d}{value}"


def nested(tag: str, *subfields: str) -> str:
    """Wrap already-encoded sub-fields as the value of an outer field."""
    return field(tag, "".join(subfields))


def parse_fields(data: str) -> list[tuple[str, str]]:
    """Decode a flat sequence of fields into ``(tag, value)`` pairs.

    Nested templates come back as their raw encoded value; call again on it
    to descend.

    Raises:
        ValueError: If the sequence is truncated or a length is not numeric.
    """
    fields: list[tuple[str, str]] = []
    pos = 0
    while pos < len(data):
        header = data[pos : pos + TAG_LENGTH + 2]
        if len(header) < TAG_LENGTH + 2:
            raise ValueError(f"Truncated field header at position {pos}")
        tag, length_str = header[:TAG_LENGTH], header[TAG_LENGTH:]
        if not (length_str.isascii() and length_str.isdigit()):
            raise ValueError(f"Invalid length {length_str!r} for tag {tag}")
        start = pos + len(header)
        end = start + int(length_str)
        if end > len(data):
            raise ValueError(f"Value for tag {tag} runs past end of data")
        fields.append((tag, data[start:end]))
        pos = end
    return fields
