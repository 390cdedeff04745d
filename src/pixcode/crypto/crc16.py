from __future__ import annotations

from typing import Final, Union


CRC16_POLY: Final[int] = 0x1021
CRC16_INIT: Final[int] = 0xFFFF
MASK_16: Final[int] = 0xFFFF


def crc16_ccitt_false(data: bytes) -> int:
    """CRC-16/CCITT-FALSE: poly 0x1021, init 0xFFFF, no reflection, no xor-out."""
    crc = CRC16_INIT
    for byte in data:
        crc ^= (byte << 8) & MASK_16
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ CRC16_POLY) & MASK_16
            else:
                crc = (crc << 1) & MASK_16
    return crc & MASK_16


def compute_crc16(data: Union[str, bytes]) -> str:
    """Checksum rendered as 4 uppercase hex digits, e.g. ``"29B1"``.

    Text is processed as its UTF-8 bytes; BR Code payloads are ASCII once
    normalized, so this matches a per-character computation.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return f"{crc16_ccitt_false(data):04X}"
