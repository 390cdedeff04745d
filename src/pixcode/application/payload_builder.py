"""BR Code (Pix "copia e cola") payload assembly.

The payload is a fixed-order sequence of EMV TLV fields terminated by a
CRC-16 field (tag ``63``) whose checksum covers every preceding character,
including its own ``6304`` header.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Final, Union

from pydantic import ValidationError

from ..crypto.crc16 import compute_crc16
from ..domain.entities import MerchantIdentity, PaymentKey, TransactionAmount
from .shared.keys import normalize_key
from .shared.text import normalize_text
from .shared.tlv import MAX_VALUE_LENGTH, field, nested

logger = logging.getLogger(__name__)


PAYLOAD_FORMAT_INDICATOR: Final[str] = "01"
PIX_GUI: Final[str] = "br.gov.bcb.pix"
MERCHANT_CATEGORY_CODE: Final[str] = "0000"
CURRENCY_BRL: Final[str] = "986"
COUNTRY_CODE: Final[str] = "BR"
REFERENCE_LABEL: Final[str] = "***"
ZERO_AMOUNT: Final[str] = "0.00"

DEFAULT_MERCHANT_NAME: Final[str] = "Libris Store"
DEFAULT_MERCHANT_CITY: Final[str] = "Sao Paulo"
MERCHANT_NAME_MAX: Final[int] = 25
MERCHANT_CITY_MAX: Final[int] = 15
# 99 minus the GUI sub-field (18) and the key sub-field header (4)
KEY_MAX_LENGTH: Final[int] = 77

CRC_TAG: Final[str] = "63"
CRC_HEADER: Final[str] = CRC_TAG + "04"

_CRC_SUFFIX = re.compile(r"6304[0-9A-F]{4}$")

AmountLike = Union[TransactionAmount, Decimal, float, int, str]


def format_amount(amount: AmountLike) -> str:
    """Fixed two-decimal rendering, rounded half-up: ``12 -> "12.00"``.

    Values that are not a non-negative number, or too large to fit a field,
    render as ``"0.00"``.
    """
    try:
        formatted = TransactionAmount.of(amount).formatted()
    except (ValidationError, InvalidOperation):
        logger.warning("Invalid transaction amount %r, encoding 0.00", amount)
        return ZERO_AMOUNT
    if len(formatted) > MAX_VALUE_LENGTH:
        logger.warning("Transaction amount %r too long, encoding 0.00", amount)
        return ZERO_AMOUNT
    return formatted


def build_payload(
    key: PaymentKey, merchant: MerchantIdentity, amount: AmountLike
) -> str:
    """Assemble the full BR Code string, or ``""`` when no key is configured.

    Never raises for a present key: malformed keys are only reformatted, and
    missing merchant data falls back to constant defaults.
    """
    if not key.raw_value:
        return ""

    pix_key = normalize_key(key.raw_value, key.type)
    if not pix_key:
        logger.debug("Key %r normalized to empty for type %s", key.raw_value, key.type)
        return ""
    pix_key = pix_key[:KEY_MAX_LENGTH]

    name = normalize_text(merchant.name or DEFAULT_MERCHANT_NAME, MERCHANT_NAME_MAX)
    city = normalize_text(merchant.city or DEFAULT_MERCHANT_CITY, MERCHANT_CITY_MAX)

    partial = (
        field("00", PAYLOAD_FORMAT_INDICATOR)
        + nested("26", field("00", PIX_GUI), field("01", pix_key))
        + field("52", MERCHANT_CATEGORY_CODE)
        + field("53", CURRENCY_BRL)
        + field("54", format_amount(amount))
        + field("58", COUNTRY_CODE)
        + field("59", name)
        + field("60", city)
        + nested("62", field("05", REFERENCE_LABEL))
        + CRC_HEADER
    )
    return partial + compute_crc16(partial)


def verify_payload(payload: str) -> bool:
    """Check that a payload ends in a CRC field matching its own prefix."""
    if not payload or not _CRC_SUFFIX.search(payload):
        return False
    return compute_crc16(payload[:-4]) == payload[-4:]
