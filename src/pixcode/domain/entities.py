"""Pix domain entities: key types, payment key, merchant identity and amount."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


CENT = Decimal("0.01")
# Largest amount whose rendering fits the 13 characters EMV allows in field 54
MAX_AMOUNT = Decimal("9999999999.99")


class KeyType(str, Enum):
    """Category of payment identifier, valued by its configuration wire name."""

    EMAIL = "EMAIL"
    PHONE = "PHONE"
    NATIONAL_ID_INDIVIDUAL = "CPF"
    NATIONAL_ID_ENTITY = "CNPJ"
    RANDOM_TOKEN = "EVP"


class PaymentKey(BaseModel):
    """Raw payment key as typed by the administrator, plus its declared type."""

    model_config = ConfigDict(frozen=True)

    raw_value: str = ""
    type: KeyType = KeyType.EMAIL


class MerchantIdentity(BaseModel):
    """Merchant name and city exactly as configured (not yet normalized)."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    city: str = ""


class TransactionAmount(BaseModel):
    """Non-negative monetary amount, encoded with exactly two decimals."""

    model_config = ConfigDict(frozen=True)

    value: Decimal = Field(..., ge=0)

    @field_validator("value", mode="before")
    @classmethod
    def coerce_float(cls, v: object) -> object:
        # str() first so 19.9 becomes Decimal("19.9"), not its binary expansion
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @classmethod
    def of(
        cls, value: Union[TransactionAmount, Decimal, float, int, str]
    ) -> TransactionAmount:
        if isinstance(value, TransactionAmount):
            return value
        return cls(value=value)

    def formatted(self) -> str:
        """Return the amount rounded half-up to the cent, e.g. ``"12.00"``."""
        with localcontext() as ctx:
            # integer digits plus the two cents must fit the working precision
            ctx.prec = max(ctx.prec, self.value.adjusted() + 3)
            return f"{self.value.quantize(CENT, rounding=ROUND_HALF_UP):.2f}"


class PixConfig(BaseModel):
    """Admin-configured receiving account used at checkout."""

    key: str = ""
    key_type: KeyType = KeyType.EMAIL
    merchant_name: str = ""
    merchant_city: str = ""
    updated_at: Optional[datetime] = None

    @field_serializer("updated_at")
    def serialize_updated_at(self, value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None

    def payment_key(self) -> PaymentKey:
        return PaymentKey(raw_value=self.key, type=self.key_type)

    def merchant(self) -> MerchantIdentity:
        return MerchantIdentity(name=self.merchant_name, city=self.merchant_city)

    def update_details(
        self,
        key: Optional[str] = None,
        key_type: Optional[KeyType] = None,
        merchant_name: Optional[str] = None,
        merchant_city: Optional[str] = None,
    ) -> None:
        """Apply the provided fields and stamp ``updated_at``."""
        if key is not None:
            self.key = key
        if key_type is not None:
            self.key_type = key_type
        if merchant_name is not None:
            self.merchant_name = merchant_name
        if merchant_city is not None:
            self.merchant_city = merchant_city
        self.updated_at = datetime.now(timezone.utc)
