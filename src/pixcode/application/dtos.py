"""Data Transfer Objects for the Pix application layer."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..domain.entities import MAX_AMOUNT, KeyType


class BuildPayloadDTO(BaseModel):
    """DTO for building a payload from explicit inputs."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "key": "shop@example.com",
                "key_type": "EMAIL",
                "merchant_name": "Example Shop",
                "merchant_city": "Sao Paulo",
                "amount": "19.90",
            }
        }
    )

    key: str = ""
    key_type: KeyType = KeyType.EMAIL
    merchant_name: str = ""
    merchant_city: str = ""
    amount: Decimal = Field(..., ge=0, le=MAX_AMOUNT)


class PayloadResponseDTO(BaseModel):
    """DTO for returning a generated payload."""

    payload: str
    configured: bool


class VerifyPayloadDTO(BaseModel):
    """DTO for checking a payload's trailing checksum."""

    payload: str


class VerifyPayloadResponseDTO(BaseModel):
    valid: bool


class DetectKeyTypeDTO(BaseModel):
    """DTO for an advisory key-type lookup."""

    key: str


class DetectKeyTypeResponseDTO(BaseModel):
    key: str
    key_type: Optional[KeyType]


class UpdatePixConfigDTO(BaseModel):
    """DTO for updating the admin Pix configuration.

    Omitting ``key_type`` while changing ``key`` lets the type be detected
    from the key's shape.
    """

    key: Optional[str] = Field(None, max_length=200)
    key_type: Optional[KeyType] = None
    merchant_name: Optional[str] = Field(None, max_length=100)
    merchant_city: Optional[str] = Field(None, max_length=100)


class PixConfigResponseDTO(BaseModel):
    """DTO for returning the admin Pix configuration."""

    key: str
    key_type: KeyType
    merchant_name: str
    merchant_city: str
    updated_at: Optional[datetime]

    @field_serializer("updated_at")
    def serialize_updated_at(self, value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None


class CreateCheckoutDTO(BaseModel):
    """DTO for requesting the payment data of a cart total."""

    total: Decimal = Field(..., ge=0, le=MAX_AMOUNT)


class CheckoutPayloadDTO(BaseModel):
    """Everything the checkout view needs to show a Pix payment."""

    configured: bool
    payload: str
    qr_image_url: Optional[str]
    amount: str
    merchant_name: str
    message: Optional[str] = None
