"""Use case tests for the checkout payment screen."""

from decimal import Decimal
from urllib.parse import parse_qs, urlsplit

import pytest

from pixcode.application.dtos import BuildPayloadDTO, UpdatePixConfigDTO
from pixcode.application.payload_builder import verify_payload
from pixcode.application.shared.tlv import parse_fields
from pixcode.application.use_cases.checkout import (
    NOT_CONFIGURED_MESSAGE,
    build_payload_response,
)
from pixcode.domain.entities import KeyType

QR_RENDERER_URL = "https://qr.example.test/render"


@pytest.mark.asyncio
async def test_checkout_with_configured_key(checkout_service):
    result = await checkout_service.create_checkout(Decimal("59.8"))

    assert result.configured is True
    assert result.amount == "59.80"
    assert result.merchant_name == "LIBRIS STORE"
    assert result.message is None
    assert "0122livraria@libris.com.br" in result.payload
    assert "540559.80" in result.payload
    assert verify_payload(result.payload)


@pytest.mark.asyncio
async def test_qr_url_embeds_percent_encoded_payload(checkout_service):
    result = await checkout_service.create_checkout(Decimal("10"))

    parts = urlsplit(result.qr_image_url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == QR_RENDERER_URL
    query = parse_qs(parts.query)
    assert query["size"] == ["250x250"]
    assert query["margin"] == ["4"]
    assert query["data"] == [result.payload]
    assert "@" not in parts.query
    assert "%40" in parts.query


@pytest.mark.asyncio
async def test_checkout_without_key_is_not_configured(
    checkout_service, pix_config_service
):
    await pix_config_service.update_config(UpdatePixConfigDTO(key=""))

    result = await checkout_service.create_checkout(Decimal("10"))

    assert result.configured is False
    assert result.payload == ""
    assert result.qr_image_url is None
    assert result.message == NOT_CONFIGURED_MESSAGE
    assert result.amount == "10.00"


@pytest.mark.asyncio
async def test_checkout_follows_config_updates(checkout_service, pix_config_service):
    await pix_config_service.update_config(
        UpdatePixConfigDTO(key="12.345.678/0001-95", merchant_city="Recife")
    )

    result = await checkout_service.create_checkout(Decimal("1"))

    assert "011412345678000195" in result.payload
    assert "6006RECIFE" in result.payload


@pytest.mark.asyncio
async def test_checkout_merchant_name_matches_payload(
    checkout_service, pix_config_service
):
    await pix_config_service.update_config(
        UpdatePixConfigDTO(merchant_name="São João & Cia Livraria Universitária")
    )

    result = await checkout_service.create_checkout(Decimal("1"))

    assert result.merchant_name == "SAO JOAO  CIA LIVRARIA UN"
    assert dict(parse_fields(result.payload))["59"] == result.merchant_name


def test_build_payload_response_empty_key():
    result = build_payload_response(BuildPayloadDTO(key="", amount=Decimal("1")))

    assert result.payload == ""
    assert result.configured is False


def test_build_payload_response_phone_key():
    result = build_payload_response(
        BuildPayloadDTO(key="11999998888", key_type=KeyType.PHONE, amount=Decimal("2"))
    )

    assert result.configured is True
    assert "0112+11999998888" in result.payload
