"""Use case tests for the admin Pix configuration service."""

import pytest

from pixcode.application.dtos import UpdatePixConfigDTO
from pixcode.domain.entities import KeyType


@pytest.mark.asyncio
async def test_first_read_seeds_initial_config(pix_config_service, pix_config_repository):
    assert await pix_config_repository.get() is None

    config = await pix_config_service.get_config()

    assert config.key == "livraria@libris.com.br"
    assert config.key_type == KeyType.EMAIL
    assert config.updated_at is None
    stored = await pix_config_repository.get()
    assert stored is not None
    assert stored.key == config.key


@pytest.mark.asyncio
async def test_changed_key_type_is_detected(pix_config_service):
    updated = await pix_config_service.update_config(
        UpdatePixConfigDTO(key="123e4567-e89b-12d3-a456-426614174000")
    )

    assert updated.key_type == KeyType.RANDOM_TOKEN
    assert updated.updated_at is not None


@pytest.mark.asyncio
async def test_unrecognized_key_keeps_previous_type(pix_config_service):
    await pix_config_service.update_config(UpdatePixConfigDTO(key="+5511999998888"))

    updated = await pix_config_service.update_config(
        UpdatePixConfigDTO(key="5511999998888x")
    )

    assert updated.key == "5511999998888x"
    assert updated.key_type == KeyType.PHONE


@pytest.mark.asyncio
async def test_explicit_type_wins_over_detection(pix_config_service):
    updated = await pix_config_service.update_config(
        UpdatePixConfigDTO(key="12345678909", key_type=KeyType.PHONE)
    )

    assert updated.key_type == KeyType.PHONE


@pytest.mark.asyncio
async def test_type_only_edit_keeps_key(pix_config_service):
    updated = await pix_config_service.update_config(
        UpdatePixConfigDTO(key_type=KeyType.RANDOM_TOKEN)
    )

    assert updated.key == "livraria@libris.com.br"
    assert updated.key_type == KeyType.RANDOM_TOKEN


@pytest.mark.asyncio
async def test_merchant_fields_are_stored_raw(pix_config_service):
    updated = await pix_config_service.update_config(
        UpdatePixConfigDTO(merchant_name="Livraria São João", merchant_city="Recife")
    )

    assert updated.merchant_name == "Livraria São João"
    assert updated.merchant_city == "Recife"
    again = await pix_config_service.get_config()
    assert again.merchant_name == "Livraria São João"


def test_detect_returns_none_for_unknown_shapes(pix_config_service):
    result = pix_config_service.detect("random text")

    assert result.key == "random text"
    assert result.key_type is None


def test_detect_email(pix_config_service):
    assert pix_config_service.detect("a@b.com").key_type == KeyType.EMAIL
