"""Pytest fixtures for use case tests."""

from __future__ import annotations

from typing import AsyncGenerator

import pytest

from pixcode.application.use_cases.checkout import CheckoutService
from pixcode.application.use_cases.pix_config import PixConfigService
from pixcode.domain.entities import KeyType, PixConfig
from pixcode.infrastructure.pix_config_repository_impl import PixConfigRepositoryImpl
from pixcode.infrastructure.storage import InMemoryKeyValueStore

QR_RENDERER_URL = "https://qr.example.test/render"


@pytest.fixture
async def store() -> AsyncGenerator[InMemoryKeyValueStore, None]:
    """Create an in-memory key-value store."""
    store = InMemoryKeyValueStore()
    yield store
    store.clear()


@pytest.fixture
def pix_config_repository(store: InMemoryKeyValueStore) -> PixConfigRepositoryImpl:
    return PixConfigRepositoryImpl(store)


@pytest.fixture
def initial_config() -> PixConfig:
    return PixConfig(
        key="livraria@libris.com.br",
        key_type=KeyType.EMAIL,
        merchant_name="Libris Store",
        merchant_city="Sao Paulo",
    )


@pytest.fixture
def pix_config_service(
    pix_config_repository: PixConfigRepositoryImpl, initial_config: PixConfig
) -> PixConfigService:
    return PixConfigService(pix_config_repository, initial_config)


@pytest.fixture
def checkout_service(pix_config_service: PixConfigService) -> CheckoutService:
    return CheckoutService(
        config_service=pix_config_service,
        qr_renderer_url=QR_RENDERER_URL,
        qr_size=250,
        qr_margin=4,
    )
