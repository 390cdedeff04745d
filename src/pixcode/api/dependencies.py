"""FastAPI dependencies for the Pix API."""

from __future__ import annotations

from fastapi import Depends

from ..application.use_cases.checkout import CheckoutService
from ..application.use_cases.pix_config import PixConfigService
from ..domain.entities import PixConfig
from ..domain.pix_config_repository import PixConfigRepository
from ..env import Settings, get_settings
from ..infrastructure.pix_config_repository_impl import PixConfigRepositoryImpl
from ..infrastructure.storage import InMemoryKeyValueStore, KeyValueStore

_store = InMemoryKeyValueStore()


def get_key_value_store() -> KeyValueStore:
    """Get the process-wide key-value store."""
    return _store


def get_pix_config_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> PixConfigRepository:
    """Get Pix configuration repository."""
    return PixConfigRepositoryImpl(store)


def get_pix_config_service(
    repository: PixConfigRepository = Depends(get_pix_config_repository),
    settings: Settings = Depends(get_settings),
) -> PixConfigService:
    """Get Pix configuration service seeded from settings."""
    initial = PixConfig(
        key=settings.pix_key,
        key_type=settings.pix_key_type,
        merchant_name=settings.merchant_name,
        merchant_city=settings.merchant_city,
    )
    return PixConfigService(repository, initial)


def get_checkout_service(
    config_service: PixConfigService = Depends(get_pix_config_service),
    settings: Settings = Depends(get_settings),
) -> CheckoutService:
    """Get checkout service."""
    return CheckoutService(
        config_service=config_service,
        qr_renderer_url=settings.qr_renderer_url,
        qr_size=settings.qr_size,
        qr_margin=settings.qr_margin,
    )
