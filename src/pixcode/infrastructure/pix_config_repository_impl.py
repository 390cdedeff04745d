"""Pix configuration repository over a storage abstraction."""

from __future__ import annotations

from typing import Optional

from ..domain.entities import PixConfig
from ..domain.pix_config_repository import PixConfigRepository
from .storage import KeyValueStore

PIX_CONFIG_KEY = "pix:config"


class PixConfigRepositoryImpl(PixConfigRepository):
    """Pix configuration repository using a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get(self) -> Optional[PixConfig]:
        data = await self.store.get(PIX_CONFIG_KEY)
        if not data:
            return None
        return PixConfig.model_validate_json(data)

    async def save(self, config: PixConfig) -> PixConfig:
        await self.store.set(PIX_CONFIG_KEY, config.model_dump_json())
        return config
