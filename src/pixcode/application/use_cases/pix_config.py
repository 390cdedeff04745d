"""Use cases for the admin Pix configuration."""

from __future__ import annotations

import logging
from typing import Optional

from ...domain.entities import KeyType, PixConfig
from ...domain.pix_config_repository import PixConfigRepository
from ..dtos import (
    DetectKeyTypeResponseDTO,
    PixConfigResponseDTO,
    UpdatePixConfigDTO,
)
from ..shared.keys import detect_key_type

logger = logging.getLogger(__name__)


class PixConfigService:
    """Service for reading and editing the receiving account."""

    def __init__(self, repository: PixConfigRepository, initial: PixConfig):
        self.repository = repository
        self.initial = initial

    async def load(self) -> PixConfig:
        """Return the stored configuration, seeding it on first access."""
        config = await self.repository.get()
        if config is None:
            config = await self.repository.save(self.initial.model_copy())
        return config

    async def get_config(self) -> PixConfigResponseDTO:
        """Get the current configuration."""
        config = await self.load()
        return PixConfigResponseDTO(**config.model_dump())

    async def update_config(self, dto: UpdatePixConfigDTO) -> PixConfigResponseDTO:
        """Update the configuration.

        An explicit ``key_type`` always wins. Otherwise a changed key is run
        through detection and the type only changes when the key's shape is
        recognized.
        """
        config = await self.load()

        key_type: Optional[KeyType] = dto.key_type
        if key_type is None and dto.key is not None and dto.key != config.key:
            key_type = detect_key_type(dto.key)
            if key_type is None:
                logger.info(
                    "Key type not recognized; keeping %s", config.key_type.value
                )

        config.update_details(
            key=dto.key,
            key_type=key_type,
            merchant_name=dto.merchant_name,
            merchant_city=dto.merchant_city,
        )
        updated = await self.repository.save(config)
        logger.info("Pix configuration updated (key type %s)", updated.key_type.value)
        return PixConfigResponseDTO(**updated.model_dump())

    def detect(self, raw: str) -> DetectKeyTypeResponseDTO:
        """Advisory type lookup for a key being typed."""
        return DetectKeyTypeResponseDTO(key=raw, key_type=detect_key_type(raw))
