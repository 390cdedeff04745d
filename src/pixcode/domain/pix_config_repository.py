"""Pix configuration repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .entities import PixConfig


class PixConfigRepository(ABC):
    """Abstract repository for the single admin Pix configuration."""

    @abstractmethod
    async def get(self) -> Optional[PixConfig]:
        """Get the stored configuration, if any."""
        pass

    @abstractmethod
    async def save(self, config: PixConfig) -> PixConfig:
        """Create or replace the stored configuration."""
        pass
