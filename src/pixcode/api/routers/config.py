"""Admin Pix configuration API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...application.dtos import (
    DetectKeyTypeDTO,
    DetectKeyTypeResponseDTO,
    PixConfigResponseDTO,
    UpdatePixConfigDTO,
)
from ...application.use_cases.pix_config import PixConfigService
from ..dependencies import get_pix_config_service

router = APIRouter(prefix="/pix", tags=["config"])


@router.get("/config", response_model=PixConfigResponseDTO)
async def get_config(
    config_service: PixConfigService = Depends(get_pix_config_service),
) -> PixConfigResponseDTO:
    """Get the receiving account configuration."""
    return await config_service.get_config()


@router.put("/config", response_model=PixConfigResponseDTO)
async def update_config(
    config_data: UpdatePixConfigDTO,
    config_service: PixConfigService = Depends(get_pix_config_service),
) -> PixConfigResponseDTO:
    """Update the receiving account configuration."""
    return await config_service.update_config(config_data)


@router.post("/key-type", response_model=DetectKeyTypeResponseDTO)
async def detect_key_type(
    data: DetectKeyTypeDTO,
    config_service: PixConfigService = Depends(get_pix_config_service),
) -> DetectKeyTypeResponseDTO:
    """Guess a key's type from its shape; ``key_type`` is null when unknown."""
    return config_service.detect(data.key)
