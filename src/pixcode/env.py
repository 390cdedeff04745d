from __future__ import annotations

import os

from pydantic import BaseModel

from .domain.entities import KeyType


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_workers: int = 1
    api_cors_origins: list[str] = ["*"]

    # Application settings
    app_name: str = "PixCode"
    app_version: str = "1.0.0"

    # Initial receiving account, editable at runtime through the config API
    pix_key: str = ""
    pix_key_type: KeyType = KeyType.EMAIL
    merchant_name: str = "Libris Store"
    merchant_city: str = "Sao Paulo"

    # External QR image renderer
    qr_renderer_url: str = "https://api.qrserver.com/v1/create-qr-code/"
    qr_size: int = 300
    qr_margin: int = 10


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        api_host=os.environ.get("PIX_API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("PIX_API_PORT", "8000")),
        api_debug=os.environ.get("PIX_API_DEBUG", "false").lower() == "true",
        api_workers=int(os.environ.get("PIX_API_WORKERS", "1")),
        api_cors_origins=os.environ.get("PIX_API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("PIX_APP_NAME", "PixCode"),
        app_version=os.environ.get("PIX_APP_VERSION", "1.0.0"),
        pix_key=os.environ.get("PIX_KEY", ""),
        pix_key_type=os.environ.get("PIX_KEY_TYPE", KeyType.EMAIL.value),
        merchant_name=os.environ.get("PIX_MERCHANT_NAME", "Libris Store"),
        merchant_city=os.environ.get("PIX_MERCHANT_CITY", "Sao Paulo"),
        qr_renderer_url=os.environ.get(
            "PIX_QR_RENDERER_URL", "https://api.qrserver.com/v1/create-qr-code/"
        ),
        qr_size=int(os.environ.get("PIX_QR_SIZE", "300")),
        qr_margin=int(os.environ.get("PIX_QR_MARGIN", "10")),
    )
