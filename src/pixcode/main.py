from __future__ import annotations

import uvicorn

from .env import get_settings


def main() -> None:
    """Main entry point for the Pix payload service."""

    settings = get_settings()

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"API will be available at: http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation: http://{settings.api_host}:{settings.api_port}/docs")
    if not settings.pix_key:
        print("PIX_KEY is not set; checkout stays unconfigured until an admin sets it.")

    # Uvicorn doesn't support multiple workers with reload.
    reload = settings.api_debug
    workers = 1 if reload else settings.api_workers

    uvicorn.run(
        "pixcode.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        workers=workers,
        log_level="info",
    )


if __name__ == "__main__":
    main()
