from __future__ import annotations

from urllib.parse import quote

# Same set left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def qr_image_url(payload: str, base_url: str, size: int = 300, margin: int = 10) -> str:
    """URL of an external renderer that draws ``payload`` as a QR image."""
    data = quote(payload, safe=_URI_COMPONENT_SAFE)
    return f"{base_url}?size={size}x{size}&margin={margin}&data={data}"
