"""Use cases for presenting a Pix payment at checkout."""

from __future__ import annotations

from decimal import Decimal

from ...domain.entities import MerchantIdentity, PaymentKey
from ...infrastructure.qr_renderer import qr_image_url
from ..dtos import BuildPayloadDTO, CheckoutPayloadDTO, PayloadResponseDTO
from ..payload_builder import (
    DEFAULT_MERCHANT_NAME,
    MERCHANT_NAME_MAX,
    build_payload,
    format_amount,
)
from ..shared.text import normalize_text
from .pix_config import PixConfigService

NOT_CONFIGURED_MESSAGE = "Payment key not configured, contact the administrator."


def build_payload_response(dto: BuildPayloadDTO) -> PayloadResponseDTO:
    """Build a payload from explicit inputs."""
    payload = build_payload(
        PaymentKey(raw_value=dto.key, type=dto.key_type),
        MerchantIdentity(name=dto.merchant_name, city=dto.merchant_city),
        dto.amount,
    )
    return PayloadResponseDTO(payload=payload, configured=bool(payload))


class CheckoutService:
    """Turns a cart total into the data shown on the payment screen."""

    def __init__(
        self,
        config_service: PixConfigService,
        qr_renderer_url: str,
        qr_size: int = 300,
        qr_margin: int = 10,
    ):
        self.config_service = config_service
        self.qr_renderer_url = qr_renderer_url
        self.qr_size = qr_size
        self.qr_margin = qr_margin

    async def create_checkout(self, total: Decimal) -> CheckoutPayloadDTO:
        """Generate the payload and QR URL for ``total``.

        An unconfigured key yields ``configured=False`` and no QR URL; the
        view shows ``message`` instead of a code.
        """
        config = await self.config_service.load()
        payload = build_payload(config.payment_key(), config.merchant(), total)
        # same text the bank app shows from field 59
        merchant_name = normalize_text(
            config.merchant_name or DEFAULT_MERCHANT_NAME, MERCHANT_NAME_MAX
        )

        if not payload:
            return CheckoutPayloadDTO(
                configured=False,
                payload="",
                qr_image_url=None,
                amount=format_amount(total),
                merchant_name=merchant_name,
                message=NOT_CONFIGURED_MESSAGE,
            )

        return CheckoutPayloadDTO(
            configured=True,
            payload=payload,
            qr_image_url=qr_image_url(
                payload, self.qr_renderer_url, self.qr_size, self.qr_margin
            ),
            amount=format_amount(total),
            merchant_name=merchant_name,
        )
