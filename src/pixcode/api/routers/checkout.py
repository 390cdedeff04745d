"""Checkout API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from prometheus_client import Counter

from ...application.dtos import CheckoutPayloadDTO, CreateCheckoutDTO
from ...application.use_cases.checkout import CheckoutService
from ..dependencies import get_checkout_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["checkout"])

checkouts_total = Counter(
    "pix_checkouts_total",
    "Total checkout payment screens generated",
    ["status"],
)


@router.post("/", response_model=CheckoutPayloadDTO)
async def create_checkout(
    checkout_data: CreateCheckoutDTO,
    checkout_service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutPayloadDTO:
    """Return the Pix payload and QR image URL for a cart total."""
    result = await checkout_service.create_checkout(checkout_data.total)
    if not result.configured:
        logger.warning("Checkout requested with no payment key configured")
        checkouts_total.labels(status="not_configured").inc()
    else:
        checkouts_total.labels(status="generated").inc()
    return result
