"""Payload generation API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from prometheus_client import Counter

from ...application.dtos import (
    BuildPayloadDTO,
    PayloadResponseDTO,
    VerifyPayloadDTO,
    VerifyPayloadResponseDTO,
)
from ...application.payload_builder import verify_payload
from ...application.use_cases.checkout import build_payload_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pix/payloads", tags=["payloads"])

pix_payloads_total = Counter(
    "pix_payloads_total",
    "Total BR Code payload build requests",
    ["status"],
)


@router.post("/", response_model=PayloadResponseDTO)
async def create_payload(payload_data: BuildPayloadDTO) -> PayloadResponseDTO:
    """Build a BR Code payload from explicit inputs.

    An empty key is not an error: the response carries ``configured=false``
    and an empty payload.
    """
    try:
        result = build_payload_response(payload_data)
    except ValueError as e:
        pix_payloads_total.labels(status="client_error").inc()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Internal server error while building payload: %s", e)
        pix_payloads_total.labels(status="server_error").inc()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while building payload",
        )
    pix_payloads_total.labels(
        status="generated" if result.configured else "not_configured"
    ).inc()
    return result


@router.post("/verify", response_model=VerifyPayloadResponseDTO)
async def verify(data: VerifyPayloadDTO) -> VerifyPayloadResponseDTO:
    """Check that a payload's trailing CRC matches its contents."""
    return VerifyPayloadResponseDTO(valid=verify_payload(data.payload))
