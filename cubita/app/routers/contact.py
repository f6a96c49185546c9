from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from cubita.app.deps import get_inquiry_dispatcher
from cubita.app.schemas.inquiry import ErrorResponse, InquiryResponse
from cubita.app.services.inquiry_service import InquiryDispatcher, validate_inquiry

router = APIRouter(prefix="/api", tags=["contact"])

INQUIRY_PATH = "/contact"


@router.post(
    INQUIRY_PATH,
    response_model=InquiryResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_inquiry(
    body: dict[str, Any] = Body(...),
    dispatcher: InquiryDispatcher = Depends(get_inquiry_dispatcher),
) -> InquiryResponse:
    """
    Receive a booking inquiry from the contact form.

    Sends the agency notification, then the confirmation to the requester.
    Validation errors answer 422 before anything is sent; a mail failure
    answers 500 with a generic message.
    """
    inquiry = validate_inquiry(body)
    message = await dispatcher.submit(inquiry)
    return InquiryResponse(message=message)
