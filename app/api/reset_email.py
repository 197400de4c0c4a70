"""
Stateless reset-email endpoint.

Accepts ``{email, code}`` and sends the reset-code email.  Open to any
origin; answers the CORS preflight itself.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from app.api.dependencies import get_mailer
from app.core.errors import DeliveryError
from app.schemas.password_reset import SendResetEmailRequest
from app.services.mailer import EmailSender, build_reset_email

LOGGER = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _json(status_code: int, content: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


@router.api_route("/send-reset-email",
                  methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
                  summary="Send a password reset code email.",
                  include_in_schema=True)
async def send_reset_email(request: Request, mailer: EmailSender = Depends(get_mailer)):
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    if request.method != "POST":
        return _json(status.HTTP_405_METHOD_NOT_ALLOWED, { "error": "Method not allowed" })

    try:
        data = SendResetEmailRequest.model_validate(await request.json())
    except (ValueError, PydanticValidationError):
        data = SendResetEmailRequest()

    if not data.email or not data.code:
        return _json(status.HTTP_400_BAD_REQUEST, { "error": "이메일과 인증 코드가 필요합니다." })

    subject, html_body = build_reset_email(data.code)
    try:
        message_id = await run_in_threadpool(mailer.send, data.email, subject, html_body)
    except DeliveryError:
        return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, { "error": "이메일 발송에 실패했습니다." })

    LOGGER.info("Reset email sent to %s (message %s)", data.email, message_id)
    return _json(status.HTTP_200_OK, { "success": True, "messageId": message_id })
