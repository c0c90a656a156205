import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from email_relay.application.record_emails import EmailLogRecorder
from email_relay.application.send_email import send_email
from email_relay.domain.ports.email_port import EmailPort
from email_relay.domain.services import authenticate
from email_relay.presentation.dependencies import (
    get_app_settings,
    get_email_port,
    get_log_recorder,
)
from email_relay.presentation.responses import error_response, respond
from email_relay.schemas.responses import ErrorOut, SuccessOut
from email_relay.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Email"])


@router.post(
    "/email",
    response_model=SuccessOut,
    responses={401: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def post_email(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    email_port: Annotated[EmailPort, Depends(get_email_port)],
    log_recorder: Annotated[EmailLogRecorder, Depends(get_log_recorder)],
) -> JSONResponse:
    try:
        # auth runs before the body is read
        rejection = authenticate(settings.token, request.headers.get("Authorization"))
        if rejection is not None:
            if rejection.reason == "missing_token":
                logger.warning("rejecting request: TOKEN is not configured")
            return error_response(rejection.message, rejection.status_code)

        email = await request.json()
        await send_email(email, email_port=email_port, log_recorder=log_recorder)

        return respond(SuccessOut().model_dump(), 200)
    except Exception:
        logger.exception("error processing request", extra={"path": request.url.path})
        return error_response("Internal Server Error", 500)
