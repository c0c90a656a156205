from typing import Any

from fastapi.responses import JSONResponse

from email_relay.schemas.responses import ErrorOut


def respond(body: Any, status_code: int) -> JSONResponse:
    """Every reply the relay sends goes through here, success or not."""
    return JSONResponse(content=body, status_code=status_code)


def error_response(message: str, status_code: int) -> JSONResponse:
    return respond(ErrorOut(error=message).model_dump(), status_code)
