from fastapi import APIRouter
from fastapi.responses import JSONResponse

from email_relay.presentation.responses import error_response

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


# Must be included last: it matches every path, and routes are tried in order.
@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def not_found(path: str) -> JSONResponse:
    return error_response("Not Found", 404)
