"""Request-scoped logging context."""

from uuid import uuid4

from fastapi import Request

from infrastructure.config import get_logger, run_with_context
from presentation.api.error_handlers import internal_error_response

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger("http")


async def request_context_middleware(request: Request, call_next):
    """
    Run the request inside its own logging context.

    The request id is taken from the X-Request-ID header when present
    and echoed back on the response.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    context = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
    }
    response = await run_with_context(context, _dispatch, request, call_next)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def _dispatch(request: Request, call_next):
    try:
        response = await call_next(request)
    except Exception as e:
        response = internal_error_response(e)
    logger.info("Request handled", {"status_code": response.status_code})
    return response
