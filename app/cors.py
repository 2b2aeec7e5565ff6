# =============================================================================
# app/cors.py - Cross-Origin Headers and Method Guard
# =============================================================================
# Every response from the intake API carries the same permissive CORS
# headers. Preflight requests are answered here for any path, and any
# method other than POST is rejected before routing.
# =============================================================================

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}


async def cors_method_guard(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    HTTP middleware applied to every request.

    - OPTIONS: 204 with the CORS headers and no body
    - anything but POST: 405 JSON error
    - POST: passed through to the routers
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    if request.method != "POST":
        logger.debug(f"Rejected {request.method} {request.url.path}")
        return JSONResponse(
            status_code=405,
            content={"error": "Method not allowed"},
            headers=CORS_HEADERS,
        )

    return await call_next(request)
