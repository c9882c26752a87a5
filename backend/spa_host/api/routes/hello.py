"""Hello Route — the single JSON endpoint.

Invariants:
    - GET /api/v1/hello always returns 200 with the JSON string "hello!"
    - HEAD answers with the same headers and no body (never the SPA fallback)
    - Query string and request headers are ignored
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

HELLO_MESSAGE = "hello!"

router = APIRouter(prefix="/api/v1", tags=["hello"])


@router.api_route(
    "/hello", methods=["GET", "HEAD"], status_code=status.HTTP_200_OK,
)
async def hello(request: Request) -> JSONResponse:
    response = JSONResponse(HELLO_MESSAGE)
    if request.method == "HEAD":
        # content-length stays that of the GET body
        response.body = b""
    return response
