"""Exception types and the HTTP error handler installed on the app."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ASGIApp, Receive, Scope, Send

from .schemas import ErrorResponse

# Unknown paths raise 404, known paths hit with the wrong method raise 405.
_NOT_FOUND_STATUSES = frozenset(
    {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}
)


class ServerStateError(RuntimeError):
    """Raised when a server handle is asked to start while already running."""


class ServerStartError(RuntimeError):
    """Raised when the serving thread exits or stalls before accepting connections."""


def not_found_response() -> JSONResponse:
    """Return the JSON 404 shared by every unmatched route."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse().model_dump(),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Collapse routing failures into the single 404 body."""
    if exc.status_code in _NOT_FOUND_STATUSES:
        return not_found_response()
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


class RawPathMiddleware:
    """Answer 404 when the path only matches a route after percent-decoding.

    Routes are compared against the path exactly as the client sent it, so
    ``/%68ealth`` is not ``/health``.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            raw_path = scope.get("raw_path")
            # Some clients and test transports leave the query on raw_path.
            if raw_path is not None and raw_path.split(b"?", 1)[0] != scope["path"].encode("utf-8"):
                await not_found_response()(scope, receive, send)
                return
        await self.app(scope, receive, send)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
