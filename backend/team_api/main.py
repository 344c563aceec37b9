"""ASGI application for the Team Project API."""

from fastapi import FastAPI

from .errors import RawPathMiddleware, register_exception_handlers
from .routers import meta_router
from .schemas import API_MESSAGE
from .version import get_application_version


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application.

    Building the app never binds a socket; see :class:`team_api.server.ApiServer`
    for the listener.
    """
    app = FastAPI(
        title=API_MESSAGE,
        version=get_application_version(),
        description="Root info and health-check endpoints.",
        # Only the two fixed routes may answer 200.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.add_middleware(RawPathMiddleware)
    register_exception_handlers(app)
    app.include_router(meta_router)

    return app


app = create_app()
