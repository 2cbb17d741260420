"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See coffeetasks.core.lifespan and
coffeetasks.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from coffeetasks.api.v1 import api_router
from coffeetasks.core.config import get_settings
from coffeetasks.core.exception_handlers import register_exception_handlers
from coffeetasks.core.lifespan import create_lifespan
from coffeetasks.core.limiter import limiter
from coffeetasks.middleware import TimeoutMiddleware

API_PREFIX = "/api/v1"
JOBS_PREFIX = f"{API_PREFIX}/jobs"


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Last added = outermost: timeout wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TimeoutMiddleware,
        timeout_seconds=settings.request_timeout_seconds,
        exempt_prefixes=(JOBS_PREFIX,),
    )

    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()
