import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from wealthtrack.api.analytics import router as analytics_router
from wealthtrack.api.tax import router as tax_router
from wealthtrack.api.users import router as users_router
from wealthtrack.config import APP_VERSION, Settings, settings as default_settings
from wealthtrack.container import Container

logger = logging.getLogger("wealthtrack.api")

# Every verb the routers below expose
API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container = Container()
        container.settings.override(providers.Object(app_settings))
        app.state.container = container
        logger.info("WealthTrack %s starting, CORS origins: %s", APP_VERSION, app_settings.cors_origins)
        yield
        await container.engine().dispose()

    app = FastAPI(title="WealthTrack", version=APP_VERSION, lifespan=lifespan)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
        detail = str(exc) if app_settings.debug else "Internal server error"
        return JSONResponse(status_code=500, content={"detail": detail})

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=API_METHODS,
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(analytics_router)
    app.include_router(tax_router)
    app.include_router(users_router)

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": APP_VERSION}

    return app


app = create_app()
