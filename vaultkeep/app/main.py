# vaultkeep/app/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from vaultkeep.app.api.v1.router import api_router
from vaultkeep.app.core.config import Settings, settings
from vaultkeep.app.core.errors import Unauthorized, VaultError
from vaultkeep.app.core.logging import configure_logging
from vaultkeep.app.db.session import Database
from vaultkeep.app.schemas.vault import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, kind: str, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=kind, message=message).model_dump(),
        headers=headers,
    )


async def vault_error_handler(request: Request, exc: VaultError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return _error_response(exc.status_code, exc.kind, exc.message, headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({
        str(error["loc"][-1]) for error in exc.errors() if error.get("loc")
    })
    message = "Validation failed"
    if fields:
        message = f"Validation failed: {', '.join(fields)}"
    return _error_response(400, "ValidationError", message)


def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Build the API application.

    ``database`` is opened and its tables created on startup, then
    closed on shutdown. Without one, a database is built from settings.
    """
    app_settings = app_settings or settings
    database = (database or Database.from_settings(app_settings)).open()

    # --- LIFESPAN: create tables on startup, dispose engine on shutdown ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(app_settings.LOG_LEVEL)
        await database.create_all()
        logger.info("%s started (%s)", app_settings.PROJECT_NAME, app_settings.ENVIRONMENT)
        yield
        await database.close()
        logger.info("%s stopped", app_settings.PROJECT_NAME)

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.PROJECT_VERSION,
        openapi_url=f"{app_settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.settings = app_settings

    if app_settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.BACKEND_CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type", "Authorization"],
        )

    app.add_exception_handler(VaultError, vault_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router, prefix=app_settings.API_V1_STR)

    @app.get("/")
    def root():
        return {"message": f"Welcome to {app_settings.PROJECT_NAME} API"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
