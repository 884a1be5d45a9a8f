"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from user_api.presentation.api import users
from user_api.presentation.dependencies import dispose_database_engine, get_database_engine
from user_api.presentation.exception_handlers import (
    application_error_handler,
    domain_exception_handler,
    validation_error_handler,
    database_error_handler,
    generic_exception_handler,
)
from user_api.presentation.error_schemas import ValidationErrorResponse
from user_api.application.exceptions import ApplicationError
from user_api.domain.exceptions import DomainException
from user_api.infrastructure.config.logging_config import configure_logging
from user_api.infrastructure.config.settings import Settings, get_settings
from user_api.infrastructure.persistence.database import create_tables


_settings = get_settings()
configure_logging(_settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("Starting %s with %s user store", settings.app_name, settings.user_store)
    if settings.uses_database and settings.db_create_tables:
        await create_tables(get_database_engine(settings))
    yield
    await dispose_database_engine()


app = FastAPI(
    title=_settings.app_name,
    description="CRUD endpoints for the User resource",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# - ApplicationError: not found, conflict, invalid input
# - DomainException: entity invariant violations
# - RequestValidationError: unbindable path/query/body
# - SQLAlchemyError: database failures
# - Exception: everything else
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(users.router, prefix="/api")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }


@app.get("/config")
async def show_config(settings: Settings = Depends(get_settings)) -> dict[str, str | bool | list[str]]:
    """Show current configuration (non-sensitive data only)."""
    return {
        "environment": settings.environment,
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "debug": settings.debug,
        "user_store": settings.user_store,
        "cors_origins": settings.cors_origins_list,
    }


def custom_openapi():
    """
    Customize OpenAPI schema to use our custom validation error format.

    Replaces the default 422 HTTPValidationError documentation with the 400
    ValidationErrorResponse actually returned by validation_error_handler.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )
    for name, definition in schemas["ValidationErrorResponse"].pop("$defs", {}).items():
        schemas.setdefault(name, definition)

    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "responses" in operation:
                if "422" in operation["responses"]:
                    del operation["responses"]["422"]
                    operation["responses"]["400"] = {
                        "description": "Validation Error",
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                            }
                        },
                    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi  # type: ignore[method-assign]
