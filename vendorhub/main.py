import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import configure_mappers
from starlette.exceptions import HTTPException as StarletteHTTPException

import vendorhub.models  # noqa: F401  registers all models via models/__init__.py
from vendorhub.api import (
    admin_routes,
    analytics_routes,
    bill_routes,
    customer_routes,
    expense_routes,
    inventory_routes,
    loyalty_routes,
    menu_routes,
    messaging_routes,
    notification_routes,
    profile_routes,
    public_routes,
    staff_routes,
    table_routes,
)
from vendorhub.auth.routes import auth_backend, fastapi_users
from vendorhub.core.config import settings
from vendorhub.core.errors import AppError, ForbiddenError, NotFoundError, UnauthorizedError, ValidationError
from vendorhub.db import create_db_and_tables
from vendorhub.middleware.request_logging import RequestLoggingMiddleware
from vendorhub.schemas.base import ErrorRead
from vendorhub.schemas.user import UserCreate, UserRead

configure_mappers()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

_HTTP_CODES = {
    400: ValidationError.code,
    401: UnauthorizedError.code,
    403: ForbiddenError.code,
    404: NotFoundError.code,
    405: "METHOD_NOT_ALLOWED",
}

ERROR_RESPONSES = {status: {"model": ErrorRead} for status in (400, 401, 403, 404)}


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        await create_db_and_tables()
    log.info("VendorHub API started")
    yield


app = FastAPI(title="VendorHub API", version="1.0.0", lifespan=lifespan, responses=ERROR_RESPONSES)


# Swagger Bearer token support for the "Authorize" button
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="VendorHub API",
        version="1.0.0",
        description="Multi-tenant backend for small businesses: billing, customers, menu and more.",
        routes=app.routes,
    )
    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "BearerAuth": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}
    }
    for path in openapi_schema["paths"].values():
        for operation in path.values():
            operation["security"] = [{"BearerAuth": []}]
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


# ---------- Error handlers ----------
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def _field_of(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    details = [{"field": _field_of(e.get("loc", ())), "message": e.get("msg"), "type": e.get("type")} for e in errors]
    first = details[0] if details else {"field": None, "message": "Invalid request"}
    payload = {"message": first["message"], "code": "VALIDATION_ERROR", "details": details}
    if first["field"]:
        payload["field"] = first["field"]
    return JSONResponse(status_code=400, content=payload)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    payload = {
        "message": detail if isinstance(detail, str) else "Request failed",
        "code": _HTTP_CODES.get(exc.status_code, "HTTP_ERROR"),
    }
    if not isinstance(detail, str) and detail is not None:
        payload["details"] = detail
    return JSONResponse(status_code=exc.status_code, content=payload, headers=getattr(exc, "headers", None))


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    log.exception("database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error", "code": "INTERNAL_ERROR"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error", "code": "INTERNAL_ERROR"})


# ---------- Middleware ----------
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# ---------- Auth routes ----------
app.include_router(
    fastapi_users.get_auth_router(auth_backend),
    prefix="/api/auth/jwt",
    tags=["auth"],
)
app.include_router(
    fastapi_users.get_register_router(UserRead, UserCreate),
    prefix="/api/auth",
    tags=["auth"],
)


# ---------- Core app routers ----------
app.include_router(public_routes.router)
app.include_router(profile_routes.router)
app.include_router(customer_routes.router)
app.include_router(menu_routes.router)
app.include_router(inventory_routes.router)
app.include_router(bill_routes.router)
app.include_router(table_routes.tables_router)
app.include_router(table_routes.orders_router)
app.include_router(loyalty_routes.rewards_router)
app.include_router(loyalty_routes.points_router)
app.include_router(notification_routes.router)
app.include_router(messaging_routes.messages_router)
app.include_router(messaging_routes.automations_router)
app.include_router(staff_routes.staff_router)
app.include_router(staff_routes.attendance_router)
app.include_router(expense_routes.summary_router)
app.include_router(expense_routes.expenses_router)
app.include_router(analytics_routes.router)
app.include_router(admin_routes.router)
