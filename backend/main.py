import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

import settings
from db.session import engine
from routers.regions import router as regions_router
from routers.types import router as types_router
from routers.vehicle import router as vehicle_router
from routers.years import router as years_router
from services.errors import NotFoundError, StoreError, TemplateError

# --------------------------------------------------
# LOGGING
# --------------------------------------------------
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# --------------------------------------------------
# APP
# --------------------------------------------------
app = FastAPI(
    title="Electric Vehicle Catalog",
    version="1.0.0",
)


# --------------------------------------------------
# DB CHECK
# --------------------------------------------------
@app.on_event("startup")
def _check_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Successfully connected to: database")
    except SQLAlchemyError as exc:
        logger.error("Error connecting to database: %s", exc)


# --------------------------------------------------
# ERRORS
# --------------------------------------------------
@app.exception_handler(StoreError)
def _store_error(request: Request, exc: StoreError):
    return PlainTextResponse(f"SQL Error: {exc}", status_code=500)


@app.exception_handler(TemplateError)
def _template_error(request: Request, exc: TemplateError):
    logger.error("%s template error: %s", request.url.path, exc)
    return PlainTextResponse("Server Error", status_code=500)


@app.exception_handler(NotFoundError)
def _not_found(request: Request, exc: NotFoundError):
    logger.info("404 %s: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=404)


@app.exception_handler(StarletteHTTPException)
def _http_error(request: Request, exc: StarletteHTTPException):
    # unmatched routes and missing static files both land here
    if exc.status_code == 404:
        # report the path as sent, percent-encoding included
        raw_path = request.scope.get("raw_path")
        if raw_path:
            url = raw_path.decode("latin-1").split("?", 1)[0]
        else:
            url = request.url.path
        if request.url.query:
            url += "?" + request.url.query
        return PlainTextResponse(f"404: Route {url} not found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# --------------------------------------------------
# HEALTH CHECK
# --------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


# --------------------------------------------------
# ROUTERS
# --------------------------------------------------
# First match wins: literal paths are declared ahead of parameterized ones
# inside each router, and the static mount goes last.
ROUTERS = [
    types_router,
    regions_router,
    years_router,
    vehicle_router,
]

for router in ROUTERS:
    app.include_router(router)

if settings.PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR), name="public")
else:
    logger.warning("Public directory %s not found; static files disabled", settings.PUBLIC_DIR)


if __name__ == "__main__":
    logger.info("Now listening on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
