import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes_products import router as products_router
from app.config import settings
from app.db import Database

log = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the app around ``database``, or one made from settings.

    Also usable as ``uvicorn --factory app.main:create_app``.
    """
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(title="Product Catalog API", version="0.1.0", lifespan=lifespan)
    app.state.database = database

    app.include_router(products_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def payload_error(request: Request, exc: RequestValidationError):
        return _error(400, "Invalid request payload")

    @app.exception_handler(SQLAlchemyError)
    async def storage_error(request: Request, exc: SQLAlchemyError):
        # surface the driver's message as-is
        orig = getattr(exc, "orig", None)
        return _error(500, str(orig) if orig is not None else str(exc))

    return app


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    database = Database(settings.database_url)
    try:
        database.check_connection()
        database.init_db()
    except SQLAlchemyError as e:
        log.critical("Could not set up the database: %s", e)
        sys.exit(1)
    log.info("Listening on %s:%s", settings.APP_HOST, settings.APP_PORT)
    uvicorn.run(create_app(database), host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    main()
