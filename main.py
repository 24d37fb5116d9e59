import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.contacts import router as contacts_router
from api.loans import router as loans_router
from api.users import router as users_router
from config import settings
from database import Database
from logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    await database.init()
    logger.info("Database ready", extra={"database_url": database.engine.url.render_as_string()})
    yield
    await database.dispose()


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Clients read error text from ``message``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


def create_app(database: Optional[Database] = None) -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="User, loan application and contact records API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.database = database or Database(settings.database_url, echo=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    app.include_router(users_router)
    app.include_router(loans_router)
    app.include_router(contacts_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
