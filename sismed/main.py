import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from sismed.api.v1.router import api_router
from sismed.core.config import Settings, get_settings
from sismed.core.database import open_store
from sismed.core.errors import Cancelled, SismedError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def sismed_error_handler(request: Request, exc: SismedError) -> JSONResponse:
    if isinstance(exc, Cancelled):
        logger.info("%s %s cancelled by user", request.method, request.url.path)
    else:
        logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application. The store is opened on startup; if it cannot be
    opened, startup fails with StorageUnavailable.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            store = open_store(settings)
        except SismedError:
            logger.error("Startup aborted: store unavailable at %s", settings.database_path)
            raise
        app.state.store = store
        app.state.store_gate = asyncio.Lock()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title="SisMed Clinical Records Backend",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(SismedError, sismed_error_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)

    @app.get("/health", tags=["health"])
    async def root_health() -> dict:
        """
        Global health check endpoint.
        """
        return {"status": "ok"}

    # Mount versioned API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_app()
