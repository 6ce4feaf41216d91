"""
Claro Inventory - FastAPI ASGI Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from claro_inventory import __version__
from claro_inventory.api.v1.router import api_router
from claro_inventory.config import get_settings
from claro_inventory.core.responses import error_response
from claro_inventory.db.session import InventorySession, build_session

logger = logging.getLogger(__name__)


def create_app(inventory: InventorySession | None = None) -> FastAPI:
    """Build the app. A prepared session can be passed in; otherwise one is seeded at startup."""
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: logging and the in-memory inventory session."""
        logging.basicConfig(
            level=settings.LOG_LEVEL.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        app.state.inventory = inventory or build_session(settings)
        logger.info("Claro Inventory started (%s)", settings.ENVIRONMENT)
        yield
        logger.info("Claro Inventory shutting down")

    app = FastAPI(
        title="Claro Inventory",
        description="Serialized equipment, RMA and materials console",
        version=__version__,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        field_errors = [
            {"field": ".".join(str(p) for p in err["loc"][1:]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content=error_response("VALIDATION_ERROR", "Invalid request", field_errors),
        )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "claro-inventory"}

    return app


app = create_app()
