# app/main.py
from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlmodel import Session

from app.core.config import get_settings
from app.core.errors import PersistenceError, ValidationError
from app.database import create_db_and_tables, engine

# Import models so SQLModel metadata is populated before create_all()
from app.models import user as _user_models  # noqa: F401
from app.models import product as _product_models  # noqa: F401
from app.models import order as _order_models  # noqa: F401
from app.models import stats as _stats_models  # noqa: F401

from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from app.services.seed_service import SeedService

# Routers
from app.routers.users import router as users_router
from app.routers.products import router as products_router
from app.routers.products import categories_router
from app.routers.orders import router as orders_router
from app.routers.orders import receipts_router
from app.routers.stats import router as stats_router
from app.routers.dashboard import router as dashboard_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")

IMAGES_DIR = "images"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.
      - Seed default categories, users and menu (SEED_DEFAULTS).

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("🔄 Startup: Connecting to database...")
    try:
        create_db_and_tables()
        logger.info("✅ Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"❌ Startup: DB connection FAILED: {e}")
        raise

    if settings.SEED_DEFAULTS:
        with Session(engine) as session:
            SeedService(ProductRepository(), UserRepository()).seed_defaults(session)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Domain errors ---


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": str(exc)},
    )


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error(f"Persistence error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": str(exc)},
    )


# JSON API under /api; auth and dashboards at the root like the till expects
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(categories_router, prefix=settings.API_PREFIX)
app.include_router(orders_router, prefix=settings.API_PREFIX)
app.include_router(stats_router, prefix=settings.API_PREFIX)
app.include_router(users_router)
app.include_router(receipts_router)
app.include_router(dashboard_router)

if os.path.isdir(IMAGES_DIR):
    app.mount("/images", StaticFiles(directory=IMAGES_DIR), name="images")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "pos-backend"}
