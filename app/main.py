# app/main.py
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.responses import http_exception_handler, validation_exception_handler
from app.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from app.models import category as _category_models  # noqa: F401
from app.models import product as _product_models  # noqa: F401


# Routers
from app.routers.categories import router as categories_router
from app.routers.products import router as products_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.
      - Make sure the upload directory exists.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("Startup: connecting to catalog database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise

    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    logger.info(f"Startup: serving uploads from {settings.UPLOAD_DIR}")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME or "Eshop Catalog API",
    version="0.1.0",
    lifespan=lifespan,
)

# Every HTTP error is returned as {"success": false, "message": ...}
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Uploaded images, e.g. /public/uploads/<filename>
app.mount(
    settings.UPLOAD_URL_PATH,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)

# Versioned API prefix, e.g. /api/v1
app.include_router(products_router, prefix=settings.API_V1_STR)
app.include_router(categories_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "eshop-catalog"}
