from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import dispose_engine, init_db
from .exceptions import register_exception_handlers
from .routers import calculations, cnc, shipping

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("cnc_tools")

app = FastAPI(
    title=settings.APP_NAME,
    description="Machine table and enclosure bill-of-materials calculator and box shipping packer",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# API routes
app.include_router(cnc.router, prefix="/api")
app.include_router(calculations.router, prefix="/api")
app.include_router(shipping.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "cnc-tools"}


@app.on_event("startup")
def create_tables():
    """Create tables for saved calculations and shipping items on first run."""
    init_db()
    logger.info("Database ready")


@app.on_event("shutdown")
def close_database():
    dispose_engine()
