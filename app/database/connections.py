from contextlib import asynccontextmanager
import logging
from config import DATA_FILE, PORT, UPLOADS_DIR
from app.services.uploads import ensure_upload_dir

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    """Async context manager for the application lifecycle"""
    ensure_upload_dir()
    logger.info(f"✅ Car store at {DATA_FILE}, uploads in {UPLOADS_DIR}")
    logger.info(f"🚀 Car API listening on port {PORT}")

    yield  # FastAPI app runs here

    logger.info("🚪 Shutting down FastAPI app.")
