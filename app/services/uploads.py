import logging
import os
import shutil
import time
from typing import Optional

from fastapi import HTTPException, UploadFile

from config import UPLOADS_DIR, UPLOADS_URL_PREFIX

logger = logging.getLogger(__name__)


def upload_error(message: str) -> HTTPException:
    return HTTPException(status_code=500, detail=f"File upload error: {message}")


def ensure_upload_dir(directory: Optional[str] = None) -> str:
    directory = directory or UPLOADS_DIR
    os.makedirs(directory, exist_ok=True)
    return directory


def generate_filename(original_filename: str) -> str:
    # The original name is kept verbatim, only the millisecond prefix keeps it unique
    return f"{int(time.time() * 1000)}-{original_filename}"


def upload_url(filename: str) -> str:
    return f"{UPLOADS_URL_PREFIX}/{filename}"


def save_upload(file: UploadFile, directory: Optional[str] = None) -> str:
    """Store an uploaded file and return the generated filename."""
    directory = directory or UPLOADS_DIR
    filename = generate_filename(file.filename)
    try:
        with open(os.path.join(directory, filename), "wb") as buffer:
            shutil.copyfileobj(file.file, buffer)
    except OSError as e:
        logger.error(f"Failed to store upload {file.filename}: {e}")
        raise upload_error(str(e))

    logger.info(f"Stored upload {filename}")
    return filename
