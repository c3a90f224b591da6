"""
Local storage for uploaded resume files.
"""
import logging
import os
import re
import uuid
from typing import Tuple

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


def _safe_filename(original_name: str) -> str:
    safe = (original_name or "resume").replace(" ", "_").replace("/", "_").replace("\\", "_")
    safe = re.sub(r"[^\w\-_\.]", "", safe)
    safe = re.sub(r"_+", "_", safe)
    return safe[:150] or "resume"


async def save_upload(upload_dir: str, user_id: int, original_name: str, data: bytes) -> Tuple[str, str]:
    """
    Write an uploaded file to upload_dir.

    Returns:
        (stored filename, full path)
    """
    os.makedirs(upload_dir, exist_ok=True)
    unique_id = uuid.uuid4().hex[:12]
    filename = f"resume-user_{user_id}_{unique_id}_{_safe_filename(original_name)}"
    path = os.path.join(upload_dir, filename)

    async with aiofiles.open(path, "wb") as f:
        await f.write(data)

    logger.info("Resume saved to local storage: %s", path)
    return filename, path


async def read_upload(path: str) -> bytes:
    async with aiofiles.open(path, "rb") as f:
        return await f.read()


async def delete_upload(path: str) -> bool:
    """Remove a stored file; a missing file is logged, not raised."""
    try:
        await aiofiles.os.remove(path)
        return True
    except FileNotFoundError:
        logger.warning("Resume file already gone: %s", path)
    except OSError as e:
        logger.error("Error deleting resume file %s: %s", path, e)
    return False
