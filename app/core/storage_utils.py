# app/core/storage_utils.py
import logging
import re
import shutil
import uuid
from functools import lru_cache
from pathlib import Path
from typing import Callable

from fastapi import Request, UploadFile, status

from app.core.config import get_settings
from app.core.responses import ApiError

logger = logging.getLogger(__name__)

# Accepted upload content types -> extension written to disk
FILE_TYPE_MAP: dict[str, str] = {
    "image/png": "png",
    "image/jpeg": "jpeg",
    "image/jpg": "jpg",
}


def generate_filename(original_name: str, ext: str) -> str:
    """
    Generate a unique filename that still hints at the original upload.

    Args:
        original_name: client-supplied filename (may be empty)
        ext: File extension without dot (e.g. "png", "jpeg")

    Returns:
        A filename like "red-shirt-<uuid4 hex>.png"
    """
    stem = Path(original_name or "").stem
    stem = re.sub(r"[^A-Za-z0-9_-]+", "-", stem).strip("-") or "image"
    return f"{stem}-{uuid.uuid4().hex}.{ext}"


class UploadStorage:
    """
    Disk storage for uploaded product images.

    Injected into routes through `get_upload_storage`, so tests and
    alternative deployments can swap the destination or naming strategy.

    Responsibilities:
      - validate content type against FILE_TYPE_MAP
      - write the upload under `destination` with a generated name
      - build the public URL from the serving request
    """

    def __init__(
        self,
        destination: str | Path,
        url_path: str = "/public/uploads",
        filename_strategy: Callable[[str, str], str] = generate_filename,
    ):
        self.destination = Path(destination)
        self.url_path = "/" + url_path.strip("/")
        self.filename_strategy = filename_strategy

    @staticmethod
    def extension_for(content_type: str | None) -> str:
        if content_type not in FILE_TYPE_MAP:
            raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid image type")
        return FILE_TYPE_MAP[content_type]

    def save(self, upload: UploadFile) -> str:
        """
        Write an uploaded file to disk.

        Returns:
            The generated filename (relative to `destination`).

        Raises:
            ApiError(400): if the content type is not an accepted image type.
        """
        ext = self.extension_for(upload.content_type)
        filename = self.filename_strategy(upload.filename or "", ext)

        self.destination.mkdir(parents=True, exist_ok=True)
        with (self.destination / filename).open("wb") as out:
            shutil.copyfileobj(upload.file, out)

        logger.info("Stored upload %s as %s", upload.filename, filename)
        return filename

    def base_url(self, request: Request) -> str:
        """
        Absolute URL prefix for stored files, e.g.
            http://localhost:8000/public/uploads/
        """
        host = request.headers.get("host") or request.url.netloc
        return f"{request.url.scheme}://{host}{self.url_path}/"

    def public_url(self, request: Request, filename: str) -> str:
        return f"{self.base_url(request)}{filename}"


@lru_cache
def get_upload_storage() -> UploadStorage:
    """
    FastAPI dependency returning the storage configured from settings.
    Override via `app.dependency_overrides` to redirect uploads.
    """
    settings = get_settings()
    return UploadStorage(settings.UPLOAD_DIR, settings.UPLOAD_URL_PATH)
