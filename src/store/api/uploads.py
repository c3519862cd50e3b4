"""Product image uploads stored on local disk and served under `/uploads`."""

import time
from pathlib import Path

from fastapi import UploadFile
from protean.exceptions import ValidationError

from store.config import get_settings
from store.utils.logging import get_logger

logger = get_logger(__name__)

URL_PREFIX = "/uploads"

_CHUNK_BYTES = 64 * 1024


def _matches_allowed(value: str, allowed: list[str]) -> bool:
    value = (value or "").lower()
    return any(kind in value for kind in allowed)


def validate_image(upload: UploadFile) -> str:
    """Check MIME type and extension. Returns the lower-cased file extension."""
    settings = get_settings()
    extension = Path(upload.filename or "").suffix.lower()

    if not (
        _matches_allowed(upload.content_type, settings.allowed_image_types)
        and _matches_allowed(extension, settings.allowed_image_types)
    ):
        raise ValidationError({"images": ["Error: Images Only! (jpeg, jpg, png, webp)"]})

    return extension


async def read_limited(upload: UploadFile, limit: int) -> bytes:
    """Read an upload in chunks, rejecting it as soon as it passes `limit` bytes."""
    chunks = []
    size = 0
    while True:
        chunk = await upload.read(_CHUNK_BYTES)
        if not chunk:
            break
        size += len(chunk)
        if size > limit:
            raise ValidationError({"images": [f"File {upload.filename} exceeds the upload size limit"]})
        chunks.append(chunk)
    return b"".join(chunks)


def _unique_target(directory: Path, extension: str) -> Path:
    stamp = int(time.time() * 1000)
    target = directory / f"{stamp}{extension}"
    while target.exists():
        stamp += 1
        target = directory / f"{stamp}{extension}"
    return target


async def save_images(uploads: list[UploadFile] | None) -> list[str]:
    """Validate and store uploaded images, returning their public URLs.

    Every file is validated before any is written.
    """
    uploads = [u for u in (uploads or []) if u is not None and u.filename]
    if not uploads:
        return []

    settings = get_settings()
    if len(uploads) > settings.max_images_per_request:
        raise ValidationError({"images": [f"At most {settings.max_images_per_request} images can be uploaded at once"]})

    checked = []
    for upload in uploads:
        extension = validate_image(upload)
        checked.append((extension, await read_limited(upload, settings.max_upload_bytes)))

    directory = Path(settings.upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    urls = []
    for extension, content in checked:
        target = _unique_target(directory, extension)
        target.write_bytes(content)
        urls.append(f"{URL_PREFIX}/{target.name}")

    logger.info("Images stored", count=len(urls))
    return urls


def delete_image(url: str) -> None:
    """Remove a stored image file. URLs outside `/uploads` are ignored."""
    if not url or not url.startswith(f"{URL_PREFIX}/"):
        return
    path = Path(get_settings().upload_dir) / Path(url).name
    if path.exists():
        path.unlink()
        logger.info("Image deleted", url=url)
