from pathlib import Path

from fastapi import HTTPException, UploadFile, status

from line_talk_viewer.core.config import get_settings

ALLOWED_EXTENSIONS = {".txt"}
CONTENT_TYPES = {"text/plain", "application/octet-stream"}
CHUNK_SIZE = 1024 * 1024


async def read_upload_text(file: UploadFile) -> str:
    """Read an uploaded export into memory and decode it as UTF-8.

    Nothing is written to disk. Undecodable bytes are replaced rather than
    rejected, matching how browsers read text files.
    """
    settings = get_settings()
    ext = Path(file.filename or "").suffix.lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only .txt chat exports are supported")
    content_type = (file.content_type or "").split(";")[0].strip()
    if content_type not in CONTENT_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid content type: {file.content_type}")

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    chunks: list[bytes] = []
    total = 0
    try:
        while True:
            chunk = await file.read(CHUNK_SIZE)
            if not chunk:
                break
            total += len(chunk)
            if total > max_bytes:
                raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File exceeds max size")
            chunks.append(chunk)
    finally:
        await file.close()

    if not total:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty.")
    return b"".join(chunks).decode("utf-8-sig", errors="replace")
