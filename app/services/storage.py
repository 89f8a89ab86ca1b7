from __future__ import annotations
import time
from pathlib import Path, PurePath

from app.core.config import settings


class LocalObjectStore:
    def __init__(self, base_dir: str, public_prefix: str = "/uploads"):
        self.base = Path(base_dir)
        self.base.mkdir(parents=True, exist_ok=True)
        self.public_prefix = public_prefix.rstrip("/")

    def put_bytes(self, *, key: str, data: bytes) -> str:
        """Write `data` under `key` and return the public URL path it is served from."""
        path = self.resolve_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return f"{self.public_prefix}/{key}"

    def delete(self, key: str) -> None:
        self.resolve_path(key).unlink(missing_ok=True)

    def resolve_path(self, key: str) -> Path:
        path = (self.base / key).resolve()
        if not path.is_relative_to(self.base.resolve()):
            raise ValueError(f"Key escapes storage root: {key}")
        return path


def photo_key(collection: str, place_id: str, filename: str, now_ms: int | None = None) -> str:
    # strip any client-supplied directories
    name = PurePath(filename.replace("\\", "/")).name or "upload"
    ts = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{collection}/{place_id}/{ts}-{name}"


def get_photo_store() -> LocalObjectStore:
    return LocalObjectStore(settings.upload_dir, settings.upload_url_prefix)
