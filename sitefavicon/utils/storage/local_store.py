"""Filesystem backed asset store"""

import logging
import os
from pathlib import Path, PurePosixPath

from sitefavicon.exceptions import AssetStoreError
from sitefavicon.utils.storage.models import BaseAssetStore

logger = logging.getLogger(__name__)


def sanitize_relative_path(path: str) -> str:
    """Normalize a store path and reject anything escaping the store root."""
    normalized = os.path.normpath(path.replace("\\", "/")).replace("\\", "/")
    if normalized.startswith("./"):
        normalized = normalized[2:]
    if normalized == ".." or normalized.startswith("../") or PurePosixPath(normalized).is_absolute():
        raise AssetStoreError(f"Path traversal is not allowed for asset storage: {path}")
    return normalized


class LocalAssetStore(BaseAssetStore):
    """Write assets below `root_path` and serve them from `public_base_url`."""

    root_path: Path
    public_base_url: str

    def __init__(self, root_path: str, public_base_url: str) -> None:
        self.root_path = Path(root_path).resolve()
        self.public_base_url = public_base_url.rstrip("/")

    def _resolve_path(self, path: str) -> tuple[str, Path]:
        sanitized = sanitize_relative_path(path)
        return sanitized, self.root_path / sanitized

    def save_file(self, path: str, content: bytes, content_type: str) -> str:
        """Write the file, creating parent directories as needed."""
        sanitized, absolute = self._resolve_path(path)
        absolute.parent.mkdir(parents=True, exist_ok=True)
        absolute.write_bytes(content)
        logger.debug(f"Stored {len(content)} bytes ({content_type}) at {absolute}")
        return self.get_public_url(sanitized)

    def get_file(self, path: str) -> bytes:
        """Read a stored file."""
        _, absolute = self._resolve_path(path)
        return absolute.read_bytes()

    def delete_file(self, path: str) -> None:
        """Delete a stored file if present."""
        _, absolute = self._resolve_path(path)
        absolute.unlink(missing_ok=True)

    def get_public_url(self, path: str) -> str:
        """Join the public base URL and the sanitized path."""
        return f"{self.public_base_url}/{sanitize_relative_path(path)}"
