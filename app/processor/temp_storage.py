import secrets
import time
from pathlib import Path

from app.logging.logger import Log


class TempStorage:
    """Per-upload scratch files inside a single upload directory."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def ensure(self) -> Path:
        """Create the upload directory if it is missing. Safe to call repeatedly."""
        self._root.mkdir(parents=True, exist_ok=True)
        return self._root

    def unique_path(self, original_filename: str) -> Path:
        """Build a never-reused path: resume-<ms timestamp>-<random><ext>."""
        suffix = Path(original_filename).suffix.lower()
        stamp = int(time.time() * 1000)
        token = secrets.token_hex(6)
        return self._root / f"resume-{stamp}-{token}{suffix}"

    def save(self, data: bytes, original_filename: str) -> Path:
        """Write bytes to a fresh unique path and return it."""
        self.ensure()
        path = self.unique_path(original_filename)
        path.write_bytes(data)
        Log.debug(f"Stored upload at {path}", size_bytes=len(data))
        return path

    @staticmethod
    def remove(path: Path | None) -> bool:
        """Delete a temp file. Returns False when there was nothing to delete."""
        if path is None:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        Log.info(f"Removed temporary file {path}")
        return True
