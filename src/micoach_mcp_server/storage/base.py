"""Base storage class with data directory configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from micoach_mcp_server.errors import StorageWriteError

logger = logging.getLogger(__name__)


def get_data_dir() -> Path:
    """
    Get the data directory for storing local files.

    Uses MICOACH_DATA_DIR environment variable if set, otherwise defaults
    to the project root directory.

    Returns:
        Path to the data directory
    """
    env_dir = os.environ.get("MICOACH_DATA_DIR")
    if env_dir:
        return Path(env_dir)
    # Default to project root (parent of src/)
    return Path(__file__).parent.parent.parent.parent


class BaseStorage:
    """Base class for storage implementations."""

    def __init__(self, subdirectory: str, data_dir: Optional[Path] = None):
        """
        Initialize storage with a subdirectory name.

        Args:
            subdirectory: Name of the subdirectory within the data directory
            data_dir: Optional base directory overriding get_data_dir()
        """
        base_dir = data_dir if data_dir is not None else get_data_dir()
        self.data_dir = Path(base_dir) / subdirectory
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _load_bytes(self, file_path: Path) -> bytes | None:
        """Load raw bytes from a file, returning None if it doesn't exist."""
        if not file_path.exists():
            return None
        try:
            with open(file_path, "rb") as f:
                return f.read()
        except IOError:
            logger.warning("Could not read %s", file_path)
            return None

    def _save_bytes(self, file_path: Path, data: bytes) -> None:
        """Write raw bytes to a file, replacing any previous content."""
        tmp_path = file_path.with_suffix(file_path.suffix + ".tmp")
        try:
            with open(tmp_path, "wb") as f:
                f.write(data)
            tmp_path.replace(file_path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageWriteError(file_path.stem, str(e)) from e


class KeyValueStorage(BaseStorage):
    """Key-value store keeping one JSON blob per key, last write wins."""

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        """Initialize key-value storage in the coaching_data directory."""
        super().__init__("coaching_data", data_dir)

    def _path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> bytes | None:
        """Return the blob stored under a key, or None if absent."""
        return self._load_bytes(self._path_for(key))

    def set(self, key: str, data: bytes) -> None:
        """
        Store a blob under a key.

        Raises:
            StorageWriteError: If the blob could not be written
        """
        self._save_bytes(self._path_for(key), data)

    def remove(self, key: str) -> None:
        """
        Remove the blob stored under a key, if any.

        Raises:
            StorageWriteError: If an existing blob could not be deleted
        """
        try:
            self._path_for(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageWriteError(key, str(e)) from e
