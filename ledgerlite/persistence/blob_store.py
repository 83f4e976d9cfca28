"""Mini README: Key-value blob stores backing the transaction snapshot.

Structure:
    * BlobStore - abstract interface with ``get`` and ``set``.
    * MemoryBlobStore - dictionary backed store for tests and ephemeral runs.
    * FileBlobStore - one JSON file per key inside a data directory.

Stores hold opaque text. They raise on write failures so the persistence
bridge can surface them; they never interpret the payload.
"""

from __future__ import annotations

import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..errors import BlobStoreError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

_VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class BlobStore(ABC):
    """Base interface for string-valued key-value persistence."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored text or ``None`` when the key is absent."""

    @abstractmethod
    def set(self, key: str, text: str) -> None:
        """Store ``text`` under ``key``, raising when the write fails."""


class MemoryBlobStore(BlobStore):
    """In-process store; ``fail_writes`` simulates an unavailable medium."""

    def __init__(self, initial: Optional[Dict[str, str]] = None, *, fail_writes: bool = False) -> None:
        self._blobs: Dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def set(self, key: str, text: str) -> None:
        if self.fail_writes:
            raise BlobStoreError(f"Writes to blob '{key}' are disabled")
        self._blobs[key] = text


class FileBlobStore(BlobStore):
    """Persist each key as ``<directory>/<key>.json``."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory).expanduser()
        LOGGER.debug("File blob store rooted at %s", self.directory)

    def path_for(self, key: str) -> Path:
        if not _VALID_KEY.match(key):
            raise BlobStoreError(f"Invalid blob key '{key}'")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, text: str) -> None:
        path = self.path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        # write beside the target then swap so readers never see a partial file
        handle, temp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as temp_file:
                temp_file.write(text)
            os.replace(temp_name, path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Wrote %s bytes to %s", len(text), path)
