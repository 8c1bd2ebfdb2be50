"""
JSON-file persistence adapter.

Each service owns one ``JsonDocumentStore``: the whole document is loaded into
memory once and written back in full after every mutation. There is no locking;
two processes (or overlapping requests) writing the same file race and the last
writer wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

# os.umask can only be read by setting it
_UMASK = os.umask(0)
os.umask(_UMASK)
NEW_FILE_MODE = 0o666 & ~_UMASK


def read_json(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, document: dict) -> None:
    """Write ``document`` to a temp file next to ``path`` and swap it in."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            # \u escapes keep lone surrogates from JSON input writable
            json.dump(document, f)
        mode = path.stat().st_mode & 0o777 if path.exists() else NEW_FILE_MODE
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class JsonDocumentStore:
    """In-memory JSON document backed by a live file and a bundled default."""

    def __init__(self, path: Path | str, default_path: Path | str) -> None:
        self.path = Path(path)
        self.default_path = Path(default_path)
        if self.path.exists():
            self._data = read_json(self.path)
        else:
            logger.info("No live document at %s, starting from %s", self.path, self.default_path)
            self._data = self.load_default()

    @property
    def data(self) -> dict:
        return self._data

    def load_default(self) -> dict:
        return read_json(self.default_path)

    def init(self) -> bool:
        """Create the live file from the default document if it is missing."""
        if self.path.exists():
            return False
        write_json(self.path, self.load_default())
        logger.info("Created %s from %s", self.path, self.default_path)
        return True

    def save(self) -> None:
        write_json(self.path, self._data)

    def reset(self) -> None:
        self._data = self.load_default()
        self.save()
