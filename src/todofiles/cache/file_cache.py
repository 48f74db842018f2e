"""
Thread-safe cache of parsed todo files.

Design:
    Primary store: Dict[Path, CachedFile]  (parsed document + mtime at load)

A lookup stats the file and re-parses it when the mtime differs from the
cached one, so edits made outside the process are picked up on the next
request. All access to the store holds _lock (threading.RLock) because the
REST API runs in its own thread next to the MCP server.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from todofiles.models.collection import MarkdownDocument, TodoDocument, load_file

log = logging.getLogger(__name__)


@dataclass
class CachedFile:
    """A parsed todo file held in the cache."""

    file_path: Path
    document: TodoDocument
    mtime: float


class FileCache:
    """
    Parsed-file cache keyed by resolved path.

    Usage:
        cache = FileCache()
        doc = cache.get("todo.txt")
        ...
        cache.invalidate("todo.txt")
    """

    def __init__(self, default_file: Optional[Union[str, Path]] = None) -> None:
        self._lock = threading.RLock()
        self._files: Dict[Path, CachedFile] = {}
        self.default_file = Path(default_file) if default_file else None

    def resolve(self, file_path: Optional[Union[str, Path]] = None) -> Path:
        """
        Resolve an explicit path, falling back to the configured default file.

        Raises:
            ValueError: no path given and no default configured
        """
        if file_path:
            return Path(file_path).resolve()
        if self.default_file is None:
            raise ValueError("No file_path given and no default todo file configured")
        return self.default_file.resolve()

    def get(self, file_path: Optional[Union[str, Path]] = None) -> TodoDocument:
        """
        Return the parsed document for a file, re-reading it if it changed.

        Raises:
            OSError: the file cannot be read (propagated from the filesystem)
        """
        path = self.resolve(file_path)
        mtime = path.stat().st_mtime
        with self._lock:
            cached = self._files.get(path)
            if cached is not None and cached.mtime == mtime:
                return cached.document
            document = load_file(path)
            self._files[path] = CachedFile(file_path=path, document=document, mtime=mtime)
            log.info("Loaded %s (%d tasks)", path, len(document))
            return document

    def invalidate(self, file_path: Optional[Union[str, Path]] = None) -> None:
        """Drop a file from the cache so the next get() re-reads it."""
        path = self.resolve(file_path)
        with self._lock:
            if self._files.pop(path, None) is not None:
                log.debug("Invalidated %s", path)

    def clear(self) -> None:
        with self._lock:
            self._files.clear()

    def status(self) -> dict:
        """File and task counts for every cached file."""
        with self._lock:
            files = [
                {
                    "file_path": str(entry.file_path),
                    "format": "markdown" if isinstance(entry.document, MarkdownDocument) else "todo.txt",
                    "tasks": len(entry.document),
                    "mtime": entry.mtime,
                }
                for entry in self._files.values()
            ]
        return {
            "default_file": str(self.default_file) if self.default_file else None,
            "file_count": len(files),
            "task_count": sum(f["tasks"] for f in files),
            "files": files,
        }
