"""Simple file-backed key-value backend.

Each key is stored as a UTF-8 text file `<data_dir>/<quoted key>.val`
where the key is percent-encoded so separators and slashes are safe in
file names. Writes are atomic: a temporary file is written, fsynced and
then renamed over the target. Blocking file I/O runs in a worker thread.
"""
from __future__ import annotations
import asyncio
import logging
import os
from pathlib import Path
from threading import RLock
from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote, unquote

from .base import KeyValueBackend

logger = logging.getLogger(__name__)

SUFFIX = ".val"


class FileBackend(KeyValueBackend):
    def __init__(self, data_dir: str | Path = "./data") -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = RLock()

    def _path_for(self, key: str) -> Path:
        return self.data_dir / f"{quote(key, safe='')}{SUFFIX}"

    def _read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        with self._lock:
            if not path.exists():
                return None
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()

    def _write(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"FileBackend stores strings, got {type(value).__name__}")
        path = self._path_for(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        with self._lock:
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(path)

    def _unlink(self, keys: Sequence[str]) -> None:
        with self._lock:
            for key in keys:
                self._path_for(key).unlink(missing_ok=True)

    def _keys(self) -> List[str]:
        with self._lock:
            names = [p.name for p in self.data_dir.iterdir() if p.is_file() and p.suffix == SUFFIX]
        return sorted(unquote(n[: -len(SUFFIX)]) for n in names)

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._unlink, [key])

    async def list_all_keys(self) -> List[str]:
        return await asyncio.to_thread(self._keys)

    async def multi_get(self, keys: Sequence[str]) -> List[Tuple[str, Optional[str]]]:
        def read_all() -> List[Tuple[str, Optional[str]]]:
            return [(k, self._read(k)) for k in keys]
        return await asyncio.to_thread(read_all)

    async def multi_remove(self, keys: Sequence[str]) -> None:
        keys = list(keys)
        await asyncio.to_thread(self._unlink, keys)
        logger.debug("FileBackend removed %d keys from %s", len(keys), self.data_dir)
