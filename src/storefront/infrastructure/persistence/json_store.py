"""Shared file helpers for the JSON-backed repositories.

Every file gets one re-entrant lock, shared by every repository instance
in the process that points at the same path.  Repositories hold the lock
across a whole read-check-write cycle, which is what makes cart updates
and the coupon conditional increment atomic.  Writes land in a temporary
file that is renamed over the target, so a crash never leaves a
half-written document behind.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def lock_for(path: Path) -> threading.RLock:
    key = path.resolve()
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.RLock()
        return lock


class JsonFile:

    def __init__(self, path: Path, empty: Any) -> None:
        self.path = path
        self._empty = empty
        self.lock = lock_for(path)

    def read(self) -> Any:
        with self.lock:
            if not self.path.exists():
                return json.loads(json.dumps(self._empty))
            return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, data: Any) -> None:
        with self.lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(json.dumps(data, indent=2) + "\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
