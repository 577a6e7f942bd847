from __future__ import annotations

"""Session cache of decoded resources documents.

Several artboards usually point at the same resources document. The cache
makes sure it is read and decoded once per path and that every artboard gets
the very same instance, so identity comparisons between artboards hold.
"""

import logging
import threading
from typing import Callable, Dict, Iterator, Optional

from xd_toolkit.core.models import XdResources

logger = logging.getLogger(__name__)

__all__ = ["ResourceCache", "normalize_resource_path"]


def normalize_resource_path(href: str) -> str:
    """Return the archive entry name for a resources reference.

    Leading ``/`` separators are removed; case and trailing separators are
    kept, so ``/resources/a.agc`` and ``resources/a.agc`` share a cache slot
    while ``Resources/a.agc`` does not.
    """
    return href.lstrip("/")


class ResourceCache:
    """Mapping of normalized resource path to decoded :class:`XdResources`.

    The caller decides the lifetime: pass a fresh cache per container, or
    share one across containers known to reference the same documents.
    :meth:`get_or_load` is safe to call from several threads; the loader runs
    at most once per path.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, XdResources] = {}
        self._lock = threading.Lock()
        self._path_locks: Dict[str, threading.Lock] = {}
        self.hits = 0
        self.misses = 0
        self.logger = logging.getLogger(f"{__name__}.ResourceCache")

    def get_or_load(self, path: str, loader: Callable[[str], XdResources]) -> XdResources:
        """Return the cached document for *path*, calling *loader* on a miss.

        Exceptions raised by *loader* propagate and leave no entry behind.
        """
        path = normalize_resource_path(path)
        with self._lock:
            cached = self._entries.get(path)
            if cached is not None:
                self.hits += 1
                self.logger.debug("Cache hit: %s", path)
                return cached
            path_lock = self._path_locks.setdefault(path, threading.Lock())

        with path_lock:
            # another thread may have loaded it while we waited
            with self._lock:
                cached = self._entries.get(path)
                if cached is not None:
                    self.hits += 1
                    return cached

            self.logger.debug("Cache miss: %s", path)
            document = loader(path)

            with self._lock:
                self._entries[path] = document
                self.misses += 1
            return document

    def get(self, path: str) -> Optional[XdResources]:
        with self._lock:
            return self._entries.get(normalize_resource_path(path))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._path_locks.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        with self._lock:
            return normalize_resource_path(path) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._entries))
