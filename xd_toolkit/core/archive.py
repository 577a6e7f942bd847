from __future__ import annotations

"""Read-only access to the entries of an XD zip container."""

import logging
import threading
import zipfile
from pathlib import Path
from typing import List, Optional, Union

from xd_toolkit.core.exceptions import EntryNotFoundError, XdFormatError, XdParserError

logger = logging.getLogger(__name__)

__all__ = ["XdArchive"]


class XdArchive:
    """Random-access entry store backed by :class:`zipfile.ZipFile`.

    Entry lookups are exact: ``artwork/a/graphics/graphicContent.agc`` and
    ``/artwork/a/...`` are different names. Reads are serialized so a single
    archive can be shared by worker threads.
    """

    def __init__(self, file_path: Union[str, Path]) -> None:
        self.file_path = Path(file_path)
        self._lock = threading.Lock()
        self.logger = logging.getLogger(f"{__name__}.XdArchive")
        try:
            self._zip: Optional[zipfile.ZipFile] = zipfile.ZipFile(
                self.file_path, "r", metadata_encoding="utf-8"
            )
        except zipfile.BadZipFile as e:
            raise XdFormatError(f"Not a valid XD archive: {self.file_path}",
                                str(self.file_path), e) from e
        except OSError as e:
            raise XdFormatError(f"Cannot open XD archive: {self.file_path}",
                                str(self.file_path), e) from e
        self.logger.debug("Opened archive %s (%d entries)", self.file_path, len(self._zip.namelist()))

    @property
    def closed(self) -> bool:
        return self._zip is None

    def has_entry(self, entry: str) -> bool:
        return self._info(entry) is not None

    def entry_names(self) -> List[str]:
        return self._require_open().namelist()

    def read_bytes(self, entry: str) -> bytes:
        """Return the raw content of *entry*.

        Raises:
            EntryNotFoundError: If the archive has no entry with that exact name
        """
        info = self._info(entry)
        if info is None:
            raise EntryNotFoundError(entry)
        with self._lock:
            data = self._require_open().read(info)
        self.logger.debug("Read %s (%d bytes)", entry, len(data))
        return data

    def read_text(self, entry: str, encoding: str = "utf-8") -> str:
        """Return *entry* decoded as text, without a leading byte order mark."""
        data = self.read_bytes(entry)
        text = data.decode(encoding)
        if text.startswith("\ufeff"):
            text = text[1:]
        return text

    def close(self) -> None:
        """Release the underlying zip handle. Safe to call more than once."""
        with self._lock:
            if self._zip is not None:
                self._zip.close()
                self._zip = None
                self.logger.debug("Closed archive %s", self.file_path)

    def _info(self, entry: str) -> Optional[zipfile.ZipInfo]:
        try:
            return self._require_open().getinfo(entry)
        except KeyError:
            return None

    def _require_open(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise XdParserError(f"Archive is closed: {self.file_path}", str(self.file_path))
        return self._zip

    def __enter__(self) -> "XdArchive":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
