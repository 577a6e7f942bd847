from __future__ import annotations

"""XD package importer.

Checks whether a file looks like an XD container and opens it as an
:class:`XdFile`, taking defaults from the parser configuration.
"""

import logging
import zipfile
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from xd_toolkit.config import ConfigManager
from xd_toolkit.core.cache import ResourceCache
from xd_toolkit.core.container import MANIFEST_ENTRY, XdFile
from xd_toolkit.core.exceptions import XdFormatError

logger = logging.getLogger(__name__)

__all__ = ["XdPackageImporter"]


class XdPackageImporter:
    """Importer for ``.xd`` design containers.

    Args:
        parser_config: Overrides for the ``parser`` configuration section
            (``encoding``, ``max_workers``)
    """

    def __init__(self, parser_config: Optional[Dict[str, Any]] = None):
        self.logger = logging.getLogger(f"{__name__}.XdPackageImporter")
        config = dict(ConfigManager().get_parser_config())
        config.update(parser_config or {})
        self.encoding = str(config.get("encoding") or "utf-8")
        self.max_workers = self._max_workers(config.get("max_workers"))

    def _max_workers(self, value: Any) -> int:
        try:
            return max(1, int(value or 1))
        except (TypeError, ValueError):
            self.logger.warning("Invalid max_workers %r in parser config, using 1", value)
            return 1

    def can_import(self, file_path: Path) -> bool:
        """Check if this importer can handle the given file.

        Args:
            file_path: Path to the file to check

        Returns:
            True if the file is a zip archive with a ``manifest`` entry
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            return False

        if file_path.suffix.lower() not in self.get_supported_extensions():
            return False

        try:
            with zipfile.ZipFile(file_path, "r") as zip_ref:
                return MANIFEST_ENTRY in zip_ref.namelist()
        except (zipfile.BadZipFile, OSError):
            return False

    def import_package(self, file_path: Path, cache: Optional[ResourceCache] = None,
                       progress_callback: Optional[Callable[[str], None]] = None) -> XdFile:
        """Open an XD container.

        Args:
            file_path: Path to the ``.xd`` file
            cache: Optional resource cache shared with other imports
            progress_callback: Optional callback for progress updates

        Returns:
            Open :class:`XdFile`; the caller is responsible for closing it

        Raises:
            XdFormatError: If the file is not an XD container or fails to parse
        """
        file_path = Path(file_path)
        if not self.can_import(file_path):
            raise XdFormatError(f"File is not a valid XD package: {file_path}", str(file_path))

        if progress_callback:
            progress_callback(f"Importing XD package: {file_path.name}")
        self.logger.debug("Importing XD package: %s", file_path)

        xd_file = XdFile(file_path, cache, max_workers=self.max_workers, encoding=self.encoding)

        if progress_callback:
            progress_callback(f"Successfully imported XD package with {len(xd_file.artboards)} artboards")
        return xd_file

    def get_supported_extensions(self) -> List[str]:
        return [".xd"]

    def get_format_description(self) -> str:
        return "Adobe XD Documents"
