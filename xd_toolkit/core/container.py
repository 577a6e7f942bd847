from __future__ import annotations

"""Assembly of an XD container into artboard records.

:class:`XdFile` reads the ``manifest``, walks the children of its ``artwork``
node and, for every artboard, pairs the manifest descriptor with the decoded
``graphicContent.agc`` document and the (cached) resources document it
references. Construction is eager and fail-fast: either every artboard loads
or an :class:`XdFormatError` is raised and the archive is closed.
"""

import codecs
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from xd_toolkit.core.archive import XdArchive
from xd_toolkit.core.cache import ResourceCache
from xd_toolkit.core.decoder import decode_artboard, decode_manifest, decode_resources
from xd_toolkit.core.exceptions import (
    EntryNotFoundError,
    ResourceMissingError,
    XdFormatError,
    XdParserError,
)
from xd_toolkit.core.models import (
    XdArtboardChild,
    XdArtboardDocument,
    XdManifest,
    XdManifestChild,
    XdResources,
    XdResourcesArtboard,
    XdStyleFill,
    XdStyleFillPatternMeta,
)

logger = logging.getLogger(__name__)

__all__ = ["XdFile", "XdArtboard", "artboard_entry_path", "resource_entry_path"]

MANIFEST_ENTRY = "manifest"
ARTWORK_NODE = "artwork"


def artboard_entry_path(artboard_path: str) -> str:
    return f"artwork/{artboard_path}/graphics/graphicContent.agc"


def resource_entry_path(uid: str) -> str:
    return f"resources/{uid}"


def _check_encoding(encoding: str) -> str:
    try:
        return codecs.lookup(encoding).name
    except LookupError as e:
        raise XdFormatError(f"Unknown text encoding: {encoding}", cause=e) from e


@dataclass(frozen=True, eq=False)
class XdArtboard:
    """One artboard of a container.

    Attributes
    ----------
    manifest
        Descriptor of the artboard under the manifest's ``artwork`` node.
    artboard
        Decoded ``graphicContent.agc`` document of the artboard.
    resources
        Resources document referenced by the artboard. Artboards that
        reference the same path share this instance.
    """

    manifest: XdManifestChild
    artboard: XdArtboardDocument
    resources: XdResources

    @property
    def name(self) -> Optional[str]:
        return self.manifest.name

    @property
    def id(self) -> Optional[str]:
        return self.manifest.id

    @property
    def path(self) -> Optional[str]:
        return self.manifest.path

    @property
    def content(self) -> Optional[XdArtboardChild]:
        """The top-level child of type ``artboard`` holding the node tree."""
        for child in self.artboard.children or []:
            if child.type == "artboard":
                return child
        return None

    @property
    def info(self) -> Optional[XdResourcesArtboard]:
        """Bounds of this artboard as recorded in the resources document."""
        content = self.content
        if content is None or content.artboard is None or not content.artboard.ref:
            return None
        return (self.resources.artboards or {}).get(content.artboard.ref)


class XdFile:
    """Parsed XD container.

    Args:
        file_path: Path to the ``.xd`` archive
        cache: Resource cache to use; a fresh one is created when omitted
        max_workers: Number of threads loading artboards; ``1`` loads them
            one after another
        encoding: Text encoding of the JSON documents

    Raises:
        XdFormatError: If the archive, the manifest or any artboard cannot
            be read and decoded

    The archive stays open until :meth:`close` so that pattern-fill assets
    can be resolved with :meth:`get_resource`.
    """

    def __init__(self, file_path: Union[str, Path], cache: Optional[ResourceCache] = None,
                 *, max_workers: int = 1, encoding: str = "utf-8") -> None:
        self.file_path = Path(file_path)
        self.cache = cache if cache is not None else ResourceCache()
        self.encoding = _check_encoding(encoding)
        self.logger = logging.getLogger(f"{__name__}.XdFile")

        self._archive: Optional[XdArchive] = XdArchive(self.file_path)
        try:
            self.manifest = self._load_manifest()
            artwork = self._artwork_node(self.manifest)
            self._artboards: Tuple[XdArtboard, ...] = tuple(
                self._load_artboards(artwork.children or [], max_workers)
            )
        except BaseException:
            self.close()
            raise

        self.logger.info("Opened %s: %d artboard(s), %d resources document(s) cached",
                         self.file_path.name, len(self._artboards), len(self.cache))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def artboards(self) -> Tuple[XdArtboard, ...]:
        return self._artboards

    @property
    def closed(self) -> bool:
        return self._archive is None

    def get_resource(self, pattern_meta: Optional[XdStyleFillPatternMeta]) -> Optional[bytes]:
        """Return the bytes of the asset a pattern fill points at.

        Args:
            pattern_meta: ``meta`` of a fill pattern, may be ``None``

        Returns:
            Raw asset bytes, or ``None`` when no content id is configured

        Raises:
            ResourceMissingError: If the content id has no ``resources/`` entry
        """
        ux = pattern_meta.ux if pattern_meta is not None else None
        uid = ux.uid if ux is not None else None
        if uid is None or not uid.strip():
            return None

        try:
            return self._require_archive().read_bytes(resource_entry_path(uid))
        except EntryNotFoundError as e:
            raise ResourceMissingError(uid, e) from e

    def get_resource_for_fill(self, fill: Optional[XdStyleFill]) -> Optional[bytes]:
        if fill is None or fill.pattern is None:
            return None
        return self.get_resource(fill.pattern.meta)

    def close(self) -> None:
        if self._archive is not None:
            self._archive.close()
            self._archive = None

    def __enter__(self) -> "XdFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[XdArtboard]:
        return iter(self._artboards)

    def __len__(self) -> int:
        return len(self._artboards)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load_manifest(self) -> XdManifest:
        try:
            text = self._require_archive().read_text(MANIFEST_ENTRY, self.encoding)
        except (EntryNotFoundError, UnicodeDecodeError) as e:
            raise XdFormatError(f"Cannot read manifest of {self.file_path}", MANIFEST_ENTRY, e) from e
        return decode_manifest(text, MANIFEST_ENTRY)

    def _artwork_node(self, manifest: XdManifest) -> XdManifestChild:
        matches = [child for child in manifest.children or [] if child.path == ARTWORK_NODE]
        if len(matches) != 1:
            raise XdFormatError(
                f"Manifest must have exactly one '{ARTWORK_NODE}' child, found {len(matches)}",
                MANIFEST_ENTRY,
            )
        return matches[0]

    def _load_artboards(self, children: List[XdManifestChild], max_workers: int) -> List[XdArtboard]:
        if max_workers <= 1 or len(children) <= 1:
            return [self._load_artboard(child) for child in children]

        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="xd-artboard") as pool:
            futures = [pool.submit(self._load_artboard, child) for child in children]
            try:
                # results in manifest order, whatever the completion order
                return [future.result() for future in futures]
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

    def _load_artboard(self, child: XdManifestChild) -> XdArtboard:
        if not child.path:
            raise XdFormatError(f"Artboard '{child.name}' has no path in the manifest", MANIFEST_ENTRY)

        entry = artboard_entry_path(child.path)
        try:
            text = self._require_archive().read_text(entry, self.encoding)
            document = decode_artboard(text, entry)
        except (XdParserError, UnicodeDecodeError) as e:
            raise XdFormatError(f"Failed to load artboard '{child.path}'", entry, e) from e

        href = document.resources.href if document.resources is not None else None
        if href is None or not href.strip():
            raise XdFormatError(f"Artboard '{child.path}' has no resources reference", entry)

        try:
            resources = self.cache.get_or_load(href, self._load_resources)
        except (XdParserError, UnicodeDecodeError) as e:
            raise XdFormatError(f"Failed to load resources of artboard '{child.path}'", entry, e) from e

        self.logger.debug("Loaded artboard %s (%s)", child.path, child.name)
        return XdArtboard(child, document, resources)

    def _load_resources(self, path: str) -> XdResources:
        text = self._require_archive().read_text(path, self.encoding)
        return decode_resources(text, path)

    def _require_archive(self) -> XdArchive:
        if self._archive is None:
            raise XdParserError(f"Container is closed: {self.file_path}", str(self.file_path))
        return self._archive
