from __future__ import annotations

"""Export of pattern-fill bitmaps to disk."""

import logging
from pathlib import Path
from typing import Dict, Set, Union

from xd_toolkit.core.container import XdFile
from xd_toolkit.core.traversal import iter_pattern_fills
from xd_toolkit.core.utils import guess_extension, safe_filename

logger = logging.getLogger(__name__)

__all__ = ["export_pattern_assets"]


def export_pattern_assets(xd_file: XdFile, dest_dir: Union[str, Path]) -> Dict[str, Path]:
    """Write every distinct pattern-fill asset of *xd_file* into *dest_dir*.

    Args:
        xd_file: Open container
        dest_dir: Output directory, created if needed

    Returns:
        Mapping of content id to the written file

    Raises:
        ResourceMissingError: If a pattern references an id the archive lacks
    """
    dest = Path(dest_dir)
    dest.mkdir(parents=True, exist_ok=True)

    written: Dict[str, Path] = {}
    used: Set[Path] = set()
    for artboard in xd_file.artboards:
        for obj, pattern in iter_pattern_fills(artboard):
            ux = pattern.meta.ux if pattern.meta is not None else None
            uid = ux.uid if ux is not None else None
            if not uid or uid in written:
                continue

            data = xd_file.get_resource(pattern.meta)
            if data is None:
                continue
            stem, extension = safe_filename(uid), guess_extension(data)
            target = dest / f"{stem}{extension}"
            suffix = 1
            # distinct uids can share a sanitized name
            while target in used:
                target = dest / f"{stem}_{suffix}{extension}"
                suffix += 1
            used.add(target)
            target.write_bytes(data)
            written[uid] = target
            logger.debug("Exported %s from '%s' (%d bytes) to %s", uid, obj.name, len(data), target)

    logger.info("Exported %d asset(s) to %s", len(written), dest)
    return written
