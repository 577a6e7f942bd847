from __future__ import annotations

"""Walking the node tree of an artboard."""

from typing import Iterable, Iterator, Tuple

from xd_toolkit.core.container import XdArtboard
from xd_toolkit.core.models import XdObject, XdStyleFillPattern

__all__ = ["iter_objects", "iter_pattern_fills"]


def _walk(objects: Iterable[XdObject]) -> Iterator[XdObject]:
    for obj in objects:
        yield obj
        yield from _walk(obj.children)


def iter_objects(artboard: XdArtboard) -> Iterator[XdObject]:
    """Yield every object of *artboard* depth first, parents before children."""
    for child in artboard.artboard.children or []:
        if child.artboard is not None:
            yield from _walk(child.artboard.children or [])


def iter_pattern_fills(artboard: XdArtboard) -> Iterator[Tuple[XdObject, XdStyleFillPattern]]:
    """Yield ``(object, pattern)`` for each object filled with a bitmap pattern."""
    for obj in iter_objects(artboard):
        fill = obj.style.fill if obj.style is not None else None
        if fill is not None and fill.pattern is not None:
            yield obj, fill.pattern
