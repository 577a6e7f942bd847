from __future__ import annotations

"""Typed schema of the documents stored in an XD container.

The classes are passive data holders; decoding lives in
:mod:`xd_toolkit.core.decoder`.
"""

from .base import XdModel
from .common import XdColor, XdColorValue, XdSize, XdTransform
from .style import (
    XdStyle,
    XdStyleFill,
    XdStyleFillPattern,
    XdStyleFillPatternMeta,
    XdStyleFillPatternMetaUx,
    XdStyleFont,
    XdStyleStroke,
    XdStyleTextAttributes,
)
from .nodes import (
    XdClipPathResources,
    XdInteraction,
    XdObject,
    XdObjectGroup,
    XdObjectMeta,
    XdObjectMetaUx,
    XdRepeatGrid,
    XdShape,
    XdText,
    XdTextFrame,
    XdTextParagraph,
    XdTextParagraphLine,
)
from .manifest import XdManifest, XdManifestChild, XdManifestComponent
from .artboard import (
    XdArtboardArtboardsRef,
    XdArtboardChild,
    XdArtboardChildArtboard,
    XdArtboardDocument,
    XdArtboardResourcesRef,
)
from .resources import XdResources, XdResourcesArtboard, XdResourcesResources

__all__ = [
    "XdModel",
    "XdColor",
    "XdColorValue",
    "XdSize",
    "XdTransform",
    "XdStyle",
    "XdStyleFill",
    "XdStyleFillPattern",
    "XdStyleFillPatternMeta",
    "XdStyleFillPatternMetaUx",
    "XdStyleFont",
    "XdStyleStroke",
    "XdStyleTextAttributes",
    "XdClipPathResources",
    "XdInteraction",
    "XdObject",
    "XdObjectGroup",
    "XdObjectMeta",
    "XdObjectMetaUx",
    "XdRepeatGrid",
    "XdShape",
    "XdText",
    "XdTextFrame",
    "XdTextParagraph",
    "XdTextParagraphLine",
    "XdManifest",
    "XdManifestChild",
    "XdManifestComponent",
    "XdArtboardArtboardsRef",
    "XdArtboardChild",
    "XdArtboardChildArtboard",
    "XdArtboardDocument",
    "XdArtboardResourcesRef",
    "XdResources",
    "XdResourcesArtboard",
    "XdResourcesResources",
]
