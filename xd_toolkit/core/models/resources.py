from __future__ import annotations

"""Schema of the shared resources document.

Gradients, clip paths, colour swatches and library elements are kept as raw
JSON values; only the parts the artboard model navigates are typed.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import XdModel
from .nodes import XdObject

__all__ = [
    "XdResources",
    "XdResourcesResources",
    "XdResourcesResourcesMeta",
    "XdResourcesResourcesMetaUx",
    "XdResourcesDocumentLibrary",
    "XdResourcesSymbolsMetadata",
    "XdResourcesArtboard",
]


class XdResourcesDocumentLibrary(XdModel):
    version: Optional[int] = Field(default=None, alias="version")
    is_sticker_sheet: Optional[bool] = Field(default=None, alias="isStickerSheet")
    hashed_metadata: Optional[Dict[str, Any]] = Field(default=None, alias="hashedMetadata")
    elements: Optional[List[Any]] = Field(default=None, alias="elements")


class XdResourcesSymbolsMetadata(XdModel):
    using_nested_symbol_syncing: Optional[bool] = Field(default=None, alias="usingNestedSymbolSyncing")


class XdResourcesResourcesMetaUx(XdModel):
    color_swatches: Optional[List[Any]] = Field(default=None, alias="colorSwatches")
    document_library: Optional[XdResourcesDocumentLibrary] = Field(default=None, alias="documentLibrary")
    grid_defaults: Optional[Dict[str, Any]] = Field(default=None, alias="gridDefaults")
    symbols: Optional[List[XdObject]] = Field(default=None, alias="symbols")
    symbols_metadata: Optional[XdResourcesSymbolsMetadata] = Field(default=None, alias="symbolsMetadata")


class XdResourcesResourcesMeta(XdModel):
    ux: Optional[XdResourcesResourcesMetaUx] = Field(default=None, alias="ux")


class XdResourcesResources(XdModel):
    meta: Optional[XdResourcesResourcesMeta] = Field(default=None, alias="meta")
    gradients: Optional[Dict[str, Any]] = Field(default=None, alias="gradients")
    clip_paths: Optional[Dict[str, Any]] = Field(default=None, alias="clipPaths")


class XdResourcesArtboard(XdModel):
    name: Optional[str] = Field(default=None, alias="name")
    x: Optional[float] = Field(default=None, alias="x")
    y: Optional[float] = Field(default=None, alias="y")
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")
    viewport_height: Optional[float] = Field(default=None, alias="viewportHeight")


class XdResources(XdModel):
    version: Optional[str] = Field(default=None, alias="version")
    children: Optional[List[Any]] = Field(default=None, alias="children")
    resources: Optional[XdResourcesResources] = Field(default=None, alias="resources")
    artboards: Optional[Dict[str, XdResourcesArtboard]] = Field(default=None, alias="artboards")

    @property
    def symbols(self) -> List[XdObject]:
        ux = self.resources.meta.ux if self.resources and self.resources.meta else None
        if ux is None or ux.symbols is None:
            return []
        return ux.symbols
