from __future__ import annotations

"""Schema of a per-artboard ``graphicContent.agc`` document."""

from typing import List, Optional

from pydantic import Field

from .base import XdModel
from .nodes import XdObject, XdObjectMeta
from .style import XdStyle

__all__ = [
    "XdArtboardDocument",
    "XdArtboardChild",
    "XdArtboardChildArtboard",
    "XdArtboardResourcesRef",
    "XdArtboardArtboardsRef",
]


class XdArtboardChildArtboard(XdModel):
    children: Optional[List[XdObject]] = Field(default=None, alias="children")
    meta: Optional[XdObjectMeta] = Field(default=None, alias="meta")
    # key into XdResources.artboards
    ref: Optional[str] = Field(default=None, alias="ref")


class XdArtboardChild(XdModel):
    type: Optional[str] = Field(default=None, alias="type")
    id: Optional[str] = Field(default=None, alias="id")
    meta: Optional[XdObjectMeta] = Field(default=None, alias="meta")
    style: Optional[XdStyle] = Field(default=None, alias="style")
    artboard: Optional[XdArtboardChildArtboard] = Field(default=None, alias="artboard")


class XdArtboardResourcesRef(XdModel):
    href: Optional[str] = Field(default=None, alias="href")


class XdArtboardArtboardsRef(XdModel):
    href: Optional[str] = Field(default=None, alias="href")


class XdArtboardDocument(XdModel):
    version: Optional[str] = Field(default=None, alias="version")
    children: Optional[List[XdArtboardChild]] = Field(default=None, alias="children")
    resources: Optional[XdArtboardResourcesRef] = Field(default=None, alias="resources")
    artboards: Optional[XdArtboardArtboardsRef] = Field(default=None, alias="artboards")
