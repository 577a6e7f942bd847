from __future__ import annotations

"""Schema of the root ``manifest`` entry."""

from typing import List, Optional

from pydantic import Field

from .base import XdModel

__all__ = ["XdManifest", "XdManifestChild", "XdManifestComponent"]


class XdManifestComponent(XdModel):
    id: Optional[str] = Field(default=None, alias="id")
    name: Optional[str] = Field(default=None, alias="name")
    path: Optional[str] = Field(default=None, alias="path")
    type: Optional[str] = Field(default=None, alias="type")
    state: Optional[str] = Field(default=None, alias="state")
    rel: Optional[str] = Field(default=None, alias="rel")
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")


class XdManifestChild(XdModel):
    """A node of the manifest tree.

    Under the ``artwork`` node each child describes one artboard; ``path`` is
    the directory segment of its ``graphicContent.agc`` document.
    """

    id: Optional[str] = Field(default=None, alias="id")
    name: Optional[str] = Field(default=None, alias="name")
    path: Optional[str] = Field(default=None, alias="path")
    children: Optional[List[XdManifestChild]] = Field(default=None, alias="children")
    components: Optional[List[XdManifestComponent]] = Field(default=None, alias="components")


class XdManifest(XdModel):
    id: Optional[str] = Field(default=None, alias="id")
    type: Optional[str] = Field(default=None, alias="type")
    name: Optional[str] = Field(default=None, alias="name")
    manifest_format_version: Optional[int] = Field(default=None, alias="manifest-format-version")
    state: Optional[str] = Field(default=None, alias="state")
    components: Optional[List[XdManifestComponent]] = Field(default=None, alias="components")
    children: Optional[List[XdManifestChild]] = Field(default=None, alias="children")


XdManifestChild.model_rebuild()
