from __future__ import annotations

"""Small value types shared by styles, shapes and object metadata."""

from typing import Optional

from pydantic import Field

from .base import XdModel

__all__ = ["XdColorValue", "XdColor", "XdTransform", "XdSize"]


class XdColorValue(XdModel):
    r: Optional[int] = Field(default=None, alias="r")
    g: Optional[int] = Field(default=None, alias="g")
    b: Optional[int] = Field(default=None, alias="b")


class XdColor(XdModel):
    mode: Optional[str] = Field(default=None, alias="mode")
    value: Optional[XdColorValue] = Field(default=None, alias="value")
    alpha: Optional[float] = Field(default=None, alias="alpha")


class XdTransform(XdModel):
    """2D affine matrix ``[a c tx; b d ty]``."""

    a: Optional[float] = Field(default=None, alias="a")
    b: Optional[float] = Field(default=None, alias="b")
    c: Optional[float] = Field(default=None, alias="c")
    d: Optional[float] = Field(default=None, alias="d")
    tx: Optional[float] = Field(default=None, alias="tx")
    ty: Optional[float] = Field(default=None, alias="ty")


class XdSize(XdModel):
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")
