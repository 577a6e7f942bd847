from __future__ import annotations

"""Fill, stroke and typography styles attached to nodes."""

from typing import List, Optional

from pydantic import Field

from .base import XdModel
from .common import XdColor

__all__ = [
    "XdStyle",
    "XdStyleFill",
    "XdStyleFillPattern",
    "XdStyleFillPatternMeta",
    "XdStyleFillPatternMetaUx",
    "XdStyleStroke",
    "XdStyleFont",
    "XdStyleTextAttributes",
]


class XdStyleFillPatternMetaUx(XdModel):
    """Placement of a bitmap inside a pattern fill.

    ``uid`` is the content id of the image stored under ``resources/{uid}``.
    """

    scale_behavior: Optional[str] = Field(default=None, alias="scaleBehavior")
    uid: Optional[str] = Field(default=None, alias="uid")
    href_last_modified_date: Optional[int] = Field(default=None, alias="hrefLastModifiedDate")
    flip_x: Optional[bool] = Field(default=None, alias="flipX")
    flip_y: Optional[bool] = Field(default=None, alias="flipY")
    offset_x: Optional[float] = Field(default=None, alias="offsetX")
    offset_y: Optional[float] = Field(default=None, alias="offsetY")
    scale: Optional[float] = Field(default=None, alias="scale")


class XdStyleFillPatternMeta(XdModel):
    ux: Optional[XdStyleFillPatternMetaUx] = Field(default=None, alias="ux")


class XdStyleFillPattern(XdModel):
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")
    meta: Optional[XdStyleFillPatternMeta] = Field(default=None, alias="meta")
    href: Optional[str] = Field(default=None, alias="href")


class XdStyleFill(XdModel):
    type: Optional[str] = Field(default=None, alias="type")
    color: Optional[XdColor] = Field(default=None, alias="color")
    pattern: Optional[XdStyleFillPattern] = Field(default=None, alias="pattern")


class XdStyleStroke(XdModel):
    type: Optional[str] = Field(default=None, alias="type")
    color: Optional[XdColor] = Field(default=None, alias="color")
    width: Optional[float] = Field(default=None, alias="width")
    align: Optional[str] = Field(default=None, alias="align")
    cap: Optional[str] = Field(default=None, alias="cap")
    join: Optional[str] = Field(default=None, alias="join")
    miter_limit: Optional[float] = Field(default=None, alias="miterLimit")
    dash: Optional[List[float]] = Field(default=None, alias="dash")


class XdStyleFont(XdModel):
    family: Optional[str] = Field(default=None, alias="family")
    postscript_name: Optional[str] = Field(default=None, alias="postscriptName")
    size: Optional[float] = Field(default=None, alias="size")
    style: Optional[str] = Field(default=None, alias="style")


class XdStyleTextAttributes(XdModel):
    # absent paragraphAlign means left
    paragraph_align: Optional[str] = Field(default=None, alias="paragraphAlign")
    line_height: Optional[float] = Field(default=None, alias="lineHeight")


class XdStyle(XdModel):
    fill: Optional[XdStyleFill] = Field(default=None, alias="fill")
    stroke: Optional[XdStyleStroke] = Field(default=None, alias="stroke")
    font: Optional[XdStyleFont] = Field(default=None, alias="font")
    text_attributes: Optional[XdStyleTextAttributes] = Field(default=None, alias="textAttributes")
    opacity: Optional[float] = Field(default=None, alias="opacity")
    isolation: Optional[str] = Field(default=None, alias="isolation")
