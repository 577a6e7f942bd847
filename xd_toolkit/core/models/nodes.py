from __future__ import annotations

"""Scene-graph nodes: objects, their shapes, text frames and UX metadata.

:class:`XdObject` is recursive (groups, symbol states and clip paths contain
further objects), so every class taking part in the recursion lives here.
"""

from typing import Dict, List, Optional, Union

from pydantic import Field

from .base import XdModel
from .common import XdSize, XdTransform
from .style import XdStyle

__all__ = [
    "XdShape",
    "XdText",
    "XdTextFrame",
    "XdTextParagraph",
    "XdTextParagraphLine",
    "XdObject",
    "XdObjectGroup",
    "XdObjectMeta",
    "XdObjectMetaUx",
    "XdClipPathResources",
    "XdRepeatGrid",
    "XdInteraction",
    "XdInteractionData",
    "XdInteractionDataInteraction",
    "XdInteractionDataInteractionProperties",
]


class XdShape(XdModel):
    """Geometry of a ``shape`` node.

    Which attributes are populated depends on ``type``: ``rect`` uses
    ``x``/``y``/``width``/``height`` and ``r``, ``ellipse`` and ``circle`` use
    the centre and radii, ``line`` the two end points, ``path`` and
    ``compound`` the SVG ``path`` data.
    """

    type: Optional[str] = Field(default=None, alias="type")
    x: Optional[float] = Field(default=None, alias="x")
    y: Optional[float] = Field(default=None, alias="y")
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")
    path: Optional[str] = Field(default=None, alias="path")
    winding: Optional[str] = Field(default=None, alias="winding")
    cx: Optional[float] = Field(default=None, alias="cx")
    cy: Optional[float] = Field(default=None, alias="cy")
    rx: Optional[float] = Field(default=None, alias="rx")
    ry: Optional[float] = Field(default=None, alias="ry")
    x1: Optional[float] = Field(default=None, alias="x1")
    y1: Optional[float] = Field(default=None, alias="y1")
    x2: Optional[float] = Field(default=None, alias="x2")
    y2: Optional[float] = Field(default=None, alias="y2")
    # single radius or one per corner
    r: Optional[Union[float, List[float]]] = Field(default=None, alias="r")
    operation: Optional[str] = Field(default=None, alias="operation")


class XdTextFrame(XdModel):
    type: Optional[str] = Field(default=None, alias="type")
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")


class XdTextParagraphLine(XdModel):
    from_: Optional[float] = Field(default=None, alias="from")
    to: Optional[float] = Field(default=None, alias="to")
    x: Optional[float] = Field(default=None, alias="x")
    y: Optional[float] = Field(default=None, alias="y")


class XdTextParagraph(XdModel):
    lines: Optional[List[List[XdTextParagraphLine]]] = Field(default=None, alias="lines")


class XdText(XdModel):
    frame: Optional[XdTextFrame] = Field(default=None, alias="frame")
    paragraphs: Optional[List[XdTextParagraph]] = Field(default=None, alias="paragraphs")
    raw_text: Optional[str] = Field(default=None, alias="rawText")


class XdRepeatGrid(XdModel):
    cell_width: Optional[float] = Field(default=None, alias="cellWidth")
    cell_height: Optional[float] = Field(default=None, alias="cellHeight")
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")
    padding_x: Optional[float] = Field(default=None, alias="paddingX")
    padding_y: Optional[float] = Field(default=None, alias="paddingY")
    columns: Optional[int] = Field(default=None, alias="columns")
    rows: Optional[int] = Field(default=None, alias="rows")


class XdInteractionDataInteractionProperties(XdModel):
    destination: Optional[str] = Field(default=None, alias="destination")
    duration: Optional[float] = Field(default=None, alias="duration")
    easing: Optional[str] = Field(default=None, alias="easing")
    transition: Optional[str] = Field(default=None, alias="transition")
    voice_locale: Optional[str] = Field(default=None, alias="voiceLocale")


class XdInteractionDataInteraction(XdModel):
    action: Optional[str] = Field(default=None, alias="action")
    properties: Optional[XdInteractionDataInteractionProperties] = Field(default=None, alias="properties")
    trigger_event: Optional[str] = Field(default=None, alias="triggerEvent")


class XdInteractionData(XdModel):
    interaction: Optional[XdInteractionDataInteraction] = Field(default=None, alias="interaction")
    version: Optional[str] = Field(default=None, alias="version")


class XdInteraction(XdModel):
    data: Optional[XdInteractionData] = Field(default=None, alias="data")
    enabled: Optional[bool] = Field(default=None, alias="enabled")
    guid: Optional[str] = Field(default=None, alias="guid")
    inherited: Optional[bool] = Field(default=None, alias="inherited")
    valid: Optional[bool] = Field(default=None, alias="valid")


class XdClipPathResources(XdModel):
    type: Optional[str] = Field(default=None, alias="type")
    children: Optional[List[XdObject]] = Field(default=None, alias="children")


class XdObjectMetaUx(XdModel):
    """Editor-side metadata: symbols, constraints, states and prototyping."""

    name_l10n: Optional[str] = Field(default=None, alias="nameL10N")
    symbol_id: Optional[str] = Field(default=None, alias="symbolId")
    width: Optional[float] = Field(default=None, alias="width")
    height: Optional[float] = Field(default=None, alias="height")
    component_type: Optional[str] = Field(default=None, alias="componentType")
    is_master: Optional[bool] = Field(default=None, alias="isMaster")
    sync_map: Optional[Dict[str, str]] = Field(default=None, alias="syncMap")
    has_custom_name: Optional[bool] = Field(default=None, alias="hasCustomName")
    aspect_lock: Optional[XdSize] = Field(default=None, alias="aspectLock")
    custom_constraints: Optional[bool] = Field(default=None, alias="customConstraints")
    constraint_width: Optional[bool] = Field(default=None, alias="constraintWidth")
    constraint_height: Optional[bool] = Field(default=None, alias="constraintHeight")
    constraint_right: Optional[bool] = Field(default=None, alias="constraintRight")
    constraint_left: Optional[bool] = Field(default=None, alias="constraintLeft")
    constraint_top: Optional[bool] = Field(default=None, alias="constraintTop")
    constraint_bottom: Optional[bool] = Field(default=None, alias="constraintBottom")
    local_transform: Optional[XdTransform] = Field(default=None, alias="localTransform")
    mod_time: Optional[int] = Field(default=None, alias="modTime")
    state_id: Optional[str] = Field(default=None, alias="stateId")
    states: Optional[List[XdObject]] = Field(default=None, alias="states")
    interactions: Optional[List[XdInteraction]] = Field(default=None, alias="interactions")
    repeat_grid: Optional[XdRepeatGrid] = Field(default=None, alias="repeatGrid")
    scrolling_type: Optional[str] = Field(default=None, alias="scrollingType")
    viewport_width: Optional[float] = Field(default=None, alias="viewportWidth")
    viewport_height: Optional[float] = Field(default=None, alias="viewportHeight")
    offset_x: Optional[float] = Field(default=None, alias="offsetX")
    offset_y: Optional[float] = Field(default=None, alias="offsetY")
    marked_for_export: Optional[bool] = Field(default=None, alias="markedForExport")
    clip_path_resources: Optional[XdClipPathResources] = Field(default=None, alias="clipPathResources")
    rotation: Optional[float] = Field(default=None, alias="rotation")


class XdObjectMeta(XdModel):
    ux: Optional[XdObjectMetaUx] = Field(default=None, alias="ux")


class XdObjectGroup(XdModel):
    children: Optional[List[XdObject]] = Field(default=None, alias="children")


class XdObject(XdModel):
    """A node of the scene graph.

    ``type`` tells which payload is set: ``group`` carries ``group``,
    ``shape`` carries ``shape``, ``text`` carries ``text``. Symbol instances
    (``syncRef``) point at their master through ``sync_source_guid``.
    """

    type: Optional[str] = Field(default=None, alias="type")
    name: Optional[str] = Field(default=None, alias="name")
    id: Optional[str] = Field(default=None, alias="id")
    meta: Optional[XdObjectMeta] = Field(default=None, alias="meta")
    transform: Optional[XdTransform] = Field(default=None, alias="transform")
    group: Optional[XdObjectGroup] = Field(default=None, alias="group")
    style: Optional[XdStyle] = Field(default=None, alias="style")
    shape: Optional[XdShape] = Field(default=None, alias="shape")
    text: Optional[XdText] = Field(default=None, alias="text")
    guid: Optional[str] = Field(default=None, alias="guid")
    sync_source_guid: Optional[str] = Field(default=None, alias="syncSourceGuid")
    visible: Optional[bool] = Field(default=None, alias="visible")
    marked_for_export: Optional[bool] = Field(default=None, alias="markedForExport")

    @property
    def children(self) -> List[XdObject]:
        """Direct group children, or an empty list for leaf nodes."""
        if self.group is None or self.group.children is None:
            return []
        return self.group.children


XdClipPathResources.model_rebuild()
XdObjectMetaUx.model_rebuild()
XdObjectMeta.model_rebuild()
XdObjectGroup.model_rebuild()
XdObject.model_rebuild()
