"""Shared fixtures: builders for synthetic ``.xd`` archives.

Archives are written into ``tmp_path`` with :mod:`zipfile`; JSON entries are
given as dictionaries and serialized on build.
"""

import json
import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytest

from xd_toolkit.config import ConfigManager

SHARED_RESOURCES_HREF = "/resources/graphicContent.agc"
SHARED_RESOURCES_ENTRY = "resources/graphicContent.agc"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 17


def rect_object(name: str = "Rect", fill_color=(255, 0, 0)) -> Dict[str, Any]:
    r, g, b = fill_color
    return {
        "type": "shape",
        "name": name,
        "id": f"id-{name}",
        "transform": {"a": 1, "b": 0, "c": 0, "d": 1, "tx": 10, "ty": 20},
        "style": {
            "fill": {"type": "solid", "color": {"mode": "RGB", "value": {"r": r, "g": g, "b": b}}},
            "stroke": {"type": "solid", "width": 1, "align": "inside", "dash": [2, 1]},
        },
        "shape": {"type": "rect", "x": 0, "y": 0, "width": 100, "height": 40, "r": [4, 4, 0, 0]},
    }


def pattern_object(name: str = "Photo", uid: Optional[str] = "img-1") -> Dict[str, Any]:
    ux: Dict[str, Any] = {"scaleBehavior": "cover", "hrefLastModifiedDate": 1600000000}
    if uid is not None:
        ux["uid"] = uid
    return {
        "type": "shape",
        "name": name,
        "id": f"id-{name}",
        "style": {
            "fill": {
                "type": "pattern",
                "pattern": {"width": 64, "height": 32, "href": f"/resources/{uid}", "meta": {"ux": ux}},
            },
        },
        "shape": {"type": "rect", "x": 0, "y": 0, "width": 64, "height": 32},
    }


def text_object(name: str = "Title", raw_text: str = "Hello") -> Dict[str, Any]:
    return {
        "type": "text",
        "name": name,
        "id": f"id-{name}",
        "style": {
            "font": {"family": "Roboto", "postscriptName": "Roboto-Bold", "size": 18, "style": "Bold"},
            "textAttributes": {"paragraphAlign": "center", "lineHeight": 24},
        },
        "text": {
            "frame": {"type": "positioned"},
            "paragraphs": [{"lines": [[{"from": 0, "to": 5, "x": 0, "y": 18}]]}],
            "rawText": raw_text,
        },
    }


def group_object(name: str, children: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": "group", "name": name, "id": f"id-{name}", "group": {"children": children}}


def artboard_document(href: Optional[str] = SHARED_RESOURCES_HREF,
                      objects: Optional[List[Dict[str, Any]]] = None,
                      ref: str = "artboard-1") -> Dict[str, Any]:
    document: Dict[str, Any] = {
        "version": "1.5.0",
        "children": [
            {
                "type": "artboard",
                "id": f"content-{ref}",
                "style": {"fill": {"type": "solid", "color": {"mode": "RGB", "value": {"r": 255, "g": 255, "b": 255}}}},
                "artboard": {"children": objects or [], "ref": ref},
            }
        ],
        "artboards": {"href": "/artwork/artboard.agc"},
    }
    if href is not None:
        document["resources"] = {"href": href}
    return document


def resources_document(artboard_refs=("artboard-1",)) -> Dict[str, Any]:
    return {
        "version": "1.5.0",
        "children": [],
        "resources": {
            "meta": {
                "ux": {
                    "colorSwatches": [],
                    "documentLibrary": {"version": 1, "isStickerSheet": False, "elements": []},
                    "gridDefaults": {},
                    "symbols": [
                        {
                            "type": "group",
                            "id": "symbol-master",
                            "meta": {"ux": {"symbolId": "sym-1", "isMaster": True}},
                            "group": {"children": [rect_object("SymbolRect")]},
                        }
                    ],
                    "symbolsMetadata": {"usingNestedSymbolSyncing": True},
                }
            },
            "gradients": {"g1": {"type": "linear"}},
            "clipPaths": {},
        },
        "artboards": {
            ref: {"name": f"Board {i}", "x": 0, "y": i * 900, "width": 375, "height": 812, "viewportHeight": 812}
            for i, ref in enumerate(artboard_refs, start=1)
        },
    }


class XdArchiveBuilder:
    """Collects entries for a synthetic XD container."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.entries: Dict[str, Union[str, bytes, Dict[str, Any]]] = {}
        self.artboards: List[Dict[str, Any]] = []
        self.include_artwork = True

    def add_artboard(self, path: str, name: Optional[str] = None,
                     document: Optional[Union[str, Dict[str, Any]]] = None,
                     **document_kwargs: Any) -> "XdArchiveBuilder":
        self.artboards.append({"id": f"id-{path}", "name": name or path.title(), "path": path})
        if document is None:
            document = artboard_document(**document_kwargs)
        self.entries[f"artwork/{path}/graphics/graphicContent.agc"] = document
        return self

    def add_manifest_child(self, path: str, name: Optional[str] = None) -> "XdArchiveBuilder":
        """Declare an artboard in the manifest without storing its document."""
        self.artboards.append({"id": f"id-{path}", "name": name or path.title(), "path": path})
        return self

    def add_resources(self, entry: str = SHARED_RESOURCES_ENTRY,
                      document: Optional[Union[str, Dict[str, Any]]] = None) -> "XdArchiveBuilder":
        self.entries[entry] = document if document is not None else resources_document()
        return self

    def add_asset(self, uid: str, data: bytes = PNG_BYTES) -> "XdArchiveBuilder":
        self.entries[f"resources/{uid}"] = data
        return self

    def manifest(self) -> Dict[str, Any]:
        children: List[Dict[str, Any]] = [{"path": "resources", "name": "resources"}]
        if self.include_artwork:
            children.insert(0, {"path": "artwork", "name": "artwork", "children": self.artboards})
        return {
            "id": "doc-1",
            "name": "Sample",
            "type": "application/vnd.adobe.sparkler.project+dcx",
            "manifest-format-version": 24,
            "state": "unmodified",
            "children": children,
        }

    def build(self, name: str = "sample.xd") -> Path:
        path = self.directory / name
        entries = dict(self.entries)
        entries.setdefault("manifest", self.manifest())
        with zipfile.ZipFile(path, "w") as zf:
            for entry, content in entries.items():
                if isinstance(content, dict):
                    content = json.dumps(content)
                zf.writestr(entry, content)
        return path


@pytest.fixture
def xd_builder(tmp_path):
    """Provides an empty archive builder writing into ``tmp_path``."""
    return XdArchiveBuilder(tmp_path)


@pytest.fixture
def two_board_xd(xd_builder):
    """Two artboards sharing one resources document; board1 uses a pattern fill."""
    objects = [
        rect_object("Background"),
        group_object("Card", [pattern_object("Photo", "img-1"), text_object("Title")]),
    ]
    xd_builder.add_artboard("board1", name="Home", objects=objects, ref="artboard-1")
    xd_builder.add_artboard("board2", name="Detail", objects=[text_object("Caption")], ref="artboard-2")
    xd_builder.add_resources(document=resources_document(("artboard-1", "artboard-2")))
    xd_builder.add_asset("img-1")
    return xd_builder.build()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config overrides at an empty directory and reset singletons."""
    monkeypatch.setenv("XD_TOOLKIT_CONFIG_DIR", str(tmp_path / "user_config"))
    monkeypatch.delenv("XD_TOOLKIT_LOG_DIR", raising=False)
    monkeypatch.delenv("XD_TOOLKIT_DEBUG_MODULES", raising=False)
    ConfigManager.reset()
    root_logger = logging.getLogger()
    root_handlers = list(root_logger.handlers)
    root_level = root_logger.level
    yield
    ConfigManager.reset()
    for handler in list(root_logger.handlers):
        if handler not in root_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(root_level)
    package_logger = logging.getLogger("xd_toolkit")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
