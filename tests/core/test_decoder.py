import pytest
from pydantic import ValidationError

from xd_toolkit.core.decoder import decode_artboard, decode_manifest, decode_resources
from xd_toolkit.core.exceptions import XdFormatError
from xd_toolkit.core.models import XdShape


class TestManifestDecoding:

    def test_hyphenated_and_nested_keys(self):
        manifest = decode_manifest(
            '{"id": "m", "manifest-format-version": 24, "children": ['
            '{"path": "artwork", "children": [{"id": "a", "name": "Home", "path": "board1",'
            ' "components": [{"id": "c", "rel": "rendition", "width": 10, "height": 5}]}]}]}'
        )
        assert manifest.manifest_format_version == 24
        artwork = manifest.children[0]
        assert artwork.path == "artwork"
        board = artwork.children[0]
        assert (board.id, board.name, board.path) == ("a", "Home", "board1")
        assert board.components[0].rel == "rendition"
        assert board.children is None

    def test_unknown_keys_are_ignored(self):
        manifest = decode_manifest('{"id": "m", "somethingNew": {"deep": [1, 2]}}')
        assert manifest.id == "m"
        assert not hasattr(manifest, "somethingNew")

    def test_key_matching_is_case_exact(self):
        manifest = decode_manifest('{"ID": "upper", "Name": "x"}')
        assert manifest.id is None
        assert manifest.name is None

    def test_attribute_names_are_not_keys(self):
        manifest = decode_manifest('{"manifest_format_version": 3}')
        assert manifest.manifest_format_version is None

    def test_absent_fields_are_none(self):
        manifest = decode_manifest("{}")
        assert manifest.children is None
        assert manifest.manifest_format_version is None


class TestArtboardDecoding:

    def test_node_tree(self):
        document = decode_artboard(
            '{"version": "1.5.0", "resources": {"href": "/resources/graphicContent.agc"},'
            ' "children": [{"type": "artboard", "artboard": {"ref": "ab1", "children": ['
            '  {"type": "group", "name": "G", "group": {"children": ['
            '    {"type": "text", "text": {"rawText": "Hi", "paragraphs": [{"lines": [[{"from": 0, "to": 2}]]}]}},'
            '    {"type": "shape", "shape": {"type": "rect", "r": 4},'
            '     "meta": {"ux": {"nameL10N": "x", "constraintLeft": true, "repeatGrid": {"columns": 2}}}}'
            '  ]}}]}}]}'
        )
        assert document.resources.href == "/resources/graphicContent.agc"
        content = document.children[0]
        group = content.artboard.children[0]
        text, shape = group.children
        assert text.text.raw_text == "Hi"
        assert text.text.paragraphs[0].lines[0][0].from_ == 0
        assert shape.shape.r == 4
        assert shape.meta.ux.name_l10n == "x"
        assert shape.meta.ux.constraint_left is True
        assert shape.meta.ux.repeat_grid.columns == 2
        assert shape.children == []

    def test_corner_radii_list(self):
        shape = XdShape.model_validate({"type": "rect", "r": [1, 2, 3, 4]})
        assert shape.r == [1, 2, 3, 4]

    def test_models_are_frozen(self):
        document = decode_artboard('{"version": "1"}')
        with pytest.raises(ValidationError):
            document.version = "2"


class TestResourcesDecoding:

    def test_artboard_metadata_and_raw_sections(self):
        resources = decode_resources(
            '{"artboards": {"artboard-1": {"name": "Home", "width": 375, "viewportHeight": 900}},'
            ' "resources": {"gradients": {"g": {"type": "linear"}}, "clipPaths": {},'
            '  "meta": {"ux": {"symbols": [{"type": "group", "id": "s"}]}}}}'
        )
        assert resources.artboards["artboard-1"].name == "Home"
        assert resources.artboards["artboard-1"].viewport_height == 900
        assert resources.resources.gradients == {"g": {"type": "linear"}}
        assert [s.id for s in resources.symbols] == ["s"]

    def test_symbols_default_to_empty(self):
        assert decode_resources("{}").symbols == []


class TestDecodeFailures:

    def test_malformed_json(self):
        with pytest.raises(XdFormatError) as exc_info:
            decode_manifest("{not json", source="manifest")
        assert exc_info.value.path == "manifest"
        assert isinstance(exc_info.value.cause, ValidationError)

    def test_type_mismatch(self):
        with pytest.raises(XdFormatError):
            decode_artboard('{"children": {"not": "a list"}}', source="artwork/a/graphics/graphicContent.agc")

    def test_top_level_must_be_an_object(self):
        with pytest.raises(XdFormatError):
            decode_resources("[1, 2, 3]")
