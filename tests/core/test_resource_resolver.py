import pytest

from xd_toolkit.core.container import XdFile
from xd_toolkit.core.exceptions import ResourceMissingError
from xd_toolkit.core.models import (
    XdStyleFill,
    XdStyleFillPattern,
    XdStyleFillPatternMeta,
    XdStyleFillPatternMetaUx,
)

from conftest import PNG_BYTES


def pattern_meta(uid):
    return XdStyleFillPatternMeta(ux=XdStyleFillPatternMetaUx(uid=uid))


@pytest.fixture
def xd_file(two_board_xd):
    with XdFile(two_board_xd) as opened:
        yield opened


class TestGetResource:

    def test_returns_asset_bytes(self, xd_file):
        assert xd_file.get_resource(pattern_meta("img-1")) == PNG_BYTES

    def test_repeated_resolution_is_identical(self, xd_file):
        first = xd_file.get_resource(pattern_meta("img-1"))
        second = xd_file.get_resource(pattern_meta("img-1"))
        assert first == second

    @pytest.mark.parametrize("meta", [
        None,
        XdStyleFillPatternMeta(),
        pattern_meta(None),
        pattern_meta(""),
        pattern_meta("   "),
    ])
    def test_absent_reference_is_none(self, xd_file, meta):
        assert xd_file.get_resource(meta) is None

    def test_dangling_id(self, xd_file):
        with pytest.raises(ResourceMissingError) as exc_info:
            xd_file.get_resource(pattern_meta("does-not-exist"))
        assert exc_info.value.uid == "does-not-exist"
        assert "does-not-exist" in str(exc_info.value)
        assert exc_info.value.path == "resources/does-not-exist"

    def test_resolves_from_decoded_pattern(self, xd_file):
        card = xd_file.artboards[0].artboard.children[0].artboard.children[1]
        photo = card.children[0]
        assert xd_file.get_resource(photo.style.fill.pattern.meta) == PNG_BYTES


class TestGetResourceForFill:

    def test_pattern_fill(self, xd_file):
        fill = XdStyleFill(type="pattern", pattern=XdStyleFillPattern(meta=pattern_meta("img-1")))
        assert xd_file.get_resource_for_fill(fill) == PNG_BYTES

    def test_solid_fill_has_no_asset(self, xd_file):
        assert xd_file.get_resource_for_fill(XdStyleFill(type="solid")) is None
        assert xd_file.get_resource_for_fill(None) is None
