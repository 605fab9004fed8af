"""
Tests for font source strategies and font configuration
"""

import pytest
from PIL import ImageFont

from font_sources import (
    BundledFontSource, EmbeddedFontSource, SystemFontSource, font_source_from_name,
)
from icon_config import (
    TEMPLATE_FILL_BLACK, TEMPLATE_FILL_WHITE, default_template_fill, system_font_candidates,
)
from icon_errors import FontUnavailableError


def test_bundled_font_is_scalable():
    font = BundledFontSource().load(30)
    assert isinstance(font, ImageFont.FreeTypeFont)
    assert font.size == 30
    assert font.getlength("100") > font.getlength("1")


def test_embedded_font_rejects_empty_and_garbage():
    with pytest.raises(FontUnavailableError):
        EmbeddedFontSource(b"").load(36)
    with pytest.raises(FontUnavailableError, match="<embedded>"):
        EmbeddedFontSource(b"\x00\x01\x02\x03 not a font").load(36)


def test_system_source_uses_first_readable_candidate(tmp_path):
    first = tmp_path / "first.ttf"
    second = tmp_path / "second.ttf"
    first.write_bytes(b"first font")
    second.write_bytes(b"second font")

    source = SystemFontSource([tmp_path / "missing.ttf", first, second])
    path, data = source.read_first_available()
    assert path == first
    assert data == b"first font"


def test_system_source_skips_unreadable_candidates(tmp_path):
    directory = tmp_path / "not-a-file.ttf"
    directory.mkdir()
    empty = tmp_path / "empty.ttf"
    empty.write_bytes(b"")
    real = tmp_path / "real.ttf"
    real.write_bytes(b"font bytes")

    path, data = SystemFontSource([directory, empty, real]).read_first_available()
    assert path == real
    assert data == b"font bytes"


def test_system_source_fails_when_all_candidates_missing(tmp_path):
    source = SystemFontSource([tmp_path / "a.ttf", tmp_path / "b.ttf"])
    with pytest.raises(FontUnavailableError, match="No usable system font"):
        source.load(36)


def test_system_source_with_no_candidates_fails():
    with pytest.raises(FontUnavailableError):
        SystemFontSource([]).load(36)


def test_system_source_reports_unparsable_font(tmp_path):
    broken = tmp_path / "broken.ttf"
    broken.write_bytes(b"this is not a truetype file")
    with pytest.raises(FontUnavailableError, match="broken.ttf"):
        SystemFontSource([broken]).load(36)


def test_font_source_from_name(tmp_path):
    assert isinstance(font_source_from_name(None), BundledFontSource)
    assert isinstance(font_source_from_name("bundled"), BundledFontSource)
    assert isinstance(font_source_from_name("system"), SystemFontSource)

    custom = font_source_from_name(str(tmp_path / "custom.ttf"))
    assert isinstance(custom, SystemFontSource)
    assert custom.candidates == [tmp_path / "custom.ttf"]


def test_system_font_candidates_per_platform():
    assert system_font_candidates("darwin")[0].startswith("/System/Library/Fonts")
    assert system_font_candidates("win32")[0].lower().endswith("arialbd.ttf")
    assert system_font_candidates("linux") == system_font_candidates("linux2")
    assert system_font_candidates("sunos5") == []


def test_candidate_lists_are_copies():
    candidates = system_font_candidates("linux")
    candidates.clear()
    assert system_font_candidates("linux")


def test_default_template_fill_is_platform_conditioned():
    assert default_template_fill("darwin") == TEMPLATE_FILL_BLACK
    assert default_template_fill("win32") == TEMPLATE_FILL_WHITE
    assert default_template_fill("linux") == TEMPLATE_FILL_WHITE
