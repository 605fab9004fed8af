"""
Tests for the icon rendering CLI
"""

from PIL import Image
import pytest

from icon_config import ICON_SIZE, TEMPLATE_FILL_BLACK, TEMPLATE_FILL_WHITE
from render_icon import main


def test_render_writes_png(tmp_path, capsys):
    output = tmp_path / "low.png"
    main(["render", "5", "-o", str(output)])

    with Image.open(output) as image:
        assert image.size == (ICON_SIZE, ICON_SIZE)
    assert "color mode" in capsys.readouterr().out


def test_render_template_fill_option(tmp_path, capsys):
    black = tmp_path / "black.png"
    white = tmp_path / "white.png"
    main(["--fill", "black", "render", "80", "-o", str(black)])
    main(["--fill", "white", "render", "80", "-o", str(white)])

    with Image.open(black) as image:
        assert image.convert("RGBA").getpixel((0, 0)) == TEMPLATE_FILL_BLACK
    with Image.open(white) as image:
        assert image.convert("RGBA").getpixel((0, 0)) == TEMPLATE_FILL_WHITE
    assert "template mode" in capsys.readouterr().out


def test_all_writes_every_percentage(tmp_path):
    main(["all", "-d", str(tmp_path / "icons")])
    written = sorted((tmp_path / "icons").glob("battery_*.png"))
    assert len(written) == 101
    assert (tmp_path / "icons" / "battery_100.png").exists()


def test_out_of_range_percentage_rejected():
    with pytest.raises(SystemExit) as exc_info:
        main(["render", "101"])
    assert exc_info.value.code == 2


def test_missing_font_exits_with_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--font", str(tmp_path / "missing.ttf"), "render", "50", "-o", str(tmp_path / "x.png")])
    assert exc_info.value.code == 1
    assert not (tmp_path / "x.png").exists()


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "render" in capsys.readouterr().out


def test_unwritable_output_exits_with_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["render", "50", "-o", str(tmp_path / "no-such-dir" / "x.png")])
    assert exc_info.value.code == 1
