# tests/test_cli.py
"""
Tests for the imagefunc command line.
"""
import pytest
from PIL import Image as PILImage

from imagefunc.cli import main
from imagefunc.color import BLACK, CARAMEL, NAVY
from imagefunc.logger import package_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    package_logging.reset()


def test_list_presets(capsys):
    assert main(["list-presets"]) == 0
    out = capsys.readouterr().out
    assert "polar_checker" in out
    assert "lighten" in out


def test_render_writes_file(tmp_path, capsys):
    out = tmp_path / "rings.png"
    assert main(["render", "--preset", "rings", "--width", "12", "--height", "10", "-o", str(out)]) == 0

    with PILImage.open(out) as img:
        assert img.size == (12, 10)
    assert "Rendered:" in capsys.readouterr().out


def test_render_unknown_preset(tmp_path, capsys):
    assert main(["render", "--preset", "nope", "-o", str(tmp_path / "x.png")]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_render_bad_size(tmp_path, capsys):
    assert main(["render", "--preset", "rings", "--width", "0", "-o", str(tmp_path / "x.png")]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_gallery(tmp_path):
    assert main(["gallery", "-o", str(tmp_path), "--size", "4"]) == 0
    assert (tmp_path / "checker.png").exists()
    assert (tmp_path / "darken.png").exists()


def test_log_file(tmp_path):
    log_path = tmp_path / "run.log"
    out = tmp_path / "c.png"
    assert main(["--log-file", str(log_path), "render", "-p", "circle",
                 "--width", "4", "--height", "4", "-o", str(out)]) == 0
    package_logging.disable_file_logging()
    assert "Wrote" in log_path.read_text()


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])


def test_render_with_tint(tmp_path, capsys):
    out = tmp_path / "tinted.png"
    assert main(["render", "-p", "constant", "--width", "4", "--height", "4",
                 "--tint", "navy", "--tint-amount", "1.0", "-o", str(out)]) == 0

    with PILImage.open(out) as img:
        assert img.convert("RGB").getpixel((1, 2)) == NAVY.rgb
    assert "tint:" in capsys.readouterr().out


def test_render_partial_hex_tint(tmp_path):
    out = tmp_path / "half.png"
    assert main(["render", "-p", "constant", "--width", "2", "--height", "2",
                 "--tint", "#000000", "--tint-amount", "0.5", "-o", str(out)]) == 0

    with PILImage.open(out) as img:
        assert img.convert("RGB").getpixel((0, 0)) == CARAMEL.weighted_mean(BLACK, 0.5).rgb


def test_render_rejects_bad_tint(tmp_path):
    with pytest.raises(SystemExit):
        main(["render", "-p", "rings", "--tint", "not-a-colour", "-o", str(tmp_path / "x.png")])
