import io

import pytest
from PIL import Image

from cellpic.cli import main
from cellpic.terminal import get_terminal_size


def _save(tmp_path, size, colour, name="img.png"):
    path = tmp_path / name
    Image.new("RGBA", size, colour).save(path)
    return path


def test_luma_output(tmp_path, capsys):
    path = _save(tmp_path, (8, 8), (255, 255, 255, 255))
    main([str(path), "--size", "4x2"])
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 2
    assert all(line.count("█") == 4 for line in lines)
    assert "\033[38;2;" not in lines[0]


def test_rgb_output(tmp_path, capsys):
    path = _save(tmp_path, (2, 2), (255, 0, 0, 255))
    main([str(path), "--size", "1x1", "--mode", "rgb"])
    out = capsys.readouterr().out
    assert out == "\033[38;2;255;0;0m\033[48;2;255;0;0m▀\033[0m\n"


def test_border_and_title(tmp_path, capsys):
    path = _save(tmp_path, (4, 4), (255, 255, 255, 255))
    main([str(path), "--size", "6x4", "--title", "Hi"])
    out = capsys.readouterr().out
    assert "┌Hi" in out
    assert "┘" in out


def test_fit_keeps_aspect_ratio(tmp_path, capsys):
    path = _save(tmp_path, (8, 4), (255, 255, 255, 255))
    main([str(path), "--size", "4x2", "--mode", "rgb", "--fit"])
    out = capsys.readouterr().out
    # 8x4 contained in a 4x4 canvas is 4x2, centred onto canvas rows 1 and 2
    assert out.count("▀") == 4


def test_background_colour_option(tmp_path, capsys):
    path = _save(tmp_path, (1, 1), (0, 0, 0, 0))
    main([str(path), "--size", "1x1", "--bg", "#0000ff"])
    assert "\033[48;2;0;0;255m" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.png"), "--size", "4x2"])
    assert exc.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "junk.png"
    path.write_bytes(b"not an image")
    with pytest.raises(SystemExit) as exc:
        main([str(path), "--size", "4x2"])
    assert exc.value.code == 1
    assert "Cannot read image" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["--size", "big"], ["--mode", "sixel"], ["--bg", "mauve"]])
def test_invalid_options(tmp_path, argv):
    path = _save(tmp_path, (1, 1), (0, 0, 0, 255))
    with pytest.raises(SystemExit) as exc:
        main([str(path), *argv])
    assert exc.value.code == 2


def test_terminal_size_fallback_when_not_a_tty():
    assert get_terminal_size(io.StringIO()) == (80, 24)
