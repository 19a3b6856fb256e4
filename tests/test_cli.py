import io

from relevo.cli import main

PALETTE_TEXT = "3\n0 0 0 255\n8 0 255 0\n16 255 255 255\n"


def write_palette(tmp_path):
    path = tmp_path / "palette.txt"
    path.write_text(PALETTE_TEXT)
    return path


def pixel_lines(text):
    return text.splitlines()[3:]


def test_main_writes_ppm(tmp_path):
    palette = write_palette(tmp_path)
    out = tmp_path / "out.ppm"
    assert main([str(palette), "2", str(out), "--seed", "5"]) == 0
    lines = out.read_text().splitlines()
    assert lines[:3] == ["P3", "5 5", "255"]
    pixels = pixel_lines(out.read_text())
    assert len(pixels) == 5 * 5
    for line in pixels:
        channels = [int(v) for v in line.split()]
        assert len(channels) == 3
        assert all(0 <= v <= 255 for v in channels)


def test_same_seed_same_image(tmp_path):
    palette = write_palette(tmp_path)
    first = tmp_path / "a.ppm"
    second = tmp_path / "b.ppm"
    assert main([str(palette), "3", str(first), "--seed", "9"]) == 0
    assert main([str(palette), "3", str(second), "--seed", "9"]) == 0
    assert first.read_text() == second.read_text()


def test_prompts_on_stdin(tmp_path, monkeypatch):
    palette = write_palette(tmp_path)
    out = tmp_path / "asked.ppm"
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{palette}\n1\n{out}\n"))
    assert main([]) == 0
    assert out.read_text().splitlines()[:3] == ["P3", "3 3", "255"]


def test_missing_palette(tmp_path, capsys):
    out = tmp_path / "out.ppm"
    assert main([str(tmp_path / "absent.txt"), "2", str(out)]) == 1
    assert not out.exists()
    assert "relevo:" in capsys.readouterr().err


def test_bad_exponent(tmp_path, capsys):
    palette = write_palette(tmp_path)
    out = tmp_path / "out.ppm"
    assert main([str(palette), "abc", str(out)]) == 1
    assert not out.exists()
    assert "exponent" in capsys.readouterr().err


def test_input_ends_early(tmp_path, monkeypatch):
    palette = write_palette(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{palette}\n"))
    assert main([]) == 1