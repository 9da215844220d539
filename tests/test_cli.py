import json

import pytest
from PIL import Image

from theme_grab import cli
from theme_grab.sources import ExtractionError


def _write_colors(path, colors):
    path.write_text(json.dumps({"colors": colors}))
    return path


def test_from_colors_writes_css_and_json(tmp_path, capsys):
    colors_path = _write_colors(
        tmp_path / "google.json",
        ["#1a73e8", "#1a73e8", "#ffffff", "#ffffff", "#ffffff", "#202124"],
    )
    out_dir = tmp_path / "out"

    cli.main(["--from-colors", str(colors_path), "-o", str(out_dir)])

    css = (out_dir / "google.css").read_text()
    data = json.loads((out_dir / "google.json").read_text())
    assert "--primary: 214.1 81.7% 50.6%;" in css
    assert data["sourceColors"] == ["#1a73e8", "#202124"]
    assert data["_source"] == "google.json"
    assert "Exported:" in capsys.readouterr().out


def test_image_source_uses_quantizer(tmp_path):
    path = tmp_path / "shot.png"
    img = Image.new("RGB", (60, 60), (26, 115, 232))
    img.paste(Image.new("RGB", (30, 60), (52, 168, 83)), (30, 0))
    img.save(path)

    cli.main([str(path), "--name", "shot-theme", "--colors", "4", "--sample-rate", "1"])

    data = json.loads((tmp_path / "shot-theme.json").read_text())
    assert set(data["sourceColors"]) == {"#1a73e8", "#34a853"}


def test_url_source(tmp_path, monkeypatch):
    monkeypatch.setattr(
        cli, "extract_colors_from_url", lambda url, timeout: ["#6366f1", "#f8fafc", "#0f172a"]
    )
    cli.main(["--url", "https://example.com/pricing", "-o", str(tmp_path)])
    assert (tmp_path / "example.com.css").exists()
    assert (tmp_path / "example.com.json").exists()


def test_url_without_colors_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(cli, "extract_colors_from_url", lambda url, timeout: [])
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--url", "https://example.com", "-o", str(tmp_path)])
    assert excinfo.value.code == 1
    assert "No colors found" in capsys.readouterr().err


def test_fetch_failure_exits(tmp_path, monkeypatch, capsys):
    def fail(url, timeout):
        raise ExtractionError("Failed to fetch https://example.com: 503")

    monkeypatch.setattr(cli, "extract_colors_from_url", fail)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--url", "https://example.com", "-o", str(tmp_path)])
    assert excinfo.value.code == 1
    assert "503" in capsys.readouterr().err


def test_empty_colors_file_exits(tmp_path):
    path = _write_colors(tmp_path / "empty.json", [])
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--from-colors", str(path)])
    assert excinfo.value.code == 1


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["shot.png", "--url", "https://example.com"],
        ["--url", "https://example.com", "--from-colors", "colors.json"],
        ["shot.png", "--colors", "0"],
        ["shot.png", "--quantizer", "octree"],
    ],
)
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2


def test_unreadable_image_exits(tmp_path, capsys):
    path = tmp_path / "x.png"
    path.write_text("not an image")
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path)])
    assert excinfo.value.code == 1
    assert "Not a readable image" in capsys.readouterr().err
