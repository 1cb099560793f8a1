from pathlib import Path

import pytest
from PIL import Image

from edgenet.cli import edge_main, train_main
from edgenet.detectors import edge_if
from edgenet.imaging import load_binary_image
from edgenet.perceptron import load_weights


def _make_image(path: Path, size=(6, 5), split=3) -> Path:
    img = Image.new("RGB", size, (255, 255, 255))
    for y in range(size[1]):
        for x in range(split):
            img.putpixel((x, y), (0, 0, 0))
    img.save(path, format="PNG")
    return path


def _write_weights(path: Path, values=None) -> None:
    values = values or [0.0] * 10
    path.write_text("".join(f"{v:.4f}\n" for v in values), encoding="ascii")


def test_edge_wrong_argument_count(capsys):
    assert edge_main(["if", "only.png"]) == 0
    assert "Parametros Incorretos" in capsys.readouterr().out


def test_edge_missing_weights(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    src = _make_image(tmp_path / "in.png")
    out = tmp_path / "out.bmp"
    assert edge_main(["if", str(src), str(out)]) == 0
    assert "weights.net" in capsys.readouterr().out
    assert not out.exists()


def test_edge_missing_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert edge_main(["if", str(tmp_path / "nope.png"), str(tmp_path / "o.bmp")]) == 1
    assert "Could not create image surface..." in capsys.readouterr().out


def test_edge_if_writes_detected_image(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _write_weights(tmp_path / "weights.net")
    src = _make_image(tmp_path / "in.png")
    out = tmp_path / "out.bmp"
    assert edge_main(["if", str(src), str(out)]) == 0
    text = capsys.readouterr().out
    assert "Algorithm if at level 127" in text
    with Image.open(out) as saved:
        assert saved.format == "BMP"
        assert saved.size == (6, 5)
    expected = edge_if(load_binary_image(src, 127))
    # Saved pixels are 0/255, so reloading with level 127 inverts them.
    reloaded = load_binary_image(out, 128)
    assert bytes(255 - p for p in reloaded.pixels) == expected.pixels


def test_edge_level_argument(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _write_weights(tmp_path / "weights.net")
    src = _make_image(tmp_path / "in.png")
    out = tmp_path / "out.bmp"
    assert edge_main(["sobel", str(src), str(out), "200"]) == 0
    assert "Algorithm sobel at level 200" in capsys.readouterr().out
    assert out.exists()


def test_edge_invalid_algorithm(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _write_weights(tmp_path / "weights.net")
    src = _make_image(tmp_path / "in.png")
    out = tmp_path / "out.bmp"
    assert edge_main(["bogus", str(src), str(out)]) == 0
    assert "Algorithm bogus invalid..." in capsys.readouterr().out
    assert not out.exists()


@pytest.mark.parametrize(
    "name", ["if", "doubleif", "roberts", "roberts2", "sobel", "sobel2", "prewitt", "perceptron", "net"]
)
def test_edge_every_algorithm_saves(tmp_path, monkeypatch, name):
    monkeypatch.chdir(tmp_path)
    _write_weights(tmp_path / "weights.net")
    src = _make_image(tmp_path / "in.png")
    out = tmp_path / "out.bmp"
    assert edge_main([name, str(src), str(out)]) == 0
    assert load_binary_image(out).width == 6


def test_train_converges_immediately_on_blank_target(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    src = _make_image(tmp_path / "in.png")
    target = tmp_path / "target.png"
    Image.new("RGB", (6, 5), (255, 255, 255)).save(target)
    assert train_main([str(src), str(target)]) == 0
    text = capsys.readouterr().out
    assert "/ 0 epochs." in text
    assert "Saving weights.net" in text
    lines = (tmp_path / "weights.net").read_text(encoding="ascii").splitlines()
    assert lines == ["0.0000"] * 10


def test_train_writes_loadable_weights(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = _make_image(tmp_path / "in.png")
    target = _make_image(tmp_path / "target.png", split=2)
    assert train_main([str(src), str(target), "127"]) == 0
    perceptron = load_weights(tmp_path / "weights.net")
    assert len(perceptron.weights) == 10


def test_train_mismatched_sizes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    src = _make_image(tmp_path / "in.png", size=(6, 5))
    target = _make_image(tmp_path / "target.png", size=(4, 4))
    assert train_main([str(src), str(target)]) == 1
    assert "Images not corresponding" in capsys.readouterr().out
    assert not (tmp_path / "weights.net").exists()


def test_train_missing_image(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    src = _make_image(tmp_path / "in.png")
    assert train_main([str(src), str(tmp_path / "none.png")]) == 1
    assert "Error loading image" in capsys.readouterr().out


def test_train_too_few_arguments(capsys):
    assert train_main([]) == 1
    assert "BACKPROPAGATION TRAINING" in capsys.readouterr().out