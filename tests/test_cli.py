# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""Tests for the command-line interface."""

import numpy as np
from PIL import Image, ImageFont

import webswatch.palette.render as render_module
from webswatch.cli import FONT_ENV_VAR, main


def _write_image(path):
    img = np.zeros((20, 40, 3), dtype=np.uint8)
    img[:, :30] = (100, 50, 200)
    img[:, 30:] = (0, 0, 255)
    Image.fromarray(img).save(path)
    return path


class TestColorCommands:

    def test_mix(self, capsys):
        assert main(["mix", "#6432c8", "#0000ff"]) == 0
        assert capsys.readouterr().out.strip() == "#3219e3"

    def test_mix_ratio(self, capsys):
        assert main(["mix", "#000", "#fff", "--ratio", "1.0"]) == 0
        assert capsys.readouterr().out.strip() == "#ffffff"

    def test_mix_bad_ratio(self, capsys):
        assert main(["mix", "#000", "#fff", "--ratio", "1.5"]) == 2
        assert "ratio" in capsys.readouterr().err

    def test_adjust(self, capsys):
        assert main(["adjust", "#6432c8", "--dr", "50", "--dg", "30", "--db", "-100"]) == 0
        assert capsys.readouterr().out.strip() == "#965064"

    def test_bad_hex(self, capsys):
        assert main(["adjust", "#zzz"]) == 2
        assert "not a hex color" in capsys.readouterr().err


class TestPaletteCommand:

    def test_success(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr(render_module, "load_bold_font", lambda path, size: ImageFont.load_default())
        out = tmp_path / "palette.png"
        code = main([
            "palette", str(_write_image(tmp_path / "in.png")),
            "-o", str(out), "-k", "2", "--method", "mode", "--font", "any.ttf",
        ])
        assert code == 0
        assert capsys.readouterr().out.split() == ["#6432c8", "#0000ff"]
        with Image.open(out) as img:
            assert img.size == (320, 140)

    def test_font_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setattr(render_module, "load_bold_font", lambda path, size: ImageFont.load_default())
        monkeypatch.setenv(FONT_ENV_VAR, "env.ttf")
        out = tmp_path / "palette.png"
        code = main(["palette", str(_write_image(tmp_path / "in.png")), "-o", str(out)])
        assert code == 0
        assert out.exists()

    def test_missing_font(self, tmp_path, capsys, monkeypatch):
        monkeypatch.delenv(FONT_ENV_VAR, raising=False)
        code = main(["palette", str(_write_image(tmp_path / "in.png")), "-o", str(tmp_path / "p.png")])
        assert code == 1
        assert "render failed" in capsys.readouterr().err

    def test_missing_image(self, tmp_path, capsys):
        code = main([
            "palette", str(tmp_path / "missing.png"), "-o", str(tmp_path / "p.png"), "--font", "x.ttf",
        ])
        assert code == 1
        assert "extraction failed" in capsys.readouterr().err

    def test_invalid_k(self, tmp_path, capsys):
        code = main([
            "palette", str(_write_image(tmp_path / "in.png")), "-o", str(tmp_path / "p.png"), "-k", "0",
        ])
        assert code == 2
