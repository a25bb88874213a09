"""Tests for the worldflags command line interface."""

import logging

from PIL import Image

from worldflags import __version__
from worldflags.cli import apply_args_to_settings, main, parse_args
from worldflags.config import Settings


def test_version(capsys):
    assert main(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_list_countries(flags_dir, capsys):
    assert main(["-p", str(flags_dir), "--locale", "fr"]) == 0

    out = capsys.readouterr().out
    assert "Pays" in out
    assert "Italie" in out
    assert "150x100" in out


def test_show_by_index(flags_dir, capsys):
    assert main(["-p", str(flags_dir), "--show", "1"]) == 0

    out = capsys.readouterr().out
    assert "Italy" in out
    assert "300x200" in out


def test_list_keeps_rows_without_images(flags_dir, capsys):
    (flags_dir / "Flag@2x@3x.png").write_bytes(b"")
    (flags_dir / "Spain@3x.png").write_bytes(b"not a png")

    assert main(["-p", str(flags_dir)]) == 0

    out = capsys.readouterr().out
    assert "Flag" in out
    assert "Spain" in out
    assert "missing" in out
    assert "150x100" in out


def test_export_without_image_is_reported(flags_dir, tmp_path, capsys):
    (flags_dir / "Spain@3x.png").write_bytes(b"not a png")
    output = tmp_path / "shared.jpg"

    assert main(["-p", str(flags_dir), "--export", "Spain", "-o", str(output)]) == 1
    assert "No image found" in capsys.readouterr().out
    assert not output.exists()


def test_show_unknown_country(flags_dir, capsys):
    assert main(["-p", str(flags_dir), "--show", "Japan"]) == 1
    assert "not in the catalog" in capsys.readouterr().out


def test_show_index_out_of_range(flags_dir, capsys):
    assert main(["-p", str(flags_dir), "--show", "7"]) == 1
    assert "out of range" in capsys.readouterr().out


def test_missing_assets_directory(tmp_path, capsys):
    assert main(["-p", str(tmp_path / "missing")]) == 1
    assert "Assets directory unavailable" in capsys.readouterr().out


def test_export_writes_jpeg(flags_dir, tmp_path):
    output = tmp_path / "shared.jpg"
    assert main(["-p", str(flags_dir), "--export", "France", "-o", str(output)]) == 0

    with Image.open(output) as image:
        assert image.format == "JPEG"
        assert image.size == (300, 200)


def test_thumbnails(flags_dir, tmp_path):
    out_dir = tmp_path / "thumbs"
    assert main(["-p", str(flags_dir), "--thumbnails", str(out_dir), "--scale", "0.1"]) == 0

    assert sorted(p.name for p in out_dir.iterdir()) == ["France.png", "Italy.png"]
    with Image.open(out_dir / "France.png") as image:
        assert image.size == (30, 20)


def test_thumbnails_skip_rows_without_images(flags_dir, tmp_path):
    (flags_dir / "Spain@3x.png").write_bytes(b"not a png")
    out_dir = tmp_path / "thumbs"

    assert main(["-p", str(flags_dir), "--thumbnails", str(out_dir)]) == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["France.png", "Italy.png"]


def test_invalid_scale_is_reported(flags_dir, capsys):
    assert main(["-p", str(flags_dir), "--scale", "2"]) == 1
    assert "0...1" in capsys.readouterr().out


def test_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--config"]) == 0
    assert "Assets Directory" in capsys.readouterr().out


def test_apply_args_to_settings(tmp_path):
    args = parse_args(["-p", str(tmp_path), "--order", "listing", "--scale", "0.3", "-v"])
    settings = apply_args_to_settings(args, Settings())

    assert settings.assets_dir == tmp_path.resolve()
    assert settings.catalog_order == "listing"
    assert settings.thumbnail_scale == 0.3
    assert settings.verbose is True


def test_importing_cli_does_not_configure_global_logging(monkeypatch):
    import importlib
    import sys

    calls = {"count": 0}

    def fake_basic_config(*args, **kwargs):
        calls["count"] += 1

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    sys.modules.pop("worldflags.cli", None)

    importlib.import_module("worldflags.cli")
    assert calls["count"] == 0
