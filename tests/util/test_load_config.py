from __future__ import annotations

import logging
from pathlib import Path

from util.paths import capture_dir, ensure_capture_dir, frame_filename
from util.utils import load_config, sketch_section


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_load_config_root_overrides_default_top_level(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "sketch:\n  size: 256\n  seed: 1\nother: 1\n")
    _write(tmp_path / "config.yaml", "sketch:\n  size: 128\n")
    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（sketch 全体が差し替わる）
    assert cfg["sketch"] == {"size": 128}
    assert cfg["other"] == 1


def test_load_config_missing_files_is_empty(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}


def test_load_config_invalid_yaml_is_skipped(tmp_path: Path, caplog) -> None:
    _write(tmp_path / "configs" / "default.yaml", "sketch: [unclosed\n")
    with caplog.at_level(logging.WARNING, logger="util.utils"):
        assert load_config(tmp_path) == {}
    assert any("config load failed" in r.getMessage() for r in caplog.records)


def test_load_config_non_mapping_is_ignored(tmp_path: Path) -> None:
    _write(tmp_path / "config.yaml", "- a\n- b\n")
    assert load_config(tmp_path) == {}


def test_repository_default_config_has_sketch_section() -> None:
    section = sketch_section(load_config())
    assert isinstance(section, dict)
    assert "background" in section


def test_sketch_section_tolerates_bad_shapes() -> None:
    assert sketch_section({}) == {}
    assert sketch_section({"sketch": None}) == {}
    assert sketch_section({"sketch": [1, 2]}) == {}
    assert sketch_section({"sketch": {"size": 64}}) == {"size": 64}


def test_capture_paths(tmp_path: Path) -> None:
    assert capture_dir(tmp_path, 42) == tmp_path / "42"
    out = ensure_capture_dir(tmp_path / "nested" / "root", 7)
    assert out.is_dir()
    assert ensure_capture_dir(tmp_path / "nested" / "root", 7) == out
    assert frame_filename(3, ".png") == "000003.png"
    assert frame_filename(1234567, ".npz") == "1234567.npz"
