"""フレーム保存（`{capture_root}/{seed}/{frame:06d}.npz`）。"""

from __future__ import annotations

import numpy as np
import pytest

from engine.core.tessellate import CommitMode
from engine.runtime.context import SketchConfig
from engine.runtime.events import TextEvent
from engine.runtime.headless import HeadlessBackend, load_frame
from engine.runtime.loop import run_loop


def _run(sketch, batches, cfg):
    backend = HeadlessBackend(batches, size=cfg.size)
    ctx = run_loop(cfg, sketch, backend, frame_delay=0.0, sleep=lambda _s: None)
    return ctx, backend


def test_frames_saved_under_seed_directory(tmp_path, square_sketch) -> None:
    cfg = SketchConfig(size=32, capture_root=tmp_path / "captures", seed=42)
    _run(square_sketch, [[], [], []], cfg)
    out = tmp_path / "captures" / "42"
    assert out.is_dir()
    assert sorted(p.name for p in out.iterdir()) == ["000000.npz", "000001.npz", "000002.npz"]


def test_existing_capture_directory_is_reused(tmp_path, square_sketch) -> None:
    (tmp_path / "42").mkdir()
    (tmp_path / "42" / "keep.txt").write_text("x")
    _run(square_sketch, [[]], SketchConfig(size=8, capture_root=tmp_path, seed=42))
    assert (tmp_path / "42" / "keep.txt").exists()
    assert (tmp_path / "42" / "000000.npz").exists()


def test_reseed_switches_directory_and_restarts_numbering(tmp_path, square_sketch) -> None:
    cfg = SketchConfig(size=8, capture_root=tmp_path, seed=42)
    ctx, _ = _run(square_sketch, [[], [TextEvent("r")], []], cfg)
    assert sorted(p.name for p in (tmp_path / "42").iterdir()) == ["000000.npz"]
    new_dir = tmp_path / str(ctx.current_seed)
    assert sorted(p.name for p in new_dir.iterdir()) == ["000000.npz", "000001.npz"]


def test_no_capture_root_writes_nothing(tmp_path, square_sketch) -> None:
    _, backend = _run(square_sketch, [[]], SketchConfig(size=8, seed=1))
    assert backend.saved == []
    assert list(tmp_path.iterdir()) == []


def test_saved_frame_round_trips_queue(tmp_path, square_sketch) -> None:
    cfg = SketchConfig(size=16, capture_root=tmp_path, seed=3)
    _, backend = _run(square_sketch, [[]], cfg)
    (entries,) = backend.submitted
    (style, tess) = entries[0]

    loaded = load_frame(backend.saved[0])
    assert len(loaded) == 1
    color, parts = loaded[0]
    assert np.allclose(color, style.color)
    (coords, offsets, thickness, mode) = parts[0]
    part = tess.parts[0]
    assert np.array_equal(coords, part.geometry.coords)
    assert np.array_equal(offsets, part.geometry.offsets)
    assert thickness == part.thickness
    assert mode == (0 if part.mode is CommitMode.FILL else 1)


def test_save_failure_propagates(tmp_path, square_sketch) -> None:
    class ReadOnly(HeadlessBackend):
        def save_frame(self, directory, frame):
            raise PermissionError("read-only")

    cfg = SketchConfig(size=8, capture_root=tmp_path, seed=1)
    with pytest.raises(PermissionError):
        run_loop(cfg, square_sketch, ReadOnly([[]]), frame_delay=0.0, sleep=lambda _s: None)
