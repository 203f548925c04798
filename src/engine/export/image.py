"""
どこで: `engine.export.image`。
何を: FBO から読み出した RGBA 画素を PNG として保存する。
なぜ: フレーム保存をウィンドウのバッファ状態（フリップ後の未定義内容）から切り離すため。
"""

from __future__ import annotations

from pathlib import Path

import pyglet

from util.paths import frame_filename


def save_rgba_png(data: bytes, width: int, height: int, path: Path) -> Path:
    """RGBA バイト列（下から上の行順）を PNG に書き出す。"""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size: {width}x{height}")
    expected = width * height * 4
    if len(data) != expected:
        raise ValueError(f"pixel buffer has {len(data)} bytes, expected {expected}")
    img = pyglet.image.ImageData(width, height, "RGBA", data, pitch=width * 4)
    try:
        img.save(str(path))
    except Exception as e:
        raise RuntimeError(f"PNG 書き出しに失敗: {path}: {e}") from e
    return path


def save_frame_png(data: bytes, size: int, directory: Path, frame: int) -> Path:
    """`{directory}/{frame:06d}.png` として保存する。"""
    path = Path(directory) / frame_filename(frame, ".png")
    return save_rgba_png(data, size, size, path)


__all__ = ["save_rgba_png", "save_frame_png"]
