"""
どこで: `util.paths`。
何を: フレーム保存先 `{capture_root}/{seed}/` の解決と生成。
なぜ: ループから毎フレーム冪等に呼べる単一の入口を用意するため。
"""

from __future__ import annotations

from pathlib import Path


def capture_dir(capture_root: Path | str, seed: int) -> Path:
    """シードごとの保存ディレクトリのパスを返す（作成はしない）。"""
    return Path(capture_root) / str(int(seed))


def ensure_capture_dir(capture_root: Path | str, seed: int) -> Path:
    """`{capture_root}/{seed}/` を作成して返す。

    - 親ディレクトリも同時に作成される。
    - 既存の場合もそのまま Path を返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    out = capture_dir(capture_root, seed)
    out.mkdir(parents=True, exist_ok=True)
    return out


def frame_filename(frame: int, suffix: str) -> str:
    """フレーム番号から保存ファイル名（ゼロ埋め 6 桁）を返す。"""
    return f"{int(frame):06d}{suffix}"


__all__ = ["capture_dir", "ensure_capture_dir", "frame_filename"]
