"""
どこで: `api.sketch`（実行ランナー）。
何を: ユーザの `Sketch` を、構成の解決 → バックエンド生成 → フレームループ実行 → 後片付けまで一括で走らせる。
なぜ: 少ない記述でウィンドウ上の対話実行（`r` で再シード、ESC で終了）とフレーム保存を可能にするため。

実行フロー（概要）:
1) ロギング: 未設定なら `common.logging.setup_default_logging()` を 1 度だけ適用。
2) 構成解決: 引数 > `config.yaml`/`configs/default.yaml` の `sketch:` > 環境変数 > 既定値。
3) `SketchConfig` を生成（不正値はここで `ValueError`/`TypeError`）。
4) `init_only=True` ならここで終了（pyglet/ModernGL を import しない）。
5) バックエンド: 指定が無ければ `WindowBackend` を生成（遅延 import）。
6) `engine.runtime.loop.run_loop` でループを回し、最終コンテキストを返す。
7) 自分で作ったバックエンドは成功/失敗に関わらず `close()` する。

例（最小スケッチ）:
    from dataclasses import dataclass
    from api import Canvas, DefaultSeed, Filled, Path, Sketch, Style, run

    @dataclass(frozen=True)
    class Square(DefaultSeed, Sketch):
        def draw(self, ctx):
            canvas = Canvas()
            canvas.draw(Style(color="#202020"), Filled(Path.rect(156, 156, 200, 200)))
            return canvas

    run(Square(), size=512)

注意/制限:
- フレーム間の待機は固定時間で、描画/保存にかかった時間を差し引かない。負荷が高いと実効レートは下がる。
- ヘッドレス環境では `WindowBackend` の初期化に失敗する。`HeadlessBackend` を渡すこと。
"""

from __future__ import annotations

import logging
from pathlib import Path

from common.logging import setup_default_logging
from engine.core.sketch import Sketch
from engine.runtime.backend import Backend
from engine.runtime.context import SketchConfig, SketchContext
from engine.runtime.loop import run_loop
from util.utils import load_config, sketch_section

from .sketch_runner.utils import (
    resolve_background,
    resolve_capture_root,
    resolve_frame_delay,
    resolve_seed,
    resolve_size,
)

logger = logging.getLogger(__name__)


def run_sketch(
    sketch: Sketch,
    *,
    size: int | None = None,
    capture_root: str | Path | None = None,
    seed: int | None = None,
    backend: Backend | None = None,
    frame_delay: float | None = None,
    background: object = None,
    init_only: bool = False,
) -> SketchContext | None:
    """スケッチを実行し、終了時のコンテキストを返す。

    Parameters
    ----------
    sketch : Sketch
        初期状態。
    size : int | None
        出力の一辺 [px]。None で構成/環境変数/既定（512）。
    capture_root : str | Path | None
        指定時、各フレームを `{capture_root}/{seed}/` に保存する。
    seed : int | None
        固定シード。None なら開始時に乱数で 1 度決める。
    backend : Backend | None
        入力/描画/保存の協調者。None でウィンドウを開く。
    frame_delay : float | None
        反復ごとの待機秒数。None で構成/環境変数/既定（16ms）。
    background : object
        背景色（ウィンドウ生成時のみ使用）。Hex / RGB(A)。
    init_only : bool, default False
        True で構成の解決と検証だけを行い、None を返す。

    Returns
    -------
    SketchContext | None
        入力終了または `step()` の終了で抜けた時点のコンテキスト。`init_only=True` では None。

    Raises
    ------
    Exception
        構成の検証エラー、およびループ内の任意の失敗（再試行しない）。
    """
    setup_default_logging()
    if not isinstance(sketch, Sketch):
        raise TypeError(f"sketch must be a Sketch, got {type(sketch).__name__}")

    section = sketch_section(load_config())
    cfg = SketchConfig(
        size=resolve_size(size, section),
        capture_root=resolve_capture_root(capture_root, section),
        seed=resolve_seed(seed, section),
    )
    delay = resolve_frame_delay(frame_delay, section)
    logger.debug("resolved config: %s (frame_delay=%.3fs)", cfg, delay)

    if init_only:
        return None

    owned = backend is None
    if backend is None:
        # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
        from engine.runtime.window import WindowBackend

        backend = WindowBackend(cfg.size, background=resolve_background(background, section))

    try:
        return run_loop(cfg, sketch, backend, frame_delay=delay)
    finally:
        if owned:
            backend.close()  # type: ignore[attr-defined]


__all__ = ["run_sketch"]
