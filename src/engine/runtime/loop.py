"""
どこで: `engine.runtime.loop`。
何を: フレーム実行ループ（再シード → draw → 送出 → step → 保存 → 待機 → フレーム加算）。
なぜ: スケッチの状態遷移と協調者（入力/描画/保存）の呼び出し順を一箇所で固定し、フレームを原子的に扱うため。

状態:
- Running →（再シード入力）一時的に Reseeding → Running
- Running →（`step()` が None／入力が閉じた）Terminated

1 反復の手順:
1) `backend.events()` で次のバッチを待つ。None なら正常終了。
2) バッチに再シード文字があれば、新しいシード/乱数/フレーム 0 のコンテキストを作り、
   `sketch.seed()` が成功した時だけコンテキストとスケッチを両方差し替える。
3) `sketch.draw(ctx)` でキャンバスを得る。
4) `canvas.drain()` を挿入順のまま `backend.submit()` へ渡す。
5) `sketch.step(ctx, events)` で次の値（None なら終了予定）を得る。
6) 保存先があれば `{capture_root}/{seed}/` を冪等に作り、`backend.save_frame()`。
7) 固定時間だけ待つ（処理時間は差し引かない）。
8) `frame += 1`。

エラー方針:
- どの段の例外も再試行・抑制せず、ログを残してそのまま呼び出し元へ送出する。
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from engine.core.canvas import Canvas
from engine.core.sketch import Sketch
from util.paths import ensure_capture_dir

from .backend import Backend
from .context import SketchConfig, SketchContext, new_context, reseeded
from .events import contains_reseed

logger = logging.getLogger(__name__)


def _resolve_frame_delay(frame_delay: float | None) -> float:
    if frame_delay is not None:
        return max(0.0, float(frame_delay))
    from common.settings import get as _get_settings

    return max(0.0, float(_get_settings().FRAME_DELAY_MS) / 1000.0)


def run_loop(
    cfg: SketchConfig,
    sketch: Sketch,
    backend: Backend,
    *,
    frame_delay: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> SketchContext:
    """スケッチを終了条件まで駆動し、最終コンテキストを返す。

    Parameters
    ----------
    cfg : SketchConfig
        実行設定。
    sketch : Sketch
        初期状態。以後はループが保持するスロットの中身として置き換わっていく。
    backend : Backend
        入力/描画/保存の協調者。
    frame_delay : float | None
        各反復の最後に待つ秒数。None で `SEEDSKETCH_FRAME_DELAY_MS`（既定 16ms）。
    sleep : Callable[[float], None]
        待機関数（テストで差し替え可能）。

    Returns
    -------
    SketchContext
        終了時点のコンテキスト（`frame` は完了した反復数、再シード以降の分）。

    Raises
    ------
    Exception
        入力取得/再シード/描画/送出/保存のいずれかの失敗。そのまま伝播する。
    """
    delay = _resolve_frame_delay(frame_delay)
    ctx = new_context(cfg)
    current: Sketch | None = sketch
    logger.info("sketch start: seed=%d size=%d", ctx.current_seed, cfg.size)

    while current is not None:
        try:
            events = backend.events()
            if events is None:
                logger.info("input closed after %d frames", ctx.frame)
                return ctx

            if contains_reseed(events):
                next_ctx = reseeded(ctx)
                current = current.seed(next_ctx)
                ctx = next_ctx
                logger.info("reseed: seed=%d", ctx.current_seed)

            canvas = current.draw(ctx)
            if not isinstance(canvas, Canvas):
                raise TypeError(
                    f"{type(current).__name__}.draw() must return a Canvas, "
                    f"got {type(canvas).__name__}"
                )
            backend.submit(canvas.drain())
            current = current.step(ctx, events)

            if cfg.capture_root is not None:
                out_dir = ensure_capture_dir(cfg.capture_root, ctx.current_seed)
                backend.save_frame(out_dir, ctx.frame)
        except Exception:
            logger.error("frame %d failed (seed=%d)", ctx.frame, ctx.current_seed, exc_info=True)
            raise

        sleep(delay)
        ctx.frame += 1

    logger.info("sketch finished after %d frames", ctx.frame)
    return ctx


__all__ = ["run_loop"]
