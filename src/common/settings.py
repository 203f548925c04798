"""
どこで: `common.settings`
何を: `SEEDSKETCH_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: ループ/テッセレータ/ランナーに散らばる既定値を一箇所へ集め、テストで差し替えやすくするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import env_float, env_int, env_str

ENV_PREFIX = "SEEDSKETCH_"


@dataclass
class _Settings:
    # ループ
    FRAME_DELAY_MS: float = 16.0
    DEFAULT_SIZE: int = 512
    CAPTURE_ROOT: Path | None = None

    # テッセレーション
    CURVE_TOLERANCE: float = 0.25
    FILL_SPACING: float = 1.0

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 不正値は既定値へフォールバックする（起動を止めない）。
    - サイズ/間隔は下限で丸める。
    """
    defaults = _Settings()

    _settings.FRAME_DELAY_MS = (
        env_float(ENV_PREFIX + "FRAME_DELAY_MS", defaults.FRAME_DELAY_MS, min_value=0.0)
        or 0.0
    )
    _settings.DEFAULT_SIZE = (
        env_int(ENV_PREFIX + "DEFAULT_SIZE", defaults.DEFAULT_SIZE, min_value=1)
        or defaults.DEFAULT_SIZE
    )
    root = env_str(ENV_PREFIX + "CAPTURE_ROOT")
    _settings.CAPTURE_ROOT = Path(root) if root is not None else None

    tol = env_float(ENV_PREFIX + "CURVE_TOLERANCE", defaults.CURVE_TOLERANCE)
    _settings.CURVE_TOLERANCE = tol if tol is not None and tol > 0 else defaults.CURVE_TOLERANCE
    spacing = env_float(ENV_PREFIX + "FILL_SPACING", defaults.FILL_SPACING)
    _settings.FILL_SPACING = (
        spacing if spacing is not None and spacing > 0 else defaults.FILL_SPACING
    )

    _settings.LOG_LEVEL = (env_str(ENV_PREFIX + "LOG_LEVEL", defaults.LOG_LEVEL) or "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["ENV_PREFIX", "get", "reload_from_env", "_Settings"]
