"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/float/bool/str）を提供。
なぜ: `common.settings` で `os.getenv` と例外ガードを繰り返し書かずに済ませるため。

共通の規則:
- 未設定・空白のみ・パース不能な値は `default` を返す（起動を止めない）。
- `min_value` を指定すると、下回った値は下限に丸める。
"""

from __future__ import annotations

import math
import os
from typing import Callable, Optional, TypeVar

T = TypeVar("T", int, float)

_TRUE = frozenset({"true", "t", "yes", "y", "on"})
_FALSE = frozenset({"false", "f", "no", "n", "off"})


def _raw(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _number(
    name: str, parse: Callable[[str], T], default: Optional[T], min_value: Optional[T]
) -> Optional[T]:
    raw = _raw(name)
    if raw is None:
        return default
    try:
        val = parse(raw)
    except ValueError:
        return default
    if isinstance(val, float) and not math.isfinite(val):
        return default
    if min_value is not None and val < min_value:
        return min_value
    return val


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        未設定/不正時の値。
    min_value : Optional[int]
        下限（下回れば丸める）。
    """
    return _number(name, int, default, min_value)


def env_float(
    name: str, default: Optional[float] = None, *, min_value: Optional[float] = None
) -> Optional[float]:
    """浮動小数環境変数を取得する。NaN/inf は不正値扱い。"""
    return _number(name, float, default, min_value)


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（数値は 0 以外を真、true/false 系の語も許容）。"""
    raw = _raw(name)
    if raw is None:
        return bool(default)
    s = raw.lower()
    try:
        return int(s) != 0
    except ValueError:
        pass
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return bool(default)


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = _raw(name)
    return default if raw is None else raw


__all__ = ["env_int", "env_float", "env_bool", "env_str"]
