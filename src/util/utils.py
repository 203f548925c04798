"""
どこで: `util.utils`。
何を: プロジェクトルート推定と YAML 構成ファイルの読み込み（フェイルソフト）。
なぜ: ランナーが `sketch:` セクションから既定サイズ/保存先/シード等を補完できるようにするため。

読み込み順（後勝ち、トップレベルキー単位で上書き）:
    1) `<root>/configs/default.yaml`
    2) `<root>/config.yaml`
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

# ルート判定に使う目印（いずれか 1 つがあればルート）
_ROOT_MARKERS = ("pyproject.toml", "configs", ".git")
CONFIG_FILES = (Path("configs") / "default.yaml", Path("config.yaml"))


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config load failed: %s (%s)", path, e)
        return {}
    if data is not None and not isinstance(data, dict):
        logger.warning("config ignored (top level is not a mapping): %s", path)
        return {}
    return data or {}


def _find_project_root(start: Path) -> Path:
    """`start` から親方向へ辿り、目印を持つ最初のディレクトリを返す。

    見つからなければ `<start>/../..`（`src/util/` からの典型配置）を返す。
    """
    here = start.resolve()
    for cand in (here, *here.parents):
        if any((cand / marker).exists() for marker in _ROOT_MARKERS):
            return cand
    return here.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を辞書で返す。ファイルが無い/壊れている場合は該当分を空として扱う。"""
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for rel in CONFIG_FILES:
        path = base / rel
        if path.is_file():
            merged.update(_safe_load_yaml(path))
    return merged


def sketch_section(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """構成辞書から `sketch:` セクションを取り出す（無い/不正なら空辞書）。"""
    section = cfg.get("sketch", {}) if isinstance(cfg, dict) else {}
    return section if isinstance(section, dict) else {}


__all__ = ["CONFIG_FILES", "load_config", "sketch_section"]
