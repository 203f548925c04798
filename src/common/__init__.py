"""
どこで: `common` パッケージ。
何を: 環境変数/設定/ロギング/型エイリアスなど、全層から使う軽量ユーティリティ。
なぜ: engine と api の双方から再利用する基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
