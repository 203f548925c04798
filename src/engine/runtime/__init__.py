"""
どこで: `engine.runtime` サブパッケージ。
何を: フレームループ（入力 → 更新 → 描画 → 保存）と、その協調者であるバックエンド（ウィンドウ/ヘッドレス）を提供。
なぜ: スケッチの状態遷移と入出力を分離し、ループをウィンドウ無しでも検証できるようにするため。
"""
