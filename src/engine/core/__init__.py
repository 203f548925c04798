"""
どこで: `engine.core` サブパッケージ。
何を: Geometry・パス/ペイント/テッセレーション・Canvas・Sketch 契約・描画ウィンドウを提供。
なぜ: 描く内容の記述（core）と、それを回すループ/描画（runtime/render）を分離するため。
"""
