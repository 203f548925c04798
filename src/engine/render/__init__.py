"""
どこで: `engine.render` サブパッケージ。
何を: テッセレーション済みエントリ → GPU 転送・描画の入口。EntryRenderer/LineMesh/Shader と Style を提供。
なぜ: 描画内容の記述（core）と GPU リソース管理を分離し、後者を局所化するため。
"""
