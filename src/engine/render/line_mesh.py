"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 2D 頂点 VBO と uint32 インデックス IBO、それらを束ねる VAO の確保・転送・描画・解放。
なぜ: MeshPart ごとに転送→描画を繰り返すため、容量不足時の再確保と VAO の張り直しを 1 箇所に閉じ込める。
"""

from __future__ import annotations

from typing import Any

import numpy as np

# 初期確保量 [byte]。超えたら必要量まで拡張する
DEFAULT_RESERVE = 1 << 20


class LineMesh:
    """LINE_STRIP + primitive restart で描く線メッシュ。

    Parameters
    ----------
    ctx : moderngl.Context
    program : moderngl.Program
        `in_vert` (vec2) を受け取る線描画プログラム。
    primitive_restart_index : int
        ポリラインの区切りに使うインデックス値。
    reserve : int
        VBO/IBO それぞれの初期確保量 [byte]。
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        *,
        primitive_restart_index: int = 0xFFFFFFFF,
        reserve: int = DEFAULT_RESERVE,
    ) -> None:
        self.ctx = ctx
        self.program = program
        self.reserve = int(reserve)
        self.vbo = ctx.buffer(reserve=self.reserve, dynamic=True)
        self.ibo = ctx.buffer(reserve=self.reserve, dynamic=True)
        self.vao = self._bind()
        self.index_count = 0

        ctx.primitive_restart = True
        ctx.primitive_restart_index = primitive_restart_index

    def _bind(self) -> Any:
        return self.ctx.vertex_array(
            self.program,
            [(self.vbo, "2f", "in_vert")],
            index_buffer=self.ibo,
            index_element_size=4,
        )

    def _grown(self, buf: Any, nbytes: int) -> Any | None:
        if nbytes <= buf.size:
            return None
        buf.release()
        return self.ctx.buffer(reserve=max(nbytes, self.reserve), dynamic=True)

    def upload(self, vertices: np.ndarray, indices: np.ndarray) -> None:
        """頂点 (N,2) float32 とインデックス uint32 を転送する。"""
        vbo = self._grown(self.vbo, vertices.nbytes)
        ibo = self._grown(self.ibo, indices.nbytes)
        if vbo is not None or ibo is not None:
            if vbo is not None:
                self.vbo = vbo
            if ibo is not None:
                self.ibo = ibo
            # バッファが差し替わったら VAO も作り直す
            self.vao.release()
            self.vao = self._bind()

        for buf, data in ((self.vbo, vertices), (self.ibo, indices)):
            buf.orphan()
            buf.write(np.ascontiguousarray(data).tobytes())
        self.index_count = int(indices.shape[0])

    def render(self, mode: int) -> None:
        if self.index_count:
            self.vao.render(mode=mode, vertices=self.index_count)

    def release(self) -> None:
        self.vao.release()
        self.vbo.release()
        self.ibo.release()


__all__ = ["LineMesh", "DEFAULT_RESERVE"]
