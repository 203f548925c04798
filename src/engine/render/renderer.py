"""
どこで: `engine.render` の高レベル描画。
何を: 描画キュー（(Style, Tessellation) の列）を挿入順に GPU へ転送し、オフスクリーン FBO に描いて画面へ転写する。
なぜ: キューの順序（後の要素ほど上）をそのまま重なり順にし、保存時は画面ではなく FBO から読み出して
      オーバーレイや二重バッファの影響を受けないようにするため。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from common.types import RGBA
from engine.core.geometry import Geometry

from .line_mesh import LineMesh
from .shader import Shader
from .types import DrawEntry

PRIMITIVE_RESTART_INDEX = 0xFFFFFFFF

logger = logging.getLogger(__name__)


def build_projection(canvas_width: float, canvas_height: float) -> np.ndarray:
    """キャンバス（左上原点, px）を基準とする正射影行列（ModernGL 用の転置済み）を返す。"""
    proj = np.array(
        [
            [2 / canvas_width, 0, 0, -1],
            [0, -2 / canvas_height, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


def geometry_to_vertices_indices(geometry: Geometry) -> tuple[np.ndarray, np.ndarray]:
    """Geometry を VBO/IBO 用の配列に変換する。

    各ポリラインの終端直後に primitive restart を挿入し、1 回の LINE_STRIP 描画で全線を送る。
    """
    coords = geometry.coords
    offsets = geometry.offsets

    num_lines = len(offsets) - 1
    total_verts = len(coords)
    total_inds = total_verts + num_lines

    indices = np.empty(total_inds, dtype=np.uint32)
    # 再始動位置（各ライン終端の直後）: offsets[1:] + 行番号
    restart_pos = offsets[1:].astype(np.int64) + np.arange(num_lines, dtype=np.int64)
    mask = np.zeros(total_inds, dtype=bool)
    mask[restart_pos] = True
    indices[~mask] = np.arange(total_verts, dtype=np.uint32)
    indices[mask] = np.uint32(PRIMITIVE_RESTART_INDEX)
    return coords, indices


class EntryRenderer:
    """描画キューを FBO に描く。"""

    def __init__(self, mgl_context: Any, size: int) -> None:
        import moderngl

        self.ctx = mgl_context
        self.size = int(size)
        self.ctx.enable(moderngl.BLEND)
        self.ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

        self.program = Shader.create_shader(mgl_context)
        self.program["projection"].write(build_projection(self.size, self.size).tobytes())
        self.mesh = LineMesh(
            ctx=mgl_context,
            program=self.program,
            primitive_restart_index=PRIMITIVE_RESTART_INDEX,
        )
        self.fbo = self.ctx.simple_framebuffer((self.size, self.size), components=4)
        self._mode = moderngl.LINE_STRIP
        self.last_vertex_count = 0

    def render(self, entries: Sequence[DrawEntry], background: RGBA) -> None:
        """キューを挿入順に FBO へ描く。"""
        self.fbo.use()
        self.ctx.viewport = (0, 0, self.size, self.size)
        self.fbo.clear(*background)
        vertex_count = 0
        for style, tessellation in entries:
            self.program["color"].value = tuple(style.color)
            for part in tessellation.parts:
                if part.geometry.is_empty:
                    continue
                vertices, indices = geometry_to_vertices_indices(part.geometry)
                self.mesh.upload(vertices, indices)
                self.program["line_thickness"].value = float(part.thickness)
                self.mesh.render(self._mode)
                vertex_count += part.geometry.n_vertices
        self.last_vertex_count = vertex_count
        logger.debug("rendered %d entries (%d vertices)", len(entries), vertex_count)

    def present(self) -> None:
        """FBO の内容を既定フレームバッファへ転写する。"""
        self.ctx.copy_framebuffer(self.ctx.screen, self.fbo)
        self.ctx.screen.use()

    def read_pixels(self) -> bytes:
        """FBO の RGBA 画素（下から上の行順）を返す。"""
        return self.fbo.read(components=4, alignment=1)

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.mesh.release()
        self.fbo.release()
        self.program.release()


__all__ = ["EntryRenderer", "build_projection", "geometry_to_vertices_indices"]
