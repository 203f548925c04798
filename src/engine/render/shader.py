"""
どこで: `engine.render.shader`。
何を: 太さ付き線分描画用の GLSL プログラム（頂点 → ジオメトリで四角形化 → 単色フラグメント）。
なぜ: コアプロファイルでは `glLineWidth` が 1px に制限されるため、線幅をジオメトリシェーダで実装する。

uniform:
- `projection` (mat4): キャンバス座標（左上原点, px）→ クリップ空間。
- `line_thickness` (float): キャンバス座標系での線幅。
- `color` (vec4): RGBA 0–1。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330

in vec2 in_vert;

void main() {
    gl_Position = vec4(in_vert, 0.0, 1.0);
}
"""

GEOMETRY_SHADER = """
#version 330

layout (lines) in;
layout (triangle_strip, max_vertices = 4) out;

uniform mat4 projection;
uniform float line_thickness;

void main() {
    vec2 p0 = gl_in[0].gl_Position.xy;
    vec2 p1 = gl_in[1].gl_Position.xy;
    vec2 dir = p1 - p0;
    float len = length(dir);
    if (len < 1e-6) {
        return;
    }
    dir /= len;
    vec2 normal = vec2(-dir.y, dir.x) * (line_thickness * 0.5);
    // 端点を半幅だけ延ばしてつなぎ目の隙間を埋める
    vec2 ext = dir * (line_thickness * 0.5);

    gl_Position = projection * vec4(p0 - ext + normal, 0.0, 1.0);
    EmitVertex();
    gl_Position = projection * vec4(p0 - ext - normal, 0.0, 1.0);
    EmitVertex();
    gl_Position = projection * vec4(p1 + ext + normal, 0.0, 1.0);
    EmitVertex();
    gl_Position = projection * vec4(p1 + ext - normal, 0.0, 1.0);
    EmitVertex();
    EndPrimitive();
}
"""

FRAGMENT_SHADER = """
#version 330

uniform vec4 color;
out vec4 frag_color;

void main() {
    frag_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """ModernGL コンテキスト上に線描画プログラムを作る。"""
        return ctx.program(
            vertex_shader=VERTEX_SHADER,
            geometry_shader=GEOMETRY_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )


__all__ = ["Shader", "VERTEX_SHADER", "GEOMETRY_SHADER", "FRAGMENT_SHADER"]
