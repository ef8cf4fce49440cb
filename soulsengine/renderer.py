"""Draws meshes with a shader and a view-projection matrix."""

from __future__ import annotations

from typing import Any

from .mesh import Mesh
from .shader import Shader


class Renderer:
    """Issues the draw calls for scene geometry."""

    def draw_mesh(self, mesh: Mesh, shader: Shader, view_proj: Any) -> None:
        shader.bind()
        shader.set_uniform_mat4("u_ViewProjection", view_proj)
        mesh.draw()