"""A unit cube drawn behind all other geometry."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, ClassVar

from .shader import Shader, _default_gl

# Six faces, two triangles each; every token is one corner as signs of x, y, z.
_CUBE_CORNERS = """
-+- --- +-- +-- ++- -+-
--+ --- -+- -+- -++ --+
+-- +-+ +++ +++ ++- +--
--+ -++ +++ +++ +-+ --+
-+- ++- +++ +++ -++ -+-
--- --+ +-- +-- --+ +-+
"""


class Skybox(AbstractContextManager):
    """A cube of 36 vertices rendered with a depth test of less-or-equal."""

    VERTICES: ClassVar[tuple[float, ...]] = tuple(
        1.0 if sign == "+" else -1.0
        for corner in _CUBE_CORNERS.split()
        for sign in corner
    )

    def __init__(self, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self._buffers: tuple[int, int] | None = self._gl.create_vertex_buffer(self.VERTICES)

    @property
    def vertex_count(self) -> int:
        return len(self.VERTICES) // 3

    def draw(self, shader: Shader, view_proj: Any) -> None:
        """Draw the cube with ``view_proj``, restoring the default depth test afterwards."""
        if self._buffers is None:
            raise RuntimeError("skybox has been closed")
        vao = self._buffers[0]
        self._gl.depth_func("lequal")
        try:
            shader.bind()
            shader.set_uniform_mat4("u_ViewProjection", view_proj)
            self._gl.draw_triangles(vao, self.vertex_count)
            shader.unbind()
        finally:
            self._gl.depth_func("less")

    def close(self) -> None:
        """Release the vertex buffers; later calls do nothing."""
        buffers, self._buffers = self._buffers, None
        if buffers is not None:
            self._gl.delete_vertex_buffer(*buffers)

    def __exit__(self, *_exc: object) -> None:
        self.close()