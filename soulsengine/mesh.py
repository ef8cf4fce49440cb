"""A single-triangle mesh held in GPU buffers."""

from __future__ import annotations

from typing import Any, ClassVar

from .shader import _default_gl


class Mesh:
    """A triangle uploaded as vec3 positions."""

    VERTICES: ClassVar[tuple[float, ...]] = (
        -0.5, -0.5, 0.0,
        0.5, -0.5, 0.0,
        0.0, 0.5, 0.0,
    )

    def __init__(self, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self._buffers: tuple[int, int] | None = self._gl.create_vertex_buffer(self.VERTICES)

    @property
    def vertex_count(self) -> int:
        return len(self.VERTICES) // 3

    def draw(self) -> None:
        if self._buffers is None:
            raise RuntimeError("mesh has been closed")
        self._gl.draw_triangles(self._buffers[0], self.vertex_count)

    def close(self) -> None:
        if self._buffers is not None:
            self._gl.delete_vertex_buffer(*self._buffers)
            self._buffers = None

    def __enter__(self) -> "Mesh":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()