"""GLSL shader programs loaded from source files."""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class ShaderError(RuntimeError):
    """A shader could not be loaded, compiled or linked."""


class _PygletGL:
    """OpenGL operations the engine needs, backed by pyglet."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader as shaders

        self._gl = gl
        self._shaders = shaders

    def create_shader(self, stage: str) -> Any:
        return SimpleNamespace(stage=stage, compiled=None)

    def compile_shader(self, shader: Any, source: str) -> tuple[bool, str]:
        try:
            shader.compiled = self._shaders.Shader(source, shader.stage)
        except self._shaders.ShaderException as exc:
            return False, str(exc)
        return True, ""

    def create_program(self) -> Any:
        return SimpleNamespace(linked=None)

    def link_program(self, program: Any, shaders: Sequence[Any]) -> tuple[bool, str]:
        try:
            program.linked = self._shaders.ShaderProgram(*(s.compiled for s in shaders))
        except self._shaders.ShaderException as exc:
            return False, str(exc)
        return True, ""

    def delete_shader(self, shader: Any) -> None:
        if shader.compiled is not None:
            shader.compiled.delete()
            shader.compiled = None

    def delete_program(self, program: Any) -> None:
        if program.linked is not None:
            program.linked.delete()
            program.linked = None

    def use_program(self, program: Any) -> None:
        linked = getattr(program, "linked", None)
        self._gl.glUseProgram(linked.id if linked is not None else 0)

    def set_uniform_mat4(self, program: Any, name: str, values: Sequence[float]) -> None:
        gl = self._gl
        encoded = name.encode("utf-8")
        text = (gl.GLchar * (len(encoded) + 1))()
        text.value = encoded
        location = gl.glGetUniformLocation(program.linked.id, text)
        gl.glUniformMatrix4fv(location, 1, gl.GL_FALSE, (gl.GLfloat * 16)(*values))

    def create_vertex_buffer(self, positions: Sequence[float]) -> tuple[int, int]:
        gl = self._gl
        vao, vbo = (gl.GLuint * 1)(), (gl.GLuint * 1)()
        gl.glGenVertexArrays(1, vao)
        gl.glGenBuffers(1, vbo)
        gl.glBindVertexArray(vao[0])
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo[0])
        data = (gl.GLfloat * len(positions))(*positions)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, len(positions) * 4, data, gl.GL_STATIC_DRAW)
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, 12, None)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        gl.glBindVertexArray(0)
        return vao[0], vbo[0]

    def draw_triangles(self, vao: int, count: int) -> None:
        self._gl.glBindVertexArray(vao)
        self._gl.glDrawArrays(self._gl.GL_TRIANGLES, 0, count)
        self._gl.glBindVertexArray(0)

    def delete_vertex_buffer(self, vao: int, vbo: int) -> None:
        self._gl.glDeleteVertexArrays(1, (self._gl.GLuint * 1)(vao))
        self._gl.glDeleteBuffers(1, (self._gl.GLuint * 1)(vbo))

    def depth_func(self, mode: str) -> None:
        self._gl.glDepthFunc({"less": self._gl.GL_LESS, "lequal": self._gl.GL_LEQUAL}[mode])


def _default_gl() -> Any:
    return _PygletGL()


def load_file(path: str | Path) -> str:
    """Read a shader source file."""
    try:
        source = Path(path).read_text()
    except OSError as exc:
        raise ShaderError(f"failed to load: {path}") from exc
    logger.info("Loaded: %s\n%s", path, source)
    return source


class Shader:
    """A linked vertex + fragment shader program."""

    def __init__(self, vertex_path: str | Path, fragment_path: str | Path, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        vertex_source = load_file(vertex_path)
        fragment_source = load_file(fragment_path)
        self._program: Any = self._build(vertex_source, fragment_source)

    @property
    def program(self) -> Any:
        if self._program is None:
            raise RuntimeError("shader has been closed")
        return self._program

    def _compile_stage(self, stage: str, source: str) -> Any:
        shader = self._gl.create_shader(stage)
        ok, log = self._gl.compile_shader(shader, source)
        if not ok:
            self._gl.delete_shader(shader)
            raise ShaderError(f"{stage} compilation failed:\n{log}")
        return shader

    def _build(self, vertex_source: str, fragment_source: str) -> Any:
        vertex = self._compile_stage("vertex", vertex_source)
        try:
            fragment = self._compile_stage("fragment", fragment_source)
        except ShaderError:
            self._gl.delete_shader(vertex)
            raise
        program = self._gl.create_program()
        try:
            ok, log = self._gl.link_program(program, (vertex, fragment))
        finally:
            self._gl.delete_shader(vertex)
            self._gl.delete_shader(fragment)
        if not ok:
            self._gl.delete_program(program)
            raise ShaderError(f"program linking failed:\n{log}")
        return program

    def bind(self) -> None:
        self._gl.use_program(self.program)

    def unbind(self) -> None:
        self._gl.use_program(0)

    def set_uniform_mat4(self, name: str, matrix: Any) -> None:
        """Upload a 4x4 matrix given in row-major mathematical form."""
        array = np.asarray(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
        self._gl.set_uniform_mat4(self.program, name, array.flatten(order="F").tolist())

    def close(self) -> None:
        if self._program is not None:
            self._gl.delete_program(self._program)
            self._program = None

    def __enter__(self) -> "Shader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()