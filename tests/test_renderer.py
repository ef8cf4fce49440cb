import itertools
from unittest.mock import MagicMock

import numpy as np
import pytest

from soulsengine.mesh import Mesh
from soulsengine.renderer import Renderer
from soulsengine.shader import Shader


@pytest.fixture
def scene(tmp_path):
    vert = tmp_path / "basic.vert"
    frag = tmp_path / "basic.frag"
    vert.write_text("void main() {}")
    frag.write_text("void main() {}")
    gl = MagicMock()
    gl.create_shader.side_effect = itertools.count(1)
    gl.compile_shader.return_value = (True, "")
    gl.link_program.return_value = (True, "")
    gl.create_program.return_value = 7
    gl.create_vertex_buffer.return_value = (11, 12)
    shader = Shader(vert, frag, gl=gl)
    mesh = Mesh(gl=gl)
    gl.reset_mock()
    return gl, shader, mesh


def test_draw_mesh_binds_uploads_and_draws(scene):
    gl, shader, mesh = scene
    Renderer().draw_mesh(mesh, shader, np.diag([2.0, 3.0, 4.0, 1.0]))
    assert [c[0] for c in gl.method_calls] == ["use_program", "set_uniform_mat4", "draw_triangles"]
    assert gl.use_program.call_args.args == (shader.program,)
    program, name, values = gl.set_uniform_mat4.call_args.args
    assert (program, name) == (7, "u_ViewProjection")
    values = list(values)
    assert (values[0], values[5], values[10]) == (2.0, 3.0, 4.0)
    assert gl.draw_triangles.call_args.args == (11, mesh.vertex_count)


def test_draw_mesh_rejects_bad_matrix_before_drawing(scene):
    gl, shader, mesh = scene
    with pytest.raises(ValueError):
        Renderer().draw_mesh(mesh, shader, np.zeros((3, 4)))
    assert gl.draw_triangles.call_count == 0


def test_draw_mesh_with_closed_mesh_raises(scene):
    _, shader, mesh = scene
    mesh.close()
    with pytest.raises(RuntimeError):
        Renderer().draw_mesh(mesh, shader, np.eye(4))