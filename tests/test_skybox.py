import itertools

import numpy as np
import pytest

from soulsengine.shader import Shader
from soulsengine.skybox import Skybox


class RecordingGL:
    """Answers any graphics request and writes it down as (name, *args)."""

    def __init__(self):
        self.calls = []
        self.uploads = []
        self._serial = itertools.count(1)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def request(*args):
            self.calls.append((name, *args))
            return self._answer(name, args)

        return request

    def _answer(self, name, args):
        if name in ("compile_shader", "link_program"):
            return True, ""
        if name == "create_vertex_buffer":
            self.uploads.append(list(args[0]))
            return next(self._serial), next(self._serial)
        return next(self._serial)


@pytest.fixture
def gl():
    return RecordingGL()


@pytest.fixture
def shader(tmp_path, gl):
    paths = [tmp_path / "skybox.vert", tmp_path / "skybox.frag"]
    for path in paths:
        path.write_text("void main() {}")
    return Shader(*paths, gl=gl)


@pytest.fixture
def skybox(gl):
    return Skybox(gl=gl)


def test_skybox_uploads_cube_of_unit_corners(skybox, gl):
    positions = gl.uploads[0]
    assert len(positions) == 3 * skybox.vertex_count
    points = set(zip(*[iter(positions)] * 3))
    assert points == set(itertools.product((-1.0, 1.0), repeat=3))


def test_skybox_has_twelve_triangles(skybox):
    assert divmod(skybox.vertex_count, 3) == (12, 0)


def test_draw_order_wraps_depth_function(shader, skybox, gl):
    gl.calls.clear()
    skybox.draw(shader, np.eye(4))
    assert [c[0] for c in gl.calls] == [
        "depth_func",
        "use_program",
        "set_uniform_mat4",
        "draw_triangles",
        "use_program",
        "depth_func",
    ]
    assert gl.calls[0] == ("depth_func", "lequal")
    assert gl.calls[1] == ("use_program", shader.program)
    assert gl.calls[2][2] == "u_ViewProjection"
    assert gl.calls[3][2] == skybox.vertex_count
    assert gl.calls[4] == ("use_program", 0)
    assert gl.calls[5] == ("depth_func", "less")


def test_draw_restores_depth_function_on_error(shader, skybox, gl):
    gl.calls.clear()
    with pytest.raises(ValueError):
        skybox.draw(shader, np.eye(2))
    assert gl.calls[-1] == ("depth_func", "less")


def test_close_releases_buffers_and_blocks_drawing(shader, skybox, gl):
    with skybox:
        pass
    skybox.close()
    assert sum(c[0] == "delete_vertex_buffer" for c in gl.calls) == 1
    with pytest.raises(RuntimeError):
        skybox.draw(shader, np.eye(4))