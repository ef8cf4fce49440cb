"""The engine application: window, scene set-up and the main loop."""

from __future__ import annotations

import argparse
import itertools
import logging
from contextlib import ExitStack
from pathlib import Path
from typing import Any, Callable, Sequence

import numpy as np

from .camera import Camera
from .input import Input
from .mesh import Mesh
from .renderer import Renderer
from .shader import Shader, _PygletGL
from .skybox import Skybox

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "SoulsEngine"
DEFAULT_SHADER_DIR = Path("Game/Shaders")

# The window system's key symbol for Escape.
ESCAPE_KEY = 0xFF1B

WindowFactory = Callable[[int, int, str], Any]


class WindowError(RuntimeError):
    """The application window could not be created."""


class _PygletFrameGL(_PygletGL):
    """OpenGL adapter with the per-frame calls the main loop needs."""

    def enable_depth_test(self) -> None:
        self._gl.glEnable(self._gl.GL_DEPTH_TEST)

    def version(self) -> str:
        raw = self._gl.glGetString(self._gl.GL_VERSION)
        if not raw:
            return ""
        data = bytes(itertools.takewhile(bool, (raw[i] for i in itertools.count())))
        return data.decode("utf-8", errors="replace")

    def begin_frame(self, width: int, height: int) -> None:
        gl = self._gl
        gl.glViewport(0, 0, width, height)
        gl.glClearColor(0.0, 0.0, 0.0, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)


def _pyglet_window(width: int, height: int, title: str) -> Any:
    import pyglet

    return pyglet.window.Window(width, height, title, vsync=True)


def _strip_translation(view: np.ndarray) -> np.ndarray:
    """Keep only the rotation part of a view matrix."""
    matrix = np.eye(4)
    matrix[:3, :3] = np.asarray(view)[:3, :3]
    return matrix


class Application:
    """Opens a window and renders a skybox and a triangle until closed.

    Escape or closing the window ends the main loop.
    """

    def __init__(
        self,
        shader_dir: str | Path = DEFAULT_SHADER_DIR,
        *,
        window_factory: WindowFactory | None = None,
        gl: Any = None,
    ) -> None:
        logger.info("Constructing Application...")
        self._shader_dir = Path(shader_dir)
        self._window_factory = window_factory or _pyglet_window
        self._gl = gl

    def _open_window(self) -> Any:
        try:
            return self._window_factory(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        except Exception as exc:
            raise WindowError(f"window creation failed: {exc}") from exc

    @staticmethod
    def _shutdown(window: Any) -> None:
        window.close()
        logger.info("Shutdown complete.")

    def run(self) -> None:
        """Run the main loop until the window is asked to close."""
        window = self._open_window()
        with ExitStack() as stack:
            stack.callback(self._shutdown, window)

            gl = self._gl if self._gl is not None else _PygletFrameGL()
            logger.info("OpenGL loaded: %s", gl.version())
            gl.enable_depth_test()

            keys = Input(window)

            camera = Camera(45.0, WINDOW_WIDTH / WINDOW_HEIGHT, 0.1, 100.0)
            camera.set_position((0.0, 0.0, 3.0))

            shader = stack.enter_context(
                Shader(self._shader_dir / "basic.vert", self._shader_dir / "basic.frag", gl=gl)
            )
            skybox_shader = stack.enter_context(
                Shader(self._shader_dir / "skybox.vert", self._shader_dir / "skybox.frag", gl=gl)
            )
            mesh = stack.enter_context(Mesh(gl=gl))
            renderer = Renderer()
            skybox = stack.enter_context(Skybox(gl=gl))

            while not window.has_exit:
                window.dispatch_events()
                if keys.is_key_pressed(ESCAPE_KEY):
                    window.has_exit = True

                gl.begin_frame(WINDOW_WIDTH, WINDOW_HEIGHT)

                view = camera.view_matrix
                projection = camera.projection_matrix
                skybox.draw(skybox_shader, projection @ _strip_translation(view))
                renderer.draw_mesh(mesh, shader, projection @ view)

                window.flip()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="soulsengine", description="Run the engine demo scene.")
    parser.add_argument(
        "--shaders",
        type=Path,
        default=DEFAULT_SHADER_DIR,
        help="directory holding basic.vert/.frag and skybox.vert/.frag",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    try:
        Application(args.shaders).run()
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1
    return 0