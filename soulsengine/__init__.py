"""A small OpenGL rendering engine: camera, shaders, mesh, skybox, input and a demo application."""

__version__ = "0.1.0"