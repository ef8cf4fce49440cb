[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soulsengine"
version = "0.1.0"
description = "A small OpenGL rendering engine with a perspective camera, shader programs, a triangle mesh, a skybox and keyboard/mouse input."
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "engine", "camera", "skybox", "shader", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
soulsengine = "soulsengine.application:main"

[tool.hatch.build.targets.wheel]
packages = ["soulsengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
