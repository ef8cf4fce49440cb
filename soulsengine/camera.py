"""Perspective camera with a yaw/pitch orientation."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def _vec3(value: Sequence[float], what: str) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"{what} must have exactly three components, got shape {array.shape}")
    return array


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed projection mapping depth to [-1, 1]; ``fov_y`` is in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far clip planes must differ")
    focal = 1.0 / math.tan(fov_y / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = focal / aspect
    matrix[1, 1] = focal
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix placing ``eye`` at the origin looking toward ``center``."""
    eye_v = _vec3(eye, "eye")
    forward = _normalize(_vec3(center, "center") - eye_v)
    side = _normalize(np.cross(forward, _vec3(up, "up")))
    upward = np.cross(side, forward)
    matrix = np.eye(4)
    matrix[:3, :3] = [side, upward, -forward]
    matrix[:3, 3] = [-np.dot(side, eye_v), -np.dot(upward, eye_v), np.dot(forward, eye_v)]
    return matrix


class Camera:
    """Camera with a fixed projection; fov, pitch and yaw are in degrees.

    Matrices are row-major and read-only.
    """

    def __init__(self, fov: float, aspect: float, near_clip: float, far_clip: float) -> None:
        self.position = np.array([0.0, 0.0, 3.0])
        self.pitch = 0.0
        self.yaw = -90.0
        self.projection_matrix = perspective(math.radians(fov), aspect, near_clip, far_clip)
        self.projection_matrix.setflags(write=False)
        self.update_view()

    @property
    def front(self) -> np.ndarray:
        """Unit vector in the direction the camera looks."""
        pitch, yaw = math.radians(self.pitch), math.radians(self.yaw)
        return _normalize(
            np.array([math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch)])
        )

    def set_position(self, pos: Sequence[float]) -> None:
        self.position = _vec3(pos, "position")
        self.update_view()

    def set_rotation(self, pitch: float, yaw: float) -> None:
        self.pitch, self.yaw = float(pitch), float(yaw)
        self.update_view()

    def update_view(self) -> None:
        """Recompute the view matrix from the current position and orientation."""
        self.position.setflags(write=False)
        front = self.front
        right = _normalize(np.cross(front, _WORLD_UP))
        self.view_matrix = look_at(self.position, self.position + front, np.cross(right, front))
        self.view_matrix.setflags(write=False)