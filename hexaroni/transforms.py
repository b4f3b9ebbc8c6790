"""Model matrices for objects, and the camera's view-projection matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from hexaroni.geometry import ScreenCoord
from hexaroni.objects import Object
from hexaroni.status_types import Falling, Killed, Moving, StatusType, Wobble
from hexaroni.statuses import Status

_HEAVEN = np.array([0.0, 0.0, -7.0])
_KNOCKBACK_SCALE = 1.5
_DOWN = np.array([0.0, 0.0, 1.0])
_GRAVITY = 2.7

# Matrix products do not commute: statuses are applied in this order.
_ORDER: dict[type[StatusType], int] = {Wobble: 0, Killed: 1, Moving: 1, Falling: 1}


def _translation(v: Sequence[float]) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = np.asarray(v, dtype=float)
    return m


def _rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[1, 1], m[1, 2] = c, -s
    m[2, 1], m[2, 2] = s, c
    return m


def project_point(matrix: np.ndarray, point: Sequence[float]) -> np.ndarray:
    """Transform a 3D point by a 4x4 matrix, dividing by the resulting w."""
    x, y, z = (float(c) for c in point)
    v = np.asarray(matrix, dtype=float) @ np.array([x, y, z, 1.0])
    return v[:3] / v[3]


@dataclass(frozen=True)
class Camera:
    """A perspective camera looking from ``position`` at ``target``."""

    position: tuple[float, float, float]
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 0.0, 1.0)
    fovy: float = math.radians(45.0)
    aspect: float = 800.0 / 600.0
    z_near: float = 0.01
    z_far: float = 10000.0

    def matrix(self) -> np.ndarray:
        """Projection times view."""
        return self._projection() @ self._view()

    def _view(self) -> np.ndarray:
        eye = np.asarray(self.position, dtype=float)
        f = np.asarray(self.target, dtype=float) - eye
        f /= np.linalg.norm(f)
        s = np.cross(f, np.asarray(self.up, dtype=float))
        s /= np.linalg.norm(s)
        u = np.cross(s, f)
        m = np.eye(4)
        m[0, :3], m[0, 3] = s, -s.dot(eye)
        m[1, :3], m[1, 3] = u, -u.dot(eye)
        m[2, :3], m[2, 3] = -f, f.dot(eye)
        return m

    def _projection(self) -> np.ndarray:
        inv_length = 1.0 / (self.z_near - self.z_far)
        f = 1.0 / math.tan(0.5 * self.fovy)
        m = np.zeros((4, 4))
        m[0, 0] = f / self.aspect
        m[1, 1] = f
        m[2, 2] = (self.z_near + self.z_far) * inv_length
        m[2, 3] = 2.0 * self.z_near * self.z_far * inv_length
        m[3, 2] = -1.0
        return m


def create_model_matrix(obj: Object, time: float) -> np.ndarray:
    """Place ``obj`` in the world, animated by its statuses at ``time``."""
    animated = sorted(
        (s for s in obj.statuses if type(s.stype) in _ORDER),
        key=lambda s: _ORDER[type(s.stype)],
    )
    model = np.eye(4)
    for status in animated:
        model = status_matrix(status, time) @ model
    position = ScreenCoord.from_hexcoord(obj.coord).as_vec()
    return _translation(position) @ model


def _require(value: float | None, what: str, status: Status) -> float:
    if value is None:
        raise ValueError(f"{type(status.stype).__name__} status without {what}: {status!r}")
    return value


def _progress(status: Status, time: float) -> float:
    start = _require(status.start_time, "start_time", status)
    duration = _require(status.duration, "duration", status)
    return min(max((time - start) / duration, 0.0), 1.0)


def status_matrix(status: Status, time: float) -> np.ndarray:
    """The transform one animated status contributes at ``time``."""
    stype = status.stype
    if isinstance(stype, Wobble):
        t = time - _require(status.start_time, "start_time", status)
        return _rotation_x(stype.amplitude * math.sin(stype.speed * t))
    if isinstance(stype, Killed):
        progress = _progress(status, time)
        translation = _HEAVEN + _KNOCKBACK_SCALE * np.asarray(stype.knockback)
        return _translation(progress * translation)
    if isinstance(stype, Moving):
        # Offsets relative to the destination, which is the object's own coord.
        progress = _progress(status, time)
        src = stype.from_.as_vec()
        dst = stype.to.as_vec()
        offset = src - dst + progress * (dst - src)
        jump = (
            progress
            * (progress - 1.0)
            * np.array([0.0, 0.0, stype.height])
            * np.linalg.norm(dst - src)
        )
        return _translation(offset + jump)
    if isinstance(stype, Falling):
        t = time - _require(status.start_time, "start_time", status)
        return _translation(_GRAVITY * _DOWN * t * t)
    raise ValueError(f"no status matrix for {status!r}")