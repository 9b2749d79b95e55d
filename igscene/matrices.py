"""Construction of 4x4 homogeneous transformation matrices.

Every function returns a new ``numpy`` array of shape ``(4, 4)`` and
``float`` dtype, laid out row-major so that a column vector ``p`` is
transformed as ``m @ p``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

_EPS = 1e-6


def _vec3(values: Sequence[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected three components, got shape {arr.shape}")
    return arr


def _normalized(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.identity(4, dtype=float)


def from_rows(row0: Sequence[float], row1: Sequence[float], row2: Sequence[float]) -> np.ndarray:
    """Return a matrix whose upper 3x3 block has the given rows."""
    result = identity()
    result[:3, :3] = np.vstack([_vec3(row0), _vec3(row1), _vec3(row2)])
    return result


def from_columns(col0: Sequence[float], col1: Sequence[float], col2: Sequence[float]) -> np.ndarray:
    """Return a matrix whose upper 3x3 block has the given columns."""
    result = identity()
    result[:3, :3] = np.column_stack([_vec3(col0), _vec3(col1), _vec3(col2)])
    return result


def translation(dx: float, dy: float, dz: float) -> np.ndarray:
    """Return a translation by ``(dx, dy, dz)``."""
    result = identity()
    result[:3, 3] = (dx, dy, dz)
    return result


def scaling(sx: float, sy: float, sz: float) -> np.ndarray:
    """Return a scaling by ``sx``, ``sy`` and ``sz`` along the axes."""
    result = identity()
    result[0, 0] = sx
    result[1, 1] = sy
    result[2, 2] = sz
    return result


def rotation(angle_deg: float, ex: float, ey: float, ez: float) -> np.ndarray:
    """Return a rotation of ``angle_deg`` degrees about the axis ``(ex, ey, ez)``."""
    axis = _normalized(np.array([ex, ey, ez], dtype=float))
    angle = math.radians(angle_deg)
    c = math.cos(angle)
    s = math.sin(angle)
    nx, ny, nz = axis
    hx, hy, hz = (1.0 - c) * axis

    result = identity()
    result[:3, :3] = [
        [hx * nx + c, hx * ny - s * nz, hx * nz + s * ny],
        [hy * nx + s * nz, hy * ny + c, hy * nz - s * nx],
        [hz * nx - s * ny, hz * ny + s * nx, hz * nz + c],
    ]
    return result


def look_at(origin: Sequence[float], center: Sequence[float], vup: Sequence[float]) -> np.ndarray:
    """Return the view matrix of a camera at ``origin`` looking at ``center``."""
    eye = _vec3(origin)
    z_axis = _normalized(eye - _vec3(center))
    x_axis = _normalized(np.cross(_vec3(vup), z_axis))
    y_axis = np.cross(z_axis, x_axis)
    return from_rows(x_axis, y_axis, z_axis) @ translation(*(-eye))


def _check_extent(left: float, right: float, bottom: float, top: float, near: float, far: float) -> None:
    if not (abs(right - left) > _EPS and abs(top - bottom) > _EPS and abs(near - far) > _EPS):
        raise ValueError("degenerate view volume: opposite planes coincide")


def frustum(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Return a perspective projection for the given view frustum."""
    _check_extent(left, right, bottom, top, near, far)
    irl = 1.0 / (right - left)
    itb = 1.0 / (top - bottom)
    inf = 1.0 / (near - far)

    result = np.zeros((4, 4), dtype=float)
    result[0, 0] = 2.0 * near * irl
    result[0, 2] = (right + left) * irl
    result[1, 1] = 2.0 * near * itb
    result[1, 2] = (top + bottom) * itb
    result[2, 2] = (near + far) * inf
    result[2, 3] = 2.0 * far * near * inf
    result[3, 2] = -1.0
    return result


def orthographic(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Return an orthographic projection for the given view box."""
    _check_extent(left, right, bottom, top, near, far)
    irl = 1.0 / (left - right)
    itb = 1.0 / (bottom - top)
    inf = 1.0 / (near - far)

    result = identity()
    result[0, 0] = -2.0 * irl
    result[0, 3] = (right + left) * irl
    result[1, 1] = -2.0 * itb
    result[1, 3] = (top + bottom) * itb
    result[2, 2] = 2.0 * inf
    result[2, 3] = (far + near) * inf
    return result


def perspective(fovy_deg: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a symmetric perspective projection from a vertical field of view."""
    if not (aspect > _EPS and fovy_deg > _EPS and abs(near - far) > _EPS):
        raise ValueError("invalid perspective parameters")
    top = near * math.tan(0.5 * math.radians(fovy_deg))
    right = top / aspect
    return frustum(-right, right, -top, top, near, far)


def transpose3x3(matrix: np.ndarray) -> np.ndarray:
    """Return a matrix holding the transposed upper 3x3 block of ``matrix``."""
    source = np.asarray(matrix, dtype=float)
    result = identity()
    result[:3, :3] = source[:3, :3].T
    return result


def viewport(org_x: int, org_y: int, width: int, height: int) -> np.ndarray:
    """Return the matrix mapping normalized device coordinates to the viewport."""
    return (
        translation(float(org_x), float(org_y), 0.0)
        @ scaling(float(width), float(height), 1.0)
        @ scaling(0.5, 0.5, 1.0)
        @ translation(1.0, 1.0, 1.0)
    )


def viewport_inverse(org_x: int, org_y: int, width: int, height: int) -> np.ndarray:
    """Return the inverse of :func:`viewport`."""
    if width == 0 or height == 0:
        raise ValueError("viewport width and height must be non-zero")
    return (
        translation(-1.0, -1.0, -1.0)
        @ scaling(2.0, 2.0, 1.0)
        @ scaling(1.0 / float(width), 1.0 / float(height), 1.0)
        @ translation(-float(org_x), -float(org_y), 0.0)
    )


def view(axes: Sequence[Sequence[float]], origin: Sequence[float]) -> np.ndarray:
    """Return the view matrix for a camera frame with the given axes and origin."""
    x_axis, y_axis, z_axis = axes
    return from_rows(x_axis, y_axis, z_axis) @ translation(*(-_vec3(origin)))


def view_inverse(axes: Sequence[Sequence[float]], origin: Sequence[float]) -> np.ndarray:
    """Return the inverse of :func:`view` for the same camera frame."""
    x_axis, y_axis, z_axis = axes
    return translation(*_vec3(origin)) @ from_columns(x_axis, y_axis, z_axis)