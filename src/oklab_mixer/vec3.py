# vec3.py – fixed-size 3-vector / 3×3 matrix helpers
#   - float64 NumPy arrays, shape (3,) and (3, 3)
#   - every helper returns a new array; inputs are never written to

from __future__ import annotations

from typing import Sequence

import numpy as np

Vec3 = np.ndarray  # shape (3,)
Mat3 = np.ndarray  # shape (3, 3)


def vec3(x: float, y: float, z: float) -> Vec3:
    return np.array([x, y, z], dtype=np.float64)


def mat3(rows: Sequence[Sequence[float]]) -> Mat3:
    """Build a read-only 3×3 matrix; used for the module-level constants."""
    m = np.array(rows, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"expected 3×3 rows, got shape {m.shape}")
    m.flags.writeable = False
    return m


def multiply(mat: Mat3, vec: Vec3) -> Vec3:
    # out[i] = Σ_j mat[i][j] * vec[j]
    return mat @ np.asarray(vec, dtype=np.float64)


def power(vec: Vec3, exp: float) -> Vec3:
    # IEEE pow: negative base with a fractional exponent → NaN, not complex
    with np.errstate(invalid="ignore"):
        return np.power(np.asarray(vec, dtype=np.float64), exp)


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return a * (1.0 - t) + b * t


__all__ = ["Vec3", "Mat3", "vec3", "mat3", "multiply", "power", "lerp"]
