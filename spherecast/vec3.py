"""
Points and directions in 3D space.

Vec3 values are never modified after creation: every operation below
returns a new vector.
"""

from __future__ import annotations
import numpy as np


class Vec3:
    """Three float64 components held in a numpy array."""

    __slots__ = ('_xyz',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._xyz = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def _wrap(cls, xyz: np.ndarray) -> Vec3:
        v = cls.__new__(cls)
        v._xyz = xyz
        return v

    @property
    def x(self) -> float:
        return float(self._xyz[0])

    @property
    def y(self) -> float:
        return float(self._xyz[1])

    @property
    def z(self) -> float:
        return float(self._xyz[2])

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        # Approximate, so vectors built along different paths still match
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._xyz, other._xyz))

    # Approximate equality has no consistent hash
    __hash__ = None

    def __neg__(self) -> Vec3:
        return Vec3._wrap(-self._xyz)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3._wrap(self._xyz + other._xyz)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3._wrap(self._xyz - other._xyz)

    def __mul__(self, scale: float) -> Vec3:
        return Vec3._wrap(self._xyz * scale)

    def dot(self, other: Vec3) -> float:
        return float(np.dot(self._xyz, other._xyz))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return float(np.linalg.norm(self._xyz))

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vec3()
        return Vec3._wrap(self._xyz / length)


Point3 = Vec3
