"""Vectors and transforms with look-at orientation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import ClassVar


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    X: ClassVar[Vec3]
    Y: ClassVar[Vec3]
    Z: ClassVar[Vec3]

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def _try_normalize(self) -> Vec3 | None:
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return None
        return self * (1.0 / length)

    def normalize_or_zero(self) -> Vec3:
        normalized = self._try_normalize()
        return Vec3.ZERO if normalized is None else normalized

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def _any_orthonormal(self) -> Vec3:
        sign = math.copysign(1.0, self.z)
        a = -1.0 / (sign + self.z)
        b = self.x * self.y * a
        return Vec3(b, sign + self.y * self.y * a, -self.y)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)


def _identity() -> tuple[Vec3, Vec3, Vec3]:
    return (Vec3.X, Vec3.Y, Vec3.Z)


@dataclass
class Transform:
    """Position, orientation (as right/up/back axes) and scale."""

    translation: Vec3 = Vec3.ZERO
    rotation: tuple[Vec3, Vec3, Vec3] = field(default_factory=_identity)
    scale: Vec3 = Vec3.ONE

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Transform:
        return cls(translation=Vec3(x, y, z))

    def with_scale(self, scale: Vec3) -> Transform:
        return replace(self, scale=scale)

    def forward(self) -> Vec3:
        return -self.rotation[2]

    def look_to(self, direction: Vec3, up: Vec3) -> None:
        """Turn so that forward points along ``direction``."""
        back = (-direction)._try_normalize() or Vec3.Z
        up_dir = up._try_normalize() or Vec3.Y
        right = up_dir.cross(back)._try_normalize() or up_dir._any_orthonormal()
        new_up = back.cross(right)
        self.rotation = (right, new_up, back)

    def look_at(self, target: Vec3, up: Vec3) -> None:
        """Turn in place to face ``target``."""
        self.look_to(target - self.translation, up)

    def looking_at(self, target: Vec3, up: Vec3) -> Transform:
        """Return a copy turned to face ``target``."""
        turned = replace(self)
        turned.look_at(target, up)
        return turned