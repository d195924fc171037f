"""Two-dimensional rigid body vectors, twists and transformations."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

__all__ = [
    "almost_equal",
    "deg2rad",
    "rad2deg",
    "normalize_angle_pi",
    "normalize_angle_2pi",
    "Vector2D",
    "Twist2D",
    "NormalVec2D",
    "TransformData2D",
    "Transform2D",
    "normalize",
    "length",
    "distance",
    "angle",
    "parse_vector",
    "parse_twist",
    "parse_transform",
]

PI = math.pi
_TWO_PI = 2.0 * PI

_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _fmt(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return format(value, "g")


def almost_equal(d1: float, d2: float, epsilon: float = 1.0e-12) -> bool:
    """Return True if the two numbers differ by less than ``epsilon``."""
    return math.fabs(d1 - d2) < epsilon


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (PI / 180.0)


def rad2deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / PI)


def normalize_angle_pi(rad: float) -> float:
    """Wrap an angle into the range [-pi, pi)."""
    q = math.floor((rad + PI) / _TWO_PI)
    rad = (rad + PI) - q * _TWO_PI
    if rad < 0:
        rad += _TWO_PI
    return rad - PI


def normalize_angle_2pi(rad: float) -> float:
    """Wrap an angle into the range [0, 2pi)."""
    q = math.floor(rad / _TWO_PI)
    rad = rad - q * _TWO_PI
    if rad < 0:
        rad += _TWO_PI
    return rad


@dataclass
class Vector2D:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2D:
        return self.__mul__(scalar)

    def __str__(self) -> str:
        return f"[{_fmt(self.x)} {_fmt(self.y)}]"


@dataclass
class Twist2D:
    """A planar twist: angular velocity and linear x/y velocities."""

    w: float = 0.0
    vx: float = 0.0
    vy: float = 0.0

    def __str__(self) -> str:
        return f"[{_fmt(self.w)} {_fmt(self.vx)} {_fmt(self.vy)}]"


@dataclass
class NormalVec2D:
    """A unit-length two-dimensional vector."""

    nx: float = 0.0
    ny: float = 0.0


@dataclass
class TransformData2D:
    """The rotation angle and translation of a transform."""

    theta: float = 0.0
    x: float = 0.0
    y: float = 0.0


class Transform2D:
    """A rigid body transformation in two dimensions."""

    __slots__ = ("_theta", "_ctheta", "_stheta", "_x", "_y")

    def __init__(self, trans: Vector2D | None = None, radians: float = 0.0) -> None:
        if trans is None:
            trans = Vector2D()
        self._theta = float(radians)
        self._ctheta = math.cos(self._theta)
        self._stheta = math.sin(self._theta)
        self._x = float(trans.x)
        self._y = float(trans.y)

    @classmethod
    def _from_parts(
        cls, theta: float, ctheta: float, stheta: float, x: float, y: float
    ) -> Transform2D:
        tf = cls.__new__(cls)
        tf._theta = theta
        tf._ctheta = ctheta
        tf._stheta = stheta
        tf._x = x
        tf._y = y
        return tf

    def __call__(self, value: Vector2D | Twist2D) -> Vector2D | Twist2D:
        """Apply the transform to a vector, or its adjoint to a twist."""
        c, s = self._ctheta, self._stheta
        if isinstance(value, Vector2D):
            return Vector2D(
                c * value.x - s * value.y + self._x,
                s * value.x + c * value.y + self._y,
            )
        if isinstance(value, Twist2D):
            return Twist2D(
                value.w,
                value.vx * c - value.vy * s + value.w * self._y,
                value.vy * c + value.vx * s - value.w * self._x,
            )
        raise TypeError(
            f"cannot transform object of type {type(value).__name__}"
        )

    def inv(self) -> Transform2D:
        """Return the inverse transformation."""
        ctheta = self._ctheta
        stheta = -self._stheta
        theta = math.atan2(stheta, ctheta)
        x = -(ctheta * self._x - stheta * self._y)
        y = -(stheta * self._x + ctheta * self._y)
        return Transform2D._from_parts(theta, ctheta, stheta, x, y)

    def __mul__(self, other: Transform2D) -> Transform2D:
        if not isinstance(other, Transform2D):
            return NotImplemented
        x = self._ctheta * other._x - self._stheta * other._y + self._x
        y = self._stheta * other._x + self._ctheta * other._y + self._y
        theta = self._theta + other._theta
        return Transform2D._from_parts(theta, math.cos(theta), math.sin(theta), x, y)

    def displacement(self) -> TransformData2D:
        """Return the angle and translation of this transform."""
        return TransformData2D(self._theta, self._x, self._y)

    def integrate_twist(self, twist: Twist2D) -> Transform2D:
        """Compose this transform with the motion of ``twist`` over one time unit."""
        sw = svx = svy = 0.0
        if not almost_equal(twist.w, 0.0):
            beta = abs(twist.w)
            sw = twist.w / beta
            svx = twist.vx / beta
            svy = twist.vy / beta
        elif almost_equal(twist.vx, 0.0) and almost_equal(twist.vy, 0.0):
            return self
        else:
            beta = math.hypot(twist.vx, twist.vy)
            svx = twist.vx / beta
            svy = twist.vy / beta

        cbeta = math.cos(beta)
        sbeta = math.sin(beta)
        sw2 = sw * sw

        theta_new = math.atan2(sbeta * sw, 1 + (1 - cbeta) * -sw2)
        x_new = svx * (beta + (beta - sbeta) * -sw2) + svy * ((1 - cbeta) * -sw)
        y_new = svx * ((1 - cbeta) * sw) + svy * (beta + (beta - sbeta) * -sw2)

        step = Transform2D._from_parts(
            theta_new, math.cos(theta_new), math.sin(theta_new), x_new, y_new
        )
        return self * step

    def __str__(self) -> str:
        return (
            f"theta (degrees): {_fmt(rad2deg(self._theta))} "
            f"x: {_fmt(self._x)} y: {_fmt(self._y)}"
        )

    def __repr__(self) -> str:
        return f"Transform2D(theta={self._theta!r}, x={self._x!r}, y={self._y!r})"


def normalize(v: Vector2D) -> NormalVec2D:
    """Return the unit vector pointing along ``v``."""
    mag = length(v)
    if mag == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return NormalVec2D(v.x / mag, v.y / mag)


def length(v: Vector2D) -> float:
    """Return the Euclidean length of a vector."""
    return math.hypot(v.x, v.y)


def distance(v1: Vector2D, v2: Vector2D) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(v1.x - v2.x, v1.y - v2.y)


def angle(v1: Vector2D, v2: Vector2D) -> float:
    """Return the angle between two vectors in radians."""
    denom = length(v1) * length(v2)
    if denom == 0.0:
        raise ValueError("angle is undefined for a zero-length vector")
    dot = v1.x * v2.x + v1.y * v2.y
    return math.acos(max(-1.0, min(1.0, dot / denom)))


def _numbers(text: str, count: int, what: str) -> list[float]:
    found = _NUMBER.findall(text)
    if len(found) < count:
        raise ValueError(f"expected {count} numbers for a {what}, got {len(found)}")
    return [float(token) for token in found[:count]]


def parse_vector(text: str) -> Vector2D:
    """Read a vector given as ``x y`` or ``[x y]``."""
    x, y = _numbers(text, 2, "vector")
    return Vector2D(x, y)


def parse_twist(text: str) -> Twist2D:
    """Read a twist given as ``w vx vy`` or ``[w vx vy]``."""
    w, vx, vy = _numbers(text, 3, "twist")
    return Twist2D(w, vx, vy)


def parse_transform(text: str) -> Transform2D:
    """Read a transform given as ``degrees dx dy`` or in its printed form."""
    deg, x, y = _numbers(text, 3, "transform")
    return Transform2D(Vector2D(x, y), deg2rad(deg))