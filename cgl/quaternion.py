"""Quaternions for representing and composing 3D rotations."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Tuple

from cgl.matrix3x3 import Matrix3x3
from cgl.matrix4x4 import Matrix4x4
from cgl.misc import EPS_D, PI, clamp
from cgl.vector4d import Vector4D

_Vec3 = Tuple[float, float, float]


def _xyz(v) -> _Vec3:
    """Return the three components of a vector-like object."""
    if all(hasattr(v, name) for name in ("x", "y", "z")):
        return (float(v.x), float(v.y), float(v.z))
    values = tuple(float(c) for c in v)
    if len(values) != 3:
        raise ValueError(f"expected 3 components, got {len(values)}")
    return values  # type: ignore[return-value]


def _norm3(v: _Vec3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def _cross(a: _Vec3, b: _Vec3) -> _Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Quaternion(Vector4D):
    """A quaternion ``x i + y j + z k + w``; the default is the identity."""

    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis, radians: float) -> "Quaternion":
        """Rotation by ``radians`` about ``axis``."""
        ax, ay, az = _xyz(axis)
        length = _norm3((ax, ay, az))
        n_axis = (ax / length, ay / length, az / length)
        half = radians / 2
        sin_theta = math.sin(half)
        q = cls(
            sin_theta * n_axis[0],
            sin_theta * n_axis[1],
            sin_theta * n_axis[2],
            math.cos(half),
        )
        q.normalize()
        return q

    @classmethod
    def from_scaled_axis(cls, vec) -> "Quaternion":
        """Rotation about ``vec`` by an angle equal to its length.

        Lengths of 0.0001 or less give the identity.
        """
        v = _xyz(vec)
        theta = _norm3(v)
        if theta > 0.0001:
            s = math.sin(theta / 2.0)
            return cls(v[0] / theta * s, v[1] / theta * s, v[2] / theta * s,
                       math.cos(theta / 2.0))
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_euler(cls, euler) -> "Quaternion":
        """Rotation given by Euler angles in roll-pitch-yaw order."""
        roll, pitch, yaw = _xyz(euler)
        c1 = math.cos(yaw * 0.5)
        c2 = math.cos(pitch * 0.5)
        c3 = math.cos(roll * 0.5)
        s1 = math.sin(yaw * 0.5)
        s2 = math.sin(pitch * 0.5)
        s3 = math.sin(roll * 0.5)
        return cls(
            c1 * c2 * s3 - s1 * s2 * c3,
            c1 * s2 * c3 + s1 * c2 * s3,
            s1 * c2 * c3 - c1 * s2 * s3,
            c1 * c2 * c3 + s1 * s2 * s3,
        )

    def complex(self) -> _Vec3:
        """The imaginary part ``(x, y, z)``."""
        return (self.x, self.y, self.z)

    def real(self) -> float:
        """The real part ``w``."""
        return self.w

    def conjugate(self) -> "Quaternion":
        """The quaternion with negated imaginary part."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quaternion":
        """The conjugate divided by the norm; exact for unit quaternions."""
        c = self.conjugate() / self.norm()
        return Quaternion(c.x, c.y, c.z, c.w)

    def product(self, rhs: "Quaternion") -> "Quaternion":
        """The Hamilton product ``self * rhs``."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Quaternion(
            y * rhs.z - z * rhs.y + x * rhs.w + w * rhs.x,
            z * rhs.x - x * rhs.z + y * rhs.w + w * rhs.y,
            x * rhs.y - y * rhs.x + z * rhs.w + w * rhs.z,
            w * rhs.w - x * rhs.x - y * rhs.y - z * rhs.z,
        )

    def __mul__(self, rhs):
        if isinstance(rhs, Quaternion):
            return self.product(rhs)
        if isinstance(rhs, numbers.Real):
            return Quaternion(self.x * rhs, self.y * rhs, self.z * rhs, self.w * rhs)
        return NotImplemented

    def __rmul__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return Quaternion(s * self.x, s * self.y, s * self.z, s * self.w)

    def matrix(self) -> Matrix4x4:
        """Matrix ``M`` with ``M * q.vector() == (self * q).vector()``."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix4x4(
            w, -z, y, x,
            z, w, -x, y,
            -y, x, w, z,
            -x, -y, -z, w,
        )

    def right_matrix(self) -> Matrix4x4:
        """Matrix ``M`` with ``q.vector()^T * M == (q * self).vector()^T``."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix4x4(
            w, -z, y, -x,
            z, w, -x, -y,
            -y, x, w, -z,
            x, y, z, w,
        )

    def vector(self) -> Vector4D:
        """This quaternion as the 4-vector ``(x, y, z, w)``."""
        return Vector4D(self.x, self.y, self.z, self.w)

    def rotation_matrix(self) -> Matrix3x3:
        """Rotation matrix of this quaternion, assumed to be of unit length."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix3x3(
            1 - 2 * y * y - 2 * z * z, 2 * x * y - 2 * z * w, 2 * x * z + 2 * y * w,
            2 * x * y + 2 * z * w, 1 - 2 * x * x - 2 * z * z, 2 * y * z - 2 * x * w,
            2 * x * z - 2 * y * w, 2 * y * z + 2 * x * w, 1 - 2 * x * x - 2 * y * y,
        )

    def scaled_axis(self) -> _Vec3:
        """Axis of rotation taken from the unit-scaled imaginary part."""
        u = self.unit()
        q1 = Quaternion(u.x, u.y, u.z, u.w)
        s = math.sqrt(1 - q1.w * q1.w)
        if s < 0.001:
            return (q1.x, q1.y, q1.z)
        return (q1.x / s, q1.y / s, q1.z / s)

    def rotated_vector(self, v) -> _Vec3:
        """``v`` rotated by this unit quaternion."""
        vx, vy, vz = _xyz(v)
        return ((self * Quaternion(vx, vy, vz, 0.0)) * self.conjugate()).complex()

    def euler(self) -> _Vec3:
        """Euler angles in roll-pitch-yaw order."""
        x, y, z, w = self.x, self.y, self.z, self.w
        pi_over_2 = PI * 0.5
        sqw, sqx, sqy, sqz = w * w, x * x, y * y, z * z

        arg = 2.0 * (w * y - x * z)
        pitch = math.asin(arg) if -1.0 <= arg <= 1.0 else math.nan
        if pi_over_2 - abs(pitch) > EPS_D:
            yaw = math.atan2(2.0 * (x * y + w * z), sqx - sqy - sqz + sqw)
            roll = math.atan2(2.0 * (w * x + y * z), sqw - sqx - sqy + sqz)
        else:
            yaw = math.atan2(2 * y * z - 2 * x * w, 2 * x * z + 2 * y * w)
            roll = 0.0
            if pitch < 0:
                yaw = PI - yaw
        return (roll, pitch, yaw)

    def decouple_z(self) -> Tuple["Quaternion", "Quaternion"]:
        """Split into ``(qxy, qz)`` with ``self == qxy * qz``."""
        ztt = (0.0, 0.0, 1.0)
        zbt = self.rotated_vector(ztt)
        axis_xy = _cross(ztt, zbt)
        axis_norm = _norm3(axis_xy)
        axis_theta = math.acos(clamp(zbt[2], -1.0, 1.0))
        if axis_norm > 0.00001:
            scale = axis_theta / axis_norm
            axis_xy = (axis_xy[0] * scale, axis_xy[1] * scale, axis_xy[2] * scale)
        qxy = Quaternion.from_scaled_axis(axis_xy)
        qz = qxy.conjugate() * self
        return qxy, qz

    def slerp(self, q1: "Quaternion", t: float) -> "Quaternion":
        """Spherical interpolation from this quaternion to ``q1``."""
        return slerp(self, q1, t)

    def __str__(self) -> str:
        return (
            f"{{ {_fmt(self.x)}i, {_fmt(self.y)}j, "
            f"{_fmt(self.z)}k, {_fmt(self.w)} }}"
        )


def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
    """Quaternion a fraction ``t`` of the way from ``q0`` to ``q1``."""
    omega = math.acos(
        clamp(q0.x * q1.x + q0.y * q1.y + q0.z * q1.z + q0.w * q1.w, -1.0, 1.0)
    )
    if abs(omega) < 1e-10:
        omega = 1e-10
    som = math.sin(omega)
    st0 = math.sin((1 - t) * omega) / som
    st1 = math.sin(t * omega) / som
    return Quaternion(
        q0.x * st0 + q1.x * st1,
        q0.y * st0 + q1.y * st1,
        q0.z * st0 + q1.z * st1,
        q0.w * st0 + q1.w * st1,
    )