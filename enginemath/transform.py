"""Affine and projective 4x4 transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from enginemath.quaternion import Quaternion
from enginemath.vector3 import Vector3

Rows = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Rows = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class Transform:
    """An immutable 4x4 matrix stored as rows; the default is the identity.

    Points are column vectors, so the translation lives in the last column.
    """

    rows: Rows = _IDENTITY

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("Transform needs 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    def _with(self, updates: dict[tuple[int, int], float]) -> Transform:
        grid = [list(row) for row in self.rows]
        for (r, c), value in updates.items():
            grid[r][c] = value
        return Transform(tuple(tuple(row) for row in grid))

    def __getitem__(self, index: tuple[int, int]) -> float:
        """The entry at ``(row, column)``."""
        row, col = index
        return self.rows[row][col]

    @property
    def translation(self) -> Vector3:
        m = self.rows
        return Vector3(m[0][3], m[1][3], m[2][3])

    def with_translation(self, translation: Vector3) -> Transform:
        return self._with({(0, 3): translation.x, (1, 3): translation.y, (2, 3): translation.z})

    @property
    def rotation(self) -> Quaternion:
        m = self.rows
        m00, m01, m02 = m[0][0], m[0][1], m[0][2]
        m10, m11, m12 = m[1][0], m[1][1], m[1][2]
        m20, m21, m22 = m[2][0], m[2][1], m[2][2]
        trace = m00 + m11 + m22
        if trace > 0:
            s = math.sqrt(trace + 1.0) * 2.0
            q = Quaternion((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
        elif m00 > m11 and m00 > m22:
            s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
            q = Quaternion(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
        elif m11 > m22:
            s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
            q = Quaternion((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
        else:
            s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
            q = Quaternion((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)
        return q.normalize()

    def with_rotation(self, rotation: Quaternion) -> Transform:
        x, y, z, w = rotation
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return self._with(
            {
                (0, 0): 1.0 - 2.0 * (yy + zz),
                (0, 1): 2.0 * (xy - wz),
                (0, 2): 2.0 * (xz + wy),
                (1, 0): 2.0 * (xy + wz),
                (1, 1): 1.0 - 2.0 * (xx + zz),
                (1, 2): 2.0 * (yz - wx),
                (2, 0): 2.0 * (xz - wy),
                (2, 1): 2.0 * (yz + wx),
                (2, 2): 1.0 - 2.0 * (xx + yy),
            }
        )

    @property
    def scale(self) -> Vector3:
        m = self.rows
        return Vector3(*(math.sqrt(sum(v * v for v in m[r][:3])) for r in range(3)))

    def with_scale(self, scale: Vector3) -> Transform:
        return self._with({(0, 0): scale.x, (1, 1): scale.y, (2, 2): scale.z})

    def __mul__(self, other: Union[Transform, float]) -> Transform:
        """Compose with another transform, or scale every entry by a number.

        ``a * b`` applies ``a`` first and ``b`` second.
        """
        if isinstance(other, Transform):
            a, b = self.rows, other.rows
            return Transform(
                tuple(
                    tuple(sum(b[r][k] * a[k][c] for k in range(4)) for c in range(4))
                    for r in range(4)
                )
            )
        return Transform(tuple(tuple(v * other for v in row) for row in self.rows))

    def __add__(self, translation: Vector3) -> Transform:
        return self.with_translation(self.translation + translation)

    def __sub__(self, translation: Vector3) -> Transform:
        return self.with_translation(self.translation - translation)

    def transform_point(self, point: Vector3) -> Vector3:
        m = self.rows
        return Vector3(
            *(m[r][0] * point.x + m[r][1] * point.y + m[r][2] * point.z + m[r][3] for r in range(3))
        )

    def transform_vector(self, vec: Vector3) -> Vector3:
        m = self.rows
        return Vector3(*(m[r][0] * vec.x + m[r][1] * vec.y + m[r][2] * vec.z for r in range(3)))

    def inverse(self) -> Transform:
        """Invert an affine transform; raises ValueError if that is impossible."""
        m = self.rows
        if m[3] != (0.0, 0.0, 0.0, 1.0):
            raise ValueError("Matrix is not affine and cannot be inverted using this method.")
        (m00, m01, m02, m03), (m10, m11, m12, m13), (m20, m21, m22, m23) = m[0], m[1], m[2]
        det = (
            m00 * (m11 * m22 - m12 * m21)
            - m01 * (m10 * m22 - m12 * m20)
            + m02 * (m10 * m21 - m11 * m20)
        )
        if det == 0:
            raise ValueError("Cannot invert a singular matrix")
        inv_det = 1.0 / det
        i00 = (m11 * m22 - m12 * m21) * inv_det
        i01 = (m02 * m21 - m01 * m22) * inv_det
        i02 = (m01 * m12 - m02 * m11) * inv_det
        i10 = (m12 * m20 - m10 * m22) * inv_det
        i11 = (m00 * m22 - m02 * m20) * inv_det
        i12 = (m02 * m10 - m00 * m12) * inv_det
        i20 = (m10 * m21 - m11 * m20) * inv_det
        i21 = (m01 * m20 - m00 * m21) * inv_det
        i22 = (m00 * m11 - m01 * m10) * inv_det
        return Transform(
            (
                (i00, i01, i02, -(i00 * m03 + i01 * m13 + i02 * m23)),
                (i10, i11, i12, -(i10 * m03 + i11 * m13 + i12 * m23)),
                (i20, i21, i22, -(i20 * m03 + i21 * m13 + i22 * m23)),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    def lerp(self, other: Transform, alpha: float) -> Transform:
        """Entry-wise interpolation towards ``other``."""
        return Transform(
            tuple(
                tuple(a + (b - a) * alpha for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.rows, other.rows)
            )
        )

    @staticmethod
    def orthographic_projection(
        left: float, right: float, bottom: float, top: float, near_plane: float, far_plane: float
    ) -> Transform:
        return Transform()._with(
            {
                (0, 0): 2.0 / (right - left),
                (1, 1): 2.0 / (top - bottom),
                (2, 2): -2.0 / (far_plane - near_plane),
                (0, 3): -(right + left) / (right - left),
                (1, 3): -(top + bottom) / (top - bottom),
                (2, 3): -(far_plane + near_plane) / (far_plane - near_plane),
            }
        )

    @staticmethod
    def perspective_projection(
        fov_y: float, aspect_ratio: float, near_plane: float, far_plane: float
    ) -> Transform:
        f = 1.0 / math.tan(fov_y / 2.0)
        return Transform()._with(
            {
                (0, 0): f / aspect_ratio,
                (1, 1): f,
                (2, 2): (far_plane + near_plane) / (near_plane - far_plane),
                (2, 3): (2.0 * far_plane * near_plane) / (near_plane - far_plane),
                (3, 2): -1.0,
                (3, 3): 0.0,
            }
        )

    @staticmethod
    def offcenter_perspective_projection(
        left: float, right: float, bottom: float, top: float, near_plane: float, far_plane: float
    ) -> Transform:
        return Transform()._with(
            {
                (0, 0): (2.0 * near_plane) / (right - left),
                (1, 1): (2.0 * near_plane) / (top - bottom),
                (0, 2): (right + left) / (right - left),
                (1, 2): (top + bottom) / (top - bottom),
                (2, 2): -(far_plane + near_plane) / (far_plane - near_plane),
                (2, 3): -(2.0 * far_plane * near_plane) / (far_plane - near_plane),
                (3, 2): -1.0,
                (3, 3): 0.0,
            }
        )