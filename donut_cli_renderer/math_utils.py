#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class Vec3:
    """Immutable 3-component vector. Used for both points and directions."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


class Mat3:
    """3x3 rotation matrix, [row][col] storage.

    Only rotations are built here, so the same matrix transforms both
    positions and surface normals.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            self.m = data
        else:
            self.m = [[0.0] * 3 for _ in range(3)]

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{v:.3f}" for v in row) + "]" for row in self.m)
        return f"Mat3({rows})"

    @classmethod
    def identity(cls) -> 'Mat3':
        res = cls()
        for i in range(3):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[1][1] = c
        mat.m[1][2] = -s
        mat.m[2][1] = s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][2] = s
        mat.m[2][0] = -s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][1] = -s
        mat.m[1][0] = s
        mat.m[1][1] = c
        return mat

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            res = Mat3()
            for r in range(3):
                for c in range(3):
                    val = 0.0
                    for k in range(3):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    def transpose(self) -> 'Mat3':
        """Transpose; for a rotation this is also the inverse."""
        return Mat3([[self.m[c][r] for c in range(3)] for r in range(3)])

    def determinant(self) -> float:
        m = self.m
        return (m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
                - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
                + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0]))

    def mul_vec3(self, v: Vec3) -> Vec3:
        x = self.m[0][0]*v.x + self.m[0][1]*v.y + self.m[0][2]*v.z
        y = self.m[1][0]*v.x + self.m[1][1]*v.y + self.m[1][2]*v.z
        z = self.m[2][0]*v.x + self.m[2][1]*v.y + self.m[2][2]*v.z
        return Vec3(x, y, z)


def animation_rotation(angle1: float, angle2: float) -> Mat3:
    """Rotation by angle1 around X, then by angle2 around Z."""
    return Mat3.rotation_z(angle2) @ Mat3.rotation_x(angle1)
