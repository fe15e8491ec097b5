# core/vector.py
import math
from enum import IntEnum


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


class Vector3:
    """
    An immutable 3D vector supporting arithmetic, dot and cross products,
    normalization and axis-indexed access.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def squared_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def get_axis(self, axis: int) -> float:
        if axis == Axis.X:
            return self.x
        if axis == Axis.Y:
            return self.y
        return self.z

    def with_axis(self, axis: int, value: float) -> "Vector3":
        """Returns a copy of this vector with one component replaced."""
        if axis == Axis.X:
            return Vector3(value, self.y, self.z)
        if axis == Axis.Y:
            return Vector3(self.x, value, self.z)
        return Vector3(self.x, self.y, value)

    def rotate(self, axis: int, cos_theta: float, sin_theta: float) -> "Vector3":
        """
        Rotates the vector about a coordinate axis (right-handed). Passing
        -sin_theta applies the inverse rotation.
        """
        if axis == Axis.X:
            return Vector3(self.x,
                           cos_theta * self.y - sin_theta * self.z,
                           sin_theta * self.y + cos_theta * self.z)
        if axis == Axis.Y:
            return Vector3(cos_theta * self.x + sin_theta * self.z,
                           self.y,
                           -sin_theta * self.x + cos_theta * self.z)
        return Vector3(cos_theta * self.x - sin_theta * self.y,
                       sin_theta * self.x + cos_theta * self.y,
                       self.z)

    @staticmethod
    def min(a: "Vector3", b: "Vector3") -> "Vector3":
        return Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))

    @staticmethod
    def max(a: "Vector3", b: "Vector3") -> "Vector3":
        return Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
