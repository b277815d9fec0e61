from numpy import sqrt

from sgl.config import verboseprint
from sgl.tuple3 import Tuple3


class Vector3(Tuple3):
    """
    Displacement in 3D euclidean space, used to move points around
    """

    def clone(self):
        return Vector3(self.x, self.y, self.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return sqrt(self.length_squared())

    def negate(self):
        return Vector3(-self.x, -self.y, -self.z)

    def normalize(self):
        """
        Unit vector with the direction of this one. The zero vector has no
        direction and is returned unchanged.
        """
        d = self.length()
        s = 1.0 / d if d > 0.0 else 1.0
        return Vector3(self.x * s, self.y * s, self.z * s)

    def plus(self, u):
        return Vector3(self.x + u.x, self.y + u.y, self.z + u.z)

    def minus(self, u):
        return Vector3(self.x - u.x, self.y - u.y, self.z - u.z)

    def times(self, s: float):
        return Vector3(self.x * s, self.y * s, self.z * s)

    def plus_equals(self, u):
        self.x += u.x
        self.y += u.y
        self.z += u.z
        verboseprint(f'Vector grown to {self}')
        return self

    def minus_equals(self, u):
        self.x -= u.x
        self.y -= u.y
        self.z -= u.z
        verboseprint(f'Vector shrunk to {self}')
        return self

    def times_equals(self, s: float):
        self.x *= s
        self.y *= s
        self.z *= s
        verboseprint(f'Vector scaled to {self}')
        return self

    def dot(self, u) -> float:
        return self.x * u.x + self.y * u.y + self.z * u.z

    def cross(self, u):
        """
        Right-handed cross product, this x u
        """
        return Vector3(self.y * u.z - self.z * u.y,
                       self.z * u.x - self.x * u.z,
                       self.x * u.y - self.y * u.x)
