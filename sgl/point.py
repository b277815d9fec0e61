from numpy import sqrt

from sgl.config import verboseprint
from sgl.tuple3 import Tuple3
from sgl.vector3 import Vector3


class Point3(Tuple3):
    """
    Point in 3D euclidean space, all 3 coordinates floats.
    Point3() is the origin.

    plus_equals and minus_equals move the point in place, so every holder of
    the same instance sees the move. Sharing one point between threads that
    move it needs outside locking.
    """

    def clone(self) -> "Point3":
        return Point3(self.x, self.y, self.z)

    def plus(self, v: Vector3) -> "Point3":
        """
        the point q = p+v for this point p and a Vector3 v
        """
        return Point3(self.x + v.x, self.y + v.y, self.z + v.z)

    def minus(self, v: Vector3) -> "Point3":
        """
        the point q = p-v for this point p and a Vector3 v
        """
        return Point3(self.x - v.x, self.y - v.y, self.z - v.z)

    def plus_equals(self, v: Vector3) -> "Point3":
        """
        Move this point by adding the vector v. Returns this point so
        moves can be chained.
        """
        self.x += v.x
        self.y += v.y
        self.z += v.z
        verboseprint(f'Point moved to {self}')
        return self

    def minus_equals(self, v: Vector3) -> "Point3":
        """
        Move this point by subtracting the vector v. Returns this point.
        """
        self.x -= v.x
        self.y -= v.y
        self.z -= v.z
        verboseprint(f'Point moved to {self}')
        return self

    def affine(self, a: float, q: "Point3") -> "Point3":
        """
        affine combination (1-a)*p + a*q of this point p and a second point q

        a: weight of q. Values outside [0, 1] extrapolate along the line pq.
        """
        b = 1.0 - a
        return Point3(b * self.x + a * q.x, b * self.y + a * q.y, b * self.z + a * q.z)

    def vector_to(self, q: "Point3") -> Vector3:
        """
        displacement v = q-p, so that p.plus(v) lands on q
        """
        return Vector3(q.x - self.x, q.y - self.y, q.z - self.z)

    def distance_to(self, q: "Point3") -> float:
        """
        calculate the euclidean distance |q-p| between this point
        and a second point q
        """
        dx = self.x - q.x
        dy = self.y - q.y
        dz = self.z - q.z
        return sqrt(dx * dx + dy * dy + dz * dz)
