import math

import numpy as np

from sgl.config import CONFIG


class Tuple3:
    """
    Three float coordinates x, y and z, shared by points and vectors
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_array(cls, a):
        """
        Build an instance from any sequence or numpy array of 3 numbers.
        """
        values = np.asarray(a, dtype=np.float64)
        if values.shape != (3,):
            raise ValueError(f"{cls.__name__} needs exactly 3 coordinates, got shape {values.shape}")
        return cls(values[0], values[1], values[2])

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def almost_equals(self, other, tolerance: float = None, relative_tolerance: float = None) -> bool:
        """
        Componentwise comparison, each pair of coordinates may differ by the
        absolute tolerance or by the relative tolerance of the larger one.

        tolerance: defaults to CONFIG.TOLERANCE
        relative_tolerance: defaults to CONFIG.RELATIVE_TOLERANCE
        """
        if tolerance is None:
            tolerance = CONFIG.TOLERANCE
        if relative_tolerance is None:
            relative_tolerance = CONFIG.RELATIVE_TOLERANCE
        return all(math.isclose(a, b, rel_tol=relative_tolerance, abs_tol=tolerance)
                   for a, b in zip(self, other))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # coordinates are mutable
    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}(x={self.x}, y={self.y}, z={self.z})"
