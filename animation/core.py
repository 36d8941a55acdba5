class Vec2:
    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def is_close(self, other, tol=1e-6):
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def copy(self):
        return Vec2(self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"


class Transform:
    """Translate + scale applied to the animated square.

    The x progress of a spring curve drives ``tx`` and ``sx``, the y progress
    drives ``ty`` and ``sy``.
    """

    __slots__ = ("tx", "ty", "sx", "sy")

    def __init__(self, tx=0.0, ty=0.0, sx=1.0, sy=1.0):
        self.tx = float(tx)
        self.ty = float(ty)
        self.sx = float(sx)
        self.sy = float(sy)

    @classmethod
    def translation(cls, tx, ty=0.0):
        return cls(tx=tx, ty=ty)

    @classmethod
    def scale(cls, sx, sy=None):
        return cls(sx=sx, sy=sx if sy is None else sy)

    def interpolate(self, target, progress):
        """Blend towards ``target``; ``progress`` is a Vec2 (x axis, y axis)."""
        return Transform(
            self.tx + (target.tx - self.tx) * progress.x,
            self.ty + (target.ty - self.ty) * progress.y,
            self.sx + (target.sx - self.sx) * progress.x,
            self.sy + (target.sy - self.sy) * progress.y,
        )

    def is_close(self, other, tol=1e-6):
        return (abs(self.tx - other.tx) <= tol and abs(self.ty - other.ty) <= tol
                and abs(self.sx - other.sx) <= tol and abs(self.sy - other.sy) <= tol)

    def copy(self):
        return Transform(self.tx, self.ty, self.sx, self.sy)

    def __eq__(self, other):
        if other is None or not isinstance(other, Transform):
            return False
        return (self.tx, self.ty, self.sx, self.sy) == (other.tx, other.ty, other.sx, other.sy)

    def __hash__(self):
        return hash((self.tx, self.ty, self.sx, self.sy))

    def __repr__(self):
        return f"Transform(tx={self.tx:.2f}, ty={self.ty:.2f}, sx={self.sx:.2f}, sy={self.sy:.2f})"


IDENTITY = Transform()
