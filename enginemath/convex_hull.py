"""Tetrahedra and convex hulls built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from enginemath.sphere import Sphere
from enginemath.vector3 import Vector3

_EPS = 1e-6


@dataclass(frozen=True)
class Simplex:
    """A tetrahedron with corners ``a``, ``b``, ``c`` and ``d``."""

    a: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    b: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    c: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    d: Vector3 = field(default_factory=lambda: Vector3.ZERO)

    @property
    def vertices(self) -> tuple[Vector3, Vector3, Vector3, Vector3]:
        return (self.a, self.b, self.c, self.d)

    @staticmethod
    def signed_volume(a: Vector3, b: Vector3, c: Vector3, d: Vector3) -> float:
        """Volume of the tetrahedron, signed by the winding of its corners."""
        return (b - a).dot((c - a).cross(d - a)) / 6.0

    def volume(self) -> float:
        return abs(Simplex.signed_volume(self.a, self.b, self.c, self.d))

    def surface_area(self) -> float:
        """Sum of the areas of the four triangular faces."""
        ab = self.b - self.a
        ac = self.c - self.a
        ad = self.d - self.a
        bc = self.c - self.b
        bd = self.d - self.b
        return 0.5 * (
            ab.cross(ac).length()
            + ac.cross(ad).length()
            + ad.cross(ab).length()
            + bc.cross(bd).length()
        )

    def contains_point(self, point: Vector3, eps: float = _EPS) -> bool:
        """Whether ``point`` lies inside or on the tetrahedron."""
        a, b, c, d = (v - point for v in self.vertices)
        volumes = (
            b.dot(c.cross(d)),
            a.dot(d.cross(c)),
            a.dot(b.cross(d)),
            a.dot(c.cross(b)),
        )
        has_negative = any(v < -eps for v in volumes)
        has_positive = any(v > eps for v in volumes)
        return not (has_negative and has_positive)

    def bounding_sphere(self) -> Sphere:
        return Sphere.from_points(self.vertices)


@dataclass(frozen=True)
class _Face:
    a: int
    b: int
    c: int
    normal: Vector3
    offset: float

    def distance(self, point: Vector3) -> float:
        return self.normal.dot(point) - self.offset


def _plane(
    pts: Sequence[Vector3], a: int, b: int, c: int, eps: float
) -> Optional[tuple[Vector3, float]]:
    n = (pts[b] - pts[a]).cross(pts[c] - pts[a])
    length = n.length()
    if length <= eps:
        return None
    normal = n / length
    return normal, normal.dot(pts[a])


def _oriented_face(
    pts: Sequence[Vector3], a: int, b: int, c: int, inside: Vector3, eps: float
) -> Optional[_Face]:
    """A face whose normal points away from ``inside``, or None if degenerate."""
    plane = _plane(pts, a, b, c, eps)
    if plane is None:
        return None
    normal, offset = plane
    if normal.dot(inside) - offset > 0:
        b, c = c, b
        plane = _plane(pts, a, b, c, eps)
        if plane is None:
            return None
        normal, offset = plane
    return _Face(a, b, c, normal, offset)


def _initial_tetrahedron(
    pts: Sequence[Vector3], eps: float
) -> Optional[tuple[int, int, int, int]]:
    i0 = i1 = 0
    for i, p in enumerate(pts):
        if p.x < pts[i0].x:
            i0 = i
        if p.x > pts[i1].x:
            i1 = i
    if i0 == i1:
        return None

    origin = pts[i0]
    axis = pts[i1] - origin
    axis_length = axis.length()
    if axis_length <= eps:
        return None

    i2, best = -1, -1.0
    for i, p in enumerate(pts):
        if i in (i0, i1):
            continue
        dist = (p - origin).cross(axis).length() / axis_length
        if dist > best:
            i2, best = i, dist
    if i2 < 0 or best <= eps:
        return None

    n = (pts[i1] - pts[i0]).cross(pts[i2] - pts[i0])
    n_length = n.length()
    if n_length <= eps:
        return None
    unit_n = n / n_length
    d = unit_n.dot(pts[i0])

    i3, best = -1, -1.0
    for i, p in enumerate(pts):
        if i in (i0, i1, i2):
            continue
        dist = abs(unit_n.dot(p) - d)
        if dist > best:
            i3, best = i, dist
    if i3 < 0 or best <= eps:
        return None
    return i0, i1, i2, i3


def _centroid(points: Iterable[Vector3]) -> Vector3:
    points = list(points)
    total = Vector3.ZERO
    for p in points:
        total = total + p
    return total / len(points)


class ConvexHull:
    """The convex hull of a point set, stored as tetrahedra around an inner point.

    Fewer than four points, or points that are all collinear or coplanar,
    give an empty hull.
    """

    def __init__(self, points: Optional[Iterable[Vector3]] = None) -> None:
        self.simplices: list[Simplex] = []
        if points is not None:
            self._build(list(points))

    def is_point_inside(self, point: Vector3, eps: float = _EPS) -> bool:
        return any(s.contains_point(point, eps) for s in self.simplices)

    def _build(self, pts: list[Vector3]) -> None:
        eps = _EPS
        if len(pts) < 4:
            return
        initial = _initial_tetrahedron(pts, eps)
        if initial is None:
            return
        i0, i1, i2, i3 = initial
        center = _centroid(pts[i] for i in initial)

        faces: list[_Face] = []
        for a, b, c in ((i0, i1, i2), (i0, i2, i3), (i0, i3, i1), (i1, i3, i2)):
            face = _oriented_face(pts, a, b, c, center, eps)
            if face is not None:
                faces.append(face)

        candidates = [i for i in range(len(pts)) if i not in initial]
        processed: set[int] = set()

        while True:
            best_point, best_dist = -1, eps
            for pi in candidates:
                if pi in processed:
                    continue
                for face in faces:
                    dist = face.distance(pts[pi])
                    if dist > best_dist:
                        best_point, best_dist = pi, dist
            if best_point == -1:
                break

            apex = pts[best_point]
            visible = [f for f in faces if f.distance(apex) > eps]

            edge_count: dict[tuple[int, int], int] = {}
            oriented: list[tuple[int, int]] = []
            for f in visible:
                for u, v in ((f.a, f.b), (f.b, f.c), (f.c, f.a)):
                    key = (min(u, v), max(u, v))
                    edge_count[key] = edge_count.get(key, 0) + 1
                    oriented.append((u, v))
            horizon = [(u, v) for u, v in oriented if edge_count[(min(u, v), max(u, v))] == 1]

            visible_ids = {id(f) for f in visible}
            new_faces = [f for f in faces if id(f) not in visible_ids]
            for u, v in horizon:
                face = _oriented_face(pts, v, u, best_point, center, eps)
                if face is not None:
                    new_faces.append(face)
            faces = new_faces
            processed.add(best_point)

        hull_vertices = {i for f in faces for i in (f.a, f.b, f.c)}
        if hull_vertices:
            center = _centroid(pts[i] for i in sorted(hull_vertices))

        for f in faces:
            face = _oriented_face(pts, f.a, f.b, f.c, center, eps)
            if face is None:
                continue
            self.simplices.append(Simplex(pts[face.a], pts[face.b], pts[face.c], center))