# enginemath

This package provides pure-Python math primitives for games and simulations. It has no dependencies.

Each module holds one kind of object. You import from the module directly, for example `from enginemath.vector3 import Vector3`.

## Modules

| Module | Contents |
| --- | --- |
| `enginemath.vector2` | `Vector2`: arithmetic, `dot`, `cross`, `perpendicular`, `reflect`, `project_onto`, `lerp`, `intersection`, `magnitude`, `unit` |
| `enginemath.vector3` | `Vector3`: arithmetic, `dot`, `cross`, `length`, `unit`, `lerp`, `reflect`, `project_onto`, `parallel`, `orthogonal`. It also has the constants `ZERO`, `ONE`, `UNIT_X`, `UNIT_Y` and `UNIT_Z` |
| `enginemath.vector4` | `Vector4`: arithmetic, `dot`, `length`, `unit`, `lerp`, `xyz`, `xy`, and constants in the same style |
| `enginemath.udim` | `UDim` and `UDim2`: scale-plus-offset sizes, resolved against a parent size |
| `enginemath.scalar` | `max_abs_index` and `min_abs_index` |
| `enginemath.ray` | `Ray`: its direction is normalised when the ray is built. `get_point` gives the point at a distance |
| `enginemath.rect` | `Rect`: edge-based 2D rectangles with `contains`, `intersects`, `area`, `center`, `containing` and `containing_points` |
| `enginemath.color` | `Color`: RGBA with float channels. It reads and writes hex (`from_hex`, `to_hex`), and can be packed as ABGR (`to_abgr`), built from HSV (`from_hsv`) and interpolated with `lerp` |
| `enginemath.sequences` | `ColorSequence` and `NumberSequence`: keyframed values that are sampled with `value_at` |
| `enginemath.quaternion` | `Quaternion`: `rotate`, `inverse`, `slerp`, `lerp`, `from_axis_angle`, `from_euler_angles` |
| `enginemath.transform` | `Transform`: an immutable 4×4 matrix. It provides `transform_point`, `transform_vector` and `inverse`; the `translation`, `rotation` and `scale` properties with `with_*` counterparts; and orthographic and perspective projection constructors |
| `enginemath.plane` | `Plane`: signed distance, ray intersection and plane-plane intersection |
| `enginemath.cuboid` | `Cuboid`: a box placed by a `Transform` |
| `enginemath.aabb` | `AABB`: axis-aligned boxes with containment, union, intersection and quantization |
| `enginemath.sphere` | `Sphere`: containment, union, bounding spheres, and tangent and intersection planes |
| `enginemath.polygon` | `Polygon`: area, perimeter, convexity, point containment, centroid and rotation. It also builds regular polygons and stars |
| `enginemath.spline` | `Spline` and `SplinePoint`: cubic Hermite curves with sampled and quadrature arc lengths |
| `enginemath.convex_hull` | `ConvexHull`, built with QuickHull and stored as tetrahedra (`Simplex`). It offers `is_point_inside` |

Vectors, quaternions, colours, rays, planes and transforms are immutable dataclasses. `AABB`, `Sphere` and `Polygon` are changed in place by methods such as `expand`, `translate` and `scale`.

For `Transform`, `a * b` applies `a` first and `b` second. Multiplying a transform by a number scales every entry of the matrix.

## Install

```
pip install .
```

## Examples

```python
import math

from enginemath.aabb import AABB
from enginemath.quaternion import Quaternion
from enginemath.vector3 import Vector3

q = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), math.pi / 2)
print(q.rotate(Vector3(1.0, 0.0, 0.0)))   # approximately (0, 1, 0)

box = AABB.from_points([Vector3(0, 0, 0), Vector3(2, 3, 4)])
print(box.volume())                        # 24
print(box.contains(Vector3(1, 1, 1)))      # True
```

```python
from enginemath.udim import UDim2
from enginemath.vector2 import Vector2

pos = UDim2.from_components(0.5, 10.0, 0.25, 0.0)
print(pos.resolve(Vector2(800.0, 600.0)))  # Vector2(x=410.0, y=150.0)
```

```python
from enginemath.color import Color

print(Color.lerp(Color.black(), Color.white(), 0.5))
print(hex(Color.red().to_abgr()))          # 0xff0000ff
```

## Errors

Some operations have no result, and these raise an exception:

- Dividing a `Vector3`, `Vector4` or `Quaternion` by zero raises `ZeroDivisionError`.
- `Vector4.unit()` on a zero vector raises `ValueError`.
- `Quaternion.inverse()` on a zero quaternion raises `ValueError`.
- `Transform.inverse()` raises `ValueError` when the matrix is singular or not affine.
- Building a `Transform` from anything other than 4 rows of 4 values raises `ValueError`.
- `Polygon.centroid()` raises `ZeroDivisionError` when the polygon has zero area.

Some operations return `None` when there is no answer:

- `Plane.intersect_ray` and `Plane.intersection`.
- `Sphere.intersection_plane`.

## Limits

- There is no octree or other spatial index. Range queries over many objects are not provided.
- `ConvexHull` only tests whether a point is inside. It cannot test two hulls, or two tetrahedra, for overlap.

## Running the tests

```
pip install .[test]
pytest
```