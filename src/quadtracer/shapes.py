# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from copy import deepcopy
from math import atan2, acos, pi, floor
from typing import List, Union

from quadtracer.geometry import Point, Vec, Normal, Vec2d, VEC_X, VEC_Y, VEC_Z, create_onb_from_z
from quadtracer.hitrecord import HitRecord
from quadtracer.materials import Material
from quadtracer.misc import are_close, clamp, in_range_exclusive, in_range_inclusive, normalize_radians
from quadtracer.quadrics import QuadricParameters, quadratic
from quadtracer.ray import Ray


def _spherical_uv(local: Vec) -> Vec2d:
    """Convert a point on the unit sphere into (u, v) coordinates

    `u` is the longitude around the y axis, `v` is the colatitude measured from the +y pole."""
    return Vec2d(
        u=normalize_radians(atan2(local.z, local.x)) / (2.0 * pi),
        v=acos(clamp(local.y, -1.0, 1.0)) / pi,
    )


class Shape:
    """A generic implicit shape

    This is an abstract class, and you should only use it to derive
    concrete classes. Be sure to redefine the method
    :meth:`.Shape.ray_intersection`; redefine :meth:`.Shape.get_tex_coords`
    too if the shape supports textures.

    Shapes know nothing about materials: see :class:`.VisibleShape`.
    """

    def ray_intersection(self, ray: Ray) -> HitRecord:
        """Compute the closest intersection in front of the ray's origin

        Return a «no hit» :class:`.HitRecord` (``t == math.inf``) if there is none."""
        raise NotImplementedError(
            "Shape.ray_intersection is an abstract method and cannot be called directly"
        )

    def get_tex_coords(self, point: Point) -> Vec2d:
        """Return the (u, v) coordinates of a point on the surface; the default is (0, 0)"""
        return Vec2d(0.0, 0.0)


class Plane(Shape):
    """An infinite plane, passing through `point` and orthogonal to `normal`"""

    def __init__(self, point: Point = Point(), normal: Vec = VEC_Z):
        self.point = point
        self.n = normal.normalize()
        self._e1, self._e2, _ = create_onb_from_z(self.n)

    @staticmethod
    def from_points(p0: Point, p1: Point, p2: Point) -> "Plane":
        """Build the plane containing three points

        The normal is oriented according to the counter-clockwise order of the points."""
        normal = (p2 - p1).cross(p0 - p1)
        if normal.squared_norm() == 0.0:
            raise ValueError(f"the points {p0}, {p1}, {p2} are collinear")

        return Plane(point=p1, normal=normal)

    def ray_intersection(self, ray: Ray) -> HitRecord:
        denom = ray.dir.dot(self.n)
        if denom == 0.0:
            # The ray is parallel to the plane, or it lies within it
            return HitRecord()

        t = (self.point - ray.origin).dot(self.n) / denom
        if t < 0.0:
            return HitRecord()

        return HitRecord(t=t, world_point=ray.at(t), normal=self.n.to_normal())

    def get_tex_coords(self, point: Point) -> Vec2d:
        offset = point - self.point
        u = offset.dot(self._e1)
        v = offset.dot(self._e2)
        return Vec2d(u - floor(u), v - floor(v))

    def inside_plane(self, point: Point) -> bool:
        """Return True if `point` lies on the side of the plane the normal points to (or on the plane)"""
        return (point - self.point).dot(self.n) >= 0.0

    def segment_intersection(self, p1: Point, p2: Point) -> float:
        """Return the parameter `t` such that ``p1 + t (p2 - p1)`` lies on the plane

        The segment must cross the plane; if it is parallel, a `ZeroDivisionError` is raised."""
        d1 = (p1 - self.point).dot(self.n)
        d2 = (p2 - self.point).dot(self.n)
        return d1 / (d1 - d2)


class Disk(Shape):
    """A flat disk with a given center, normal, and radius

    Points lying exactly on the border are not considered part of the disk."""

    def __init__(self, center: Point, normal: Vec, radius: float):
        self.center = center
        self.radius = radius
        self.plane = Plane(point=center, normal=normal)

    def ray_intersection(self, ray: Ray) -> HitRecord:
        hit = self.plane.ray_intersection(ray)
        if hit and self.center.distance(hit.world_point) >= self.radius:
            return HitRecord()

        return hit

    def get_tex_coords(self, point: Point) -> Vec2d:
        offset = point - self.center
        angle = normalize_radians(atan2(offset.dot(self.plane._e2), offset.dot(self.plane._e1)))
        return Vec2d(angle / (2.0 * pi), offset.norm() / self.radius)


# Indices of the two in-plane coordinates of an axis-aligned rectangle, given the
# index of the axis its normal is parallel to
_RECT_AXES = {0: (1, 2), 1: (0, 2), 2: (0, 1)}


class Rect(Shape):
    """An axis-aligned rectangle

    The normal must be parallel to one of the coordinate axes. `width` and `height` are measured
    along the two remaining axes, taken in the order (y, z), (x, z), or (x, y). Points lying exactly on
    the border are not considered part of the rectangle, so that adjacent faces of a box do not
    report the same hit twice."""

    def __init__(self, center: Point, normal: Vec, width: float, height: float):
        self.center = center
        self.width = width
        self.height = height
        self.plane = Plane(point=center, normal=normal)

        n = self.plane.n
        axis = [i for i in range(3) if are_close(abs(n[i]), 1.0, epsilon=1e-9)]
        if not axis:
            raise ValueError(f"the normal of a rectangle must be parallel to an axis, got {normal}")

        self._axis_w, self._axis_h = _RECT_AXES[axis[0]]

    def ray_intersection(self, ray: Ray) -> HitRecord:
        hit = self.plane.ray_intersection(ray)
        if not hit:
            return hit

        point = hit.world_point
        half_w, half_h = self.width / 2.0, self.height / 2.0
        cw, ch = self.center[self._axis_w], self.center[self._axis_h]
        if not (in_range_exclusive(point[self._axis_w], cw - half_w, cw + half_w) and
                in_range_exclusive(point[self._axis_h], ch - half_h, ch + half_h)):
            return HitRecord()

        return hit

    def get_tex_coords(self, point: Point) -> Vec2d:
        left = self.center[self._axis_w] - self.width / 2.0
        bottom = self.center[self._axis_h] - self.height / 2.0
        return Vec2d((point[self._axis_w] - left) / self.width,
                     (point[self._axis_h] - bottom) / self.height)


class Box(Shape):
    """An axis-aligned box, made by six rectangles

    `size` is either a :class:`.Vec` (the three edges along x, y, z) or a float (a cube)."""

    def __init__(self, center: Point, size: Union[Vec, float]):
        if not isinstance(size, Vec):
            size = Vec(size, size, size)

        self.center = center
        self.size = size
        half = size * 0.5
        self.rects = [
            Rect(center + Vec(half.x, 0, 0), VEC_X, size.y, size.z),
            Rect(center - Vec(half.x, 0, 0), -VEC_X, size.y, size.z),
            Rect(center + Vec(0, half.y, 0), VEC_Y, size.x, size.z),
            Rect(center - Vec(0, half.y, 0), -VEC_Y, size.x, size.z),
            Rect(center + Vec(0, 0, half.z), VEC_Z, size.x, size.y),
            Rect(center - Vec(0, 0, half.z), -VEC_Z, size.x, size.y),
        ]

    def ray_intersection(self, ray: Ray) -> HitRecord:
        return HitRecord.get_closest([rect.ray_intersection(ray) for rect in self.rects])


class Triangle(Shape):
    """A triangle with vertices `a`, `b`, `c`

    Both clockwise and counter-clockwise orderings are accepted. Points on the edges are not
    considered inside the triangle."""

    def __init__(self, a: Point, b: Point, c: Point):
        self.a = a
        self.b = b
        self.c = c
        self.plane = Plane.from_points(a, b, c)

    def _barycentric(self, point: Point):
        a, b, c = self.a, self.b, self.c
        n = (b - a).cross(c - a)
        n2 = n.squared_norm()
        alpha = n.dot((c - b).cross(point - b)) / n2
        beta = n.dot((a - c).cross(point - c)) / n2
        gamma = n.dot((b - a).cross(point - a)) / n2
        return alpha, beta, gamma

    def inside(self, point: Point) -> bool:
        return all(in_range_exclusive(coord, 0.0, 1.0) for coord in self._barycentric(point))

    def ray_intersection(self, ray: Ray) -> HitRecord:
        hit = self.plane.ray_intersection(ray)
        if hit and not self.inside(hit.world_point):
            return HitRecord()

        return hit

    def get_tex_coords(self, point: Point) -> Vec2d:
        _, beta, gamma = self._barycentric(point)
        return Vec2d(beta, gamma)


class ConvexPolygon(Shape):
    """A convex, planar polygon

    The vertices must lie on the same plane and be listed in consistent order (either clockwise
    or counter-clockwise). As with :class:`.Triangle`, points lying exactly on an edge are not
    considered inside the polygon."""

    def __init__(self, vertices: List[Point]):
        if len(vertices) < 3:
            raise ValueError(f"a polygon needs at least 3 vertices, got {len(vertices)}")

        self.vertices = list(vertices)
        self.plane = Plane.from_points(vertices[0], vertices[1], vertices[2])

    def is_inside(self, point: Point) -> bool:
        inside_on_front_side = True
        inside_on_back_side = True

        num_of_vertices = len(self.vertices)
        for i, vertex in enumerate(self.vertices):
            edge = self.vertices[(i + 1) % num_of_vertices] - vertex
            side = edge.cross(point - vertex).dot(self.plane.n)
            if side <= 0.0:
                inside_on_front_side = False
            if side >= 0.0:
                inside_on_back_side = False

        return inside_on_front_side or inside_on_back_side

    def ray_intersection(self, ray: Ray) -> HitRecord:
        hit = self.plane.ray_intersection(ray)
        if hit and not self.is_inside(hit.world_point):
            return HitRecord()

        return hit


class QuadricSurface(Shape):
    """A surface described by the general equation of a quadric

    See :class:`.QuadricParameters` for the meaning of the coefficients. The coefficients are
    referred to `center`. The closest intersection is the smallest positive root of the equation."""

    def __init__(self, params: QuadricParameters = QuadricParameters(), center: Point = Point()):
        self.params = params
        self.center = center

    def normal(self, point: Point) -> Normal:
        """Return the unit normal at a point on the surface, i.e., the normalized gradient"""
        gradient = self.params.gradient(point - self.center)
        norm = gradient.norm()
        if norm == 0.0:
            # Singular point (e.g., the apex of a cone): there is no well-defined normal
            return Normal(0.0, 0.0, 0.0)

        return Normal(gradient.x / norm, gradient.y / norm, gradient.z / norm)

    def find_intersections(self, ray: Ray) -> List[HitRecord]:
        """Return the intersections in front of the ray's origin, sorted by increasing `t`"""
        aq, bq, cq = self.params.coefficients(ray.origin - self.center, ray.dir)

        hits = []
        for t in quadratic(aq, bq, cq):
            if t > 0.0:
                point = ray.at(t)
                hits.append(HitRecord(t=t, world_point=point, normal=self.normal(point)))

        return hits

    def ray_intersection(self, ray: Ray) -> HitRecord:
        hits = self.find_intersections(ray)
        return hits[0] if hits else HitRecord()


class Sphere(QuadricSurface):
    """A sphere with a given center and radius"""

    def __init__(self, center: Point = Point(), radius: float = 1.0):
        super().__init__(QuadricParameters.sphere(radius), center)
        self.radius = radius

    def get_tex_coords(self, point: Point) -> Vec2d:
        return _spherical_uv((point - self.center) * (1.0 / self.radius))


class Ellipsoid(QuadricSurface):
    """An axis-aligned ellipsoid, whose semi-axes are the three components of `size`"""

    def __init__(self, center: Point, size: Vec):
        super().__init__(QuadricParameters.ellipsoid(size), center)
        self.size = size

    def get_tex_coords(self, point: Point) -> Vec2d:
        offset = point - self.center
        return _spherical_uv(Vec(offset.x / self.size.x, offset.y / self.size.y, offset.z / self.size.z))


class _AxialQuadric(QuadricSurface):
    """A quadric clipped along one of the coordinate axes

    Only the points whose coordinate along `axis` is within `length / 2` from the center are
    part of the surface."""

    axis = 1

    def __init__(self, params: QuadricParameters, center: Point, radius: float, length: float):
        super().__init__(params, center)
        self.radius = radius
        self.length = length

    def within_bounds(self, point: Point) -> bool:
        half_length = self.length / 2.0
        center = self.center[self.axis]
        return in_range_inclusive(point[self.axis], center - half_length, center + half_length)

    def ray_intersection(self, ray: Ray) -> HitRecord:
        for hit in self.find_intersections(ray):
            if self.within_bounds(hit.world_point):
                return hit

        return HitRecord()

    def get_tex_coords(self, point: Point) -> Vec2d:
        # The angle is measured in the plane of the two other axes, taken in cyclic order
        first, second = (self.axis + 2) % 3, (self.axis + 1) % 3
        if self.axis != 1:
            first, second = second, first

        offset = point - self.center
        angle = normalize_radians(atan2(offset[second], offset[first]))
        bottom = self.center[self.axis] - self.length / 2.0
        return Vec2d(angle / (2.0 * pi), (point[self.axis] - bottom) / self.length)


class CylinderX(_AxialQuadric):
    """An open cylinder whose axis is parallel to x"""

    axis = 0

    def __init__(self, center: Point, radius: float, length: float):
        super().__init__(QuadricParameters.cylinder_x(radius), center, radius, length)


class CylinderY(_AxialQuadric):
    """An open cylinder whose axis is parallel to y"""

    axis = 1

    def __init__(self, center: Point, radius: float, length: float):
        super().__init__(QuadricParameters.cylinder_y(radius), center, radius, length)


class CylinderZ(_AxialQuadric):
    """An open cylinder whose axis is parallel to z"""

    axis = 2

    def __init__(self, center: Point, radius: float, length: float):
        super().__init__(QuadricParameters.cylinder_z(radius), center, radius, length)


class ConeY(_AxialQuadric):
    """A double cone whose apex is in `center` and whose axis is parallel to y

    The radius of the section at distance `h` from the apex is `radius * h`; the surface extends
    by `length / 2` above and below the apex."""

    axis = 1

    def __init__(self, center: Point, radius: float, length: float):
        super().__init__(QuadricParameters.cone_y(radius), center, radius, length)


class ClosedCylinderY(Shape):
    """A cylinder parallel to y, closed by two disks

    The shape is made by an open :class:`.CylinderY` and two :class:`.Disk` objects, which are
    built once in the constructor."""

    def __init__(self, center: Point, radius: float, length: float):
        self.center = center
        self.radius = radius
        self.length = length

        self.lateral = CylinderY(center, radius, length)
        self.top_disk = Disk(center + Vec(0.0, length / 2.0, 0.0), VEC_Y, radius)
        self.bottom_disk = Disk(center - Vec(0.0, length / 2.0, 0.0), -VEC_Y, radius)

    def ray_intersection(self, ray: Ray) -> HitRecord:
        return HitRecord.get_closest([
            self.top_disk.ray_intersection(ray),
            self.bottom_disk.ray_intersection(ray),
            self.lateral.ray_intersection(ray),
        ])

    def get_tex_coords(self, point: Point) -> Vec2d:
        return self.lateral.get_tex_coords(point)


class VisibleShape:
    """A shape with a material, and optionally a texture

    The texture coordinates computed by the shape are mapped onto the window
    ``[lu, ru] × [lv, rv]`` of the texture; the default window covers the whole texture."""

    def __init__(self, shape: Shape, material: Material, texture=None,
                 lu: float = 0.0, ru: float = 1.0, lv: float = 0.0, rv: float = 1.0):
        self.shape = shape
        self.material = material
        self.set_texture(texture, lu, ru, lv, rv)

    def set_texture(self, texture, lu: float = 0.0, ru: float = 1.0, lv: float = 0.0, rv: float = 1.0):
        self.texture = texture
        self.lu, self.ru = lu, ru
        self.lv, self.rv = lv, rv

    def _fill_hit(self, hit: HitRecord):
        hit.material = deepcopy(self.material)
        hit.texture = self.texture
        if self.texture is not None:
            uv = self.shape.get_tex_coords(hit.world_point)
            hit.surface_point = Vec2d(self.lu + uv.u * (self.ru - self.lu),
                                      self.lv + uv.v * (self.rv - self.lv))

    def ray_intersection(self, ray: Ray) -> HitRecord:
        hit = self.shape.ray_intersection(ray)
        if hit:
            self._fill_hit(hit)

        return hit

    @staticmethod
    def find_intersection(ray: Ray, visible_shapes: List["VisibleShape"]) -> HitRecord:
        """Return the closest hit with ``t > 0`` among a list of visible shapes

        The order of the list does not matter. If no shape is hit, a «no hit» record is returned."""
        closest = HitRecord()
        closest_shape = None

        for visible_shape in visible_shapes:
            hit = visible_shape.shape.ray_intersection(ray)
            if 0.0 < hit.t < closest.t:
                # There was a hit, and it was closer than any other hit found before
                closest, closest_shape = hit, visible_shape

        if closest_shape is not None:
            closest_shape._fill_hit(closest)

        return closest
