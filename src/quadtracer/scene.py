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
from typing import List, Union

from quadtracer.camera import RaytracingCamera
from quadtracer.geometry import Point, Normal
from quadtracer.hitrecord import HitRecord
from quadtracer.lights import LightSource
from quadtracer.materials import Material
from quadtracer.misc import EPSILON
from quadtracer.ray import Ray
from quadtracer.shapes import Shape, VisibleShape


class Scene:
    """A class holding the objects, the lights, and the camera of a scene

    Opaque and transparent objects are kept in two separate lists. You add objects using
    :meth:`.Scene.add_opaque_object` and :meth:`.Scene.add_transparent_object`, lights using
    :meth:`.Scene.add_light`. The scene must not be modified while it is being rendered.
    """

    opaque_objects: List[VisibleShape]
    transparent_objects: List[VisibleShape]
    lights: List[LightSource]

    def __init__(self, camera: Union[RaytracingCamera, None] = None):
        self.camera = camera
        self.opaque_objects = []
        self.transparent_objects = []
        self.lights = []

    def add_opaque_object(self, shape: Shape, material: Material) -> VisibleShape:
        """Append a new opaque shape to the scene, and return the corresponding :class:`.VisibleShape`"""
        visible_shape = VisibleShape(shape, material)
        self.opaque_objects.append(visible_shape)
        return visible_shape

    def add_transparent_object(self, shape: Shape, material: Material, alpha: float) -> VisibleShape:
        """Append a new transparent shape to the scene

        The material is copied, and its `alpha` field is set to the value passed to this method."""
        material = deepcopy(material)
        material.alpha = alpha

        visible_shape = VisibleShape(shape, material)
        self.transparent_objects.append(visible_shape)
        return visible_shape

    def add_light(self, light: LightSource):
        """Append a new light to the scene"""
        self.lights.append(light)

    def set_camera(self, camera: RaytracingCamera):
        self.camera = camera

    def ray_intersection(self, ray: Ray) -> HitRecord:
        """Return the closest intersection between a ray and the opaque objects"""
        return VisibleShape.find_intersection(ray, self.opaque_objects)

    def transparent_intersection(self, ray: Ray) -> HitRecord:
        """Return the closest intersection between a ray and the transparent objects"""
        return VisibleShape.find_intersection(ray, self.transparent_objects)

    def is_point_in_shadow(self, point: Point, normal: Normal, light_position: Point,
                           epsilon: float = EPSILON) -> bool:
        """Tell whether an opaque object lies between a point on a surface and a light

        The shadow ray starts slightly above the surface (along the normal) to avoid hitting the
        surface itself. Only objects closer than the light cast a shadow."""
        origin = point + normal.to_vec() * epsilon
        direction = light_position - origin
        if direction.squared_norm() == 0.0:
            return False

        hit = self.ray_intersection(Ray(origin=origin, dir=direction))
        return hit.t < point.distance(light_position)
