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

from math import pi, radians

from quadtracer.camera import PerspectiveCamera, OrthographicCamera, RaytracingCamera
from quadtracer.colors import LIGHT_GRAY, RED, WHITE
from quadtracer.geometry import Point, Vec, ORIGIN, VEC_Y, VEC_Z
from quadtracer.lights import PositionalLight, SpotLight, PURE_WHITE_LIGHT
from quadtracer.materials import (TIN, POLISHED_SILVER, RED_PLASTIC, CYAN_RUBBER, GOLD, RED_MATERIAL)
from quadtracer.scene import Scene
from quadtracer.shapes import Plane, Sphere, Ellipsoid, CylinderX, ConeY, ClosedCylinderY
from quadtracer.textures import CheckeredTexture

DEMO_CAMERA_POSITION = Point(0.0, 10.0, 10.0)
RENDER_CAMERA_POSITION = Point(12.0, 20.0, 18.0)
BACKGROUND_COLOR = LIGHT_GRAY


def perspective_camera(fov: float = pi / 2) -> PerspectiveCamera:
    return PerspectiveCamera(DEMO_CAMERA_POSITION, ORIGIN, VEC_Y, fov)


def orthographic_camera(pixels_per_world_unit: float = 25.0) -> OrthographicCamera:
    return OrthographicCamera(DEMO_CAMERA_POSITION, ORIGIN, VEC_Y, pixels_per_world_unit)


def build_demo_scene(camera: RaytracingCamera = None, texture=None) -> Scene:
    """Build the demo scene: a few quadrics standing on a metal floor, lit by two lights

    If `camera` is None, a perspective camera with a 90° field of view is used. The closed
    cylinder is covered with `texture`; if it is None, a red and white checkered texture is
    used instead. The camera is moved to its rendering position before returning."""
    if camera is None:
        camera = perspective_camera()

    scene = Scene(camera)

    scene.add_opaque_object(Plane(ORIGIN, VEC_Y), TIN)
    scene.add_opaque_object(Sphere(Point(-6.0, 3.0, 0.0), 6.0), POLISHED_SILVER)
    scene.add_opaque_object(Ellipsoid(Point(-3.0, 2.0, 11.0), Vec(4.0, 4.0, 3.0)), RED_PLASTIC)
    scene.add_opaque_object(CylinderX(Point(16.0, 2.0, 8.0), 2.0, 8.0), CYAN_RUBBER)
    scene.add_opaque_object(ConeY(Point(20.0, 6.0, 0.0), 1.0, 8.0), GOLD)

    scene.add_transparent_object(Plane(Point(0.0, -2.0, -4.0), VEC_Z), RED_MATERIAL, 0.4)

    if texture is None:
        texture = CheckeredTexture(RED, WHITE, num_of_steps=8)

    cylinder = scene.add_opaque_object(ClosedCylinderY(Point(10.0, 6.0, 0.0), 4.0, 12.0), GOLD)
    cylinder.set_texture(texture)

    scene.add_light(PositionalLight(Point(3.0, 30.0, 10.0), PURE_WHITE_LIGHT))
    scene.add_light(SpotLight(Point(2.0, 30.0, 4.0), Vec(0.0, -1.0, 0.0), radians(45.0), PURE_WHITE_LIGHT))

    camera.change_configuration(RENDER_CAMERA_POSITION, ORIGIN, VEC_Y)
    return scene
