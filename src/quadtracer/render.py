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

from dataclasses import dataclass, field
from time import process_time

from quadtracer.colors import Color, BLACK
from quadtracer.framebuffer import FrameBuffer
from quadtracer.hitrecord import HitRecord
from quadtracer.misc import EPSILON, clamp
from quadtracer.ray import Ray
from quadtracer.scene import Scene


@dataclass(frozen=True)
class RenderConfig:
    """The settings of a rendering pass

    -   `antialiasing`: 1 (one ray per pixel) or 3 (3×3 rays per pixel, averaged)
    -   `default_color`: the color of the rays that do not hit any opaque object
    -   `epsilon`: how far from a surface secondary rays (shadows, reflections) start
    -   `reflection_weight`: the weight of the reflected color at every bounce
    -   `texture_weight`: the weight of the texture color when blended with the shaded color
    """

    antialiasing: int = 1
    default_color: Color = field(default_factory=lambda: Color(BLACK.r, BLACK.g, BLACK.b))
    epsilon: float = EPSILON
    reflection_weight: float = 0.5
    texture_weight: float = 0.5

    def __post_init__(self):
        if self.antialiasing not in (1, 3):
            raise ValueError(f"antialiasing must be either 1 or 3, got {self.antialiasing}")


class RayTracer:
    """A recursive ray tracer

    Each ray is shaded using the Phong model with shadows, then blended with the texture (if any)
    and with the transparent objects lying behind the hit point. Reflections are traced recursively,
    until the recursion budget is exhausted."""

    def __init__(self, config: RenderConfig = RenderConfig()):
        self.config = config

    def local_color(self, scene: Scene, hit: HitRecord) -> Color:
        """Sum the contributions of all the lights in the scene at a hit point, taking shadows into account"""
        result = Color(0.0, 0.0, 0.0)
        eye_frame = scene.camera.frame
        for light in scene.lights:
            light_position = light.world_position(eye_frame)
            in_shadow = scene.is_point_in_shadow(hit.world_point, hit.normal, light_position,
                                                 epsilon=self.config.epsilon)
            result = result + light.illuminate(hit.world_point, hit.normal, hit.material, eye_frame, in_shadow)

        return result

    def trace_ray(self, ray: Ray, scene: Scene, depth: int) -> Color:
        """Compute the color carried by a ray, with at most `depth` reflections

        The result is not clamped."""
        hit = scene.ray_intersection(ray)
        if not hit:
            return Color(self.config.default_color.r, self.config.default_color.g, self.config.default_color.b)

        result = self.local_color(scene, hit)
        if hit.texture is not None:
            weight = self.config.texture_weight
            texture_color = hit.texture.sample(clamp(hit.surface_point.u), clamp(hit.surface_point.v))
            result = result * (1.0 - weight) + texture_color * weight

        transparent_hit = scene.transparent_intersection(ray)
        if transparent_hit and transparent_hit.t > hit.t:
            alpha = transparent_hit.material.alpha
            result = result * (1.0 - alpha) + transparent_hit.material.ambient * alpha

        if depth == 0:
            return result

        normal = hit.normal.to_vec()
        reflection_dir = ray.dir - normal * (2.0 * ray.dir.dot(normal))
        reflection_ray = Ray(origin=hit.world_point + normal * self.config.epsilon, dir=reflection_dir)
        return result + self.trace_ray(reflection_ray, scene, depth - 1) * self.config.reflection_weight

    def pixel_color(self, scene: Scene, x: int, y: int, depth: int) -> Color:
        """Compute the color of pixel (x, y), averaging 3×3 rays if antialiasing is on"""
        camera = scene.camera
        if self.config.antialiasing == 1:
            return self.trace_ray(camera.get_ray(x, y), scene, depth)

        result = Color(0.0, 0.0, 0.0)
        for i in (-1, 0, 1):
            for j in (-1, 0, 1):
                result = result + self.trace_ray(camera.get_ray(x + i / 3.0, y + j / 3.0), scene, depth)

        return result * (1.0 / 9.0)

    def render(self, framebuffer: FrameBuffer, depth: int, scene: Scene,
               callback=None, callback_time_s: float = 2.0, **callback_kwargs):
        """Render the scene into a framebuffer

        The viewing parameters of `scene.camera` are recomputed to match the size of the framebuffer,
        and the camera keeps them after this method returns. An empty framebuffer is left untouched. Pixel
        (0, 0) is the bottom-left corner of the image. If `callback` is not None, it is called as
        ``callback(row, col, **callback_kwargs)`` at most every `callback_time_s` seconds."""
        if depth < 0:
            raise ValueError(f"the recursion depth cannot be negative, got {depth}")

        if framebuffer.width == 0 or framebuffer.height == 0:
            return

        scene.camera.calculate_viewing_parameters(framebuffer.width, framebuffer.height)

        last_call_time = process_time()
        if callback:
            callback(0, 0, **callback_kwargs)

        for y in range(framebuffer.height):
            for x in range(framebuffer.width):
                color = self.pixel_color(scene, x, y, depth)
                framebuffer.set_pixel(x, y, color.clamp(0.0, 1.0))

                current_time = process_time()
                if callback and (current_time - last_call_time > callback_time_s):
                    callback(y, x, **callback_kwargs)
                    last_call_time = current_time


def render(framebuffer: FrameBuffer, depth: int, scene: Scene,
           config: RenderConfig = RenderConfig(), callback=None, **callback_kwargs):
    """Render `scene` into `framebuffer`, allowing at most `depth` reflections per ray

    Like :meth:`.RayTracer.render`, this changes the viewing parameters of `scene.camera` so that
    they match the size of `framebuffer`."""
    RayTracer(config).render(framebuffer, depth, scene, callback=callback, **callback_kwargs)
