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

from dataclasses import dataclass
from math import radians
from time import process_time

import click

from quadtracer.demo import build_demo_scene, perspective_camera, orthographic_camera, BACKGROUND_COLOR
from quadtracer.framebuffer import FrameBuffer
from quadtracer.render import RayTracer, RenderConfig
from quadtracer.textures import load_image_texture


@dataclass
class Parameters:
    width: int = 640
    height: int = 480
    depth: int = 1
    antialiasing: int = 1
    camera: str = "perspective"
    fov_deg: float = 90.0
    texture_file_name: str = ""
    gamma: float = 1.0
    output_png_file_name: str = "output.png"


CAMERAS = ["perspective", "orthographic"]


def build_camera(parameters: Parameters):
    if parameters.camera == "perspective":
        return perspective_camera(radians(parameters.fov_deg))

    return orthographic_camera()


@click.group()
def cli():
    pass


@click.command("render")
@click.option("--width", type=click.IntRange(min=1), default=640, help="Width of the image to render")
@click.option("--height", type=click.IntRange(min=1), default=480, help="Height of the image to render")
@click.option("--depth", type=click.IntRange(min=0), default=1, help="Maximum number of reflections per ray")
@click.option("--antialiasing", type=click.Choice(["1", "3"]), default="1",
              help="Number of rays per pixel side (3 means 3×3 rays per pixel)")
@click.option("--camera", type=click.Choice(CAMERAS), default="perspective")
@click.option("--fov", type=float, default=90.0,
              help="Field of view of the perspective camera, in degrees")
@click.option("--texture", type=str, default="",
              help="Image used as a texture for the closed cylinder (PNG, JPEG, ...)")
@click.option("--gamma", type=float, default=1.0, help="Exponent for gamma-correction")
@click.option(
    "--png-output",
    type=str,
    default="output.png",
    help="Name of the PNG file to create",
)
def render(width, height, depth, antialiasing, camera, fov, texture, gamma, png_output):
    """Render the demo scene and save it into a PNG file"""
    parameters = Parameters(width=width, height=height, depth=depth, antialiasing=int(antialiasing),
                            camera=camera, fov_deg=fov, texture_file_name=texture, gamma=gamma,
                            output_png_file_name=png_output)

    image_texture = None
    if parameters.texture_file_name:
        try:
            with open(parameters.texture_file_name, "rb") as inpf:
                image_texture = load_image_texture(inpf)
        except OSError as e:
            raise click.BadParameter(f"unable to read «{parameters.texture_file_name}»: {e}",
                                     param_hint="--texture")

        click.echo(f"Texture {parameters.texture_file_name} has been read from disk.")

    scene = build_demo_scene(camera=build_camera(parameters), texture=image_texture)
    image = FrameBuffer(parameters.width, parameters.height)
    click.echo(f"Generating a {parameters.width}×{parameters.height} image")

    tracer = RayTracer(RenderConfig(antialiasing=parameters.antialiasing, default_color=BACKGROUND_COLOR))

    def print_progress(row, col):
        click.echo(f"Rendering row {row + 1}/{image.height}\r", nl=False)

    start_time = process_time()
    tracer.render(image, parameters.depth, scene, callback=print_progress)
    elapsed_time = process_time() - start_time

    click.echo(f"Rendering completed in {elapsed_time:.1f} s")

    with open(parameters.output_png_file_name, "wb") as outf:
        image.write_ldr_image(outf, "PNG", gamma=parameters.gamma)
    click.echo(f"PNG image written to {parameters.output_png_file_name}")


@click.command("info")
@click.option("--camera", type=click.Choice(CAMERAS), default="perspective")
def info(camera):
    """Print the lights and the camera of the demo scene"""
    scene = build_demo_scene(camera=build_camera(Parameters(camera=camera)))

    for idx, light in enumerate(scene.lights):
        click.echo(f"Light #{idx}")
        click.echo(str(light))

    click.echo(str(scene.camera))
    click.echo(f"{len(scene.opaque_objects)} opaque objects, "
               f"{len(scene.transparent_objects)} transparent objects")


cli.add_command(render)
cli.add_command(info)

if __name__ == "__main__":
    cli()
