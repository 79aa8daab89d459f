"""Fullscreen walk-through of a brush map with lit, textured planes."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from brushwalk.camera import Camera
from brushwalk.lights import PointLight, light_uniforms
from brushwalk.mapload import load_map
from brushwalk.plane import Plane
from brushwalk.player import Key, Player
from brushwalk.vectors import Vec3

VERTEX_SHADER = "res/shaders/basicVERT.txt"
FRAGMENT_SHADER = "res/shaders/basicFRAG.txt"
WALL_TEXTURE = "res/img/clay_wall.png"
FLOOR_TEXTURE = "res/img/house.png"
DEFAULT_MAP = "res/test.map"

ASPECT_RATIO = 800.0 / 640.0
NEAR_PLANE = 1.0
FAR_PLANE = 5000.0
LIGHT_FALLOFF = 0.1
PRINT_FPS = True
CULL_FACE = True


def default_point_lights(player_position: Vec3) -> list[PointLight]:
    """The scene's three white lights, the first carried by the player."""
    white = Vec3(1.0, 1.0, 1.0)
    return [
        PointLight(player_position, white, LIGHT_FALLOFF),
        PointLight(Vec3(-200.0, 20.0, -10.0), white, LIGHT_FALLOFF),
        PointLight(Vec3(0.0, 5.0, 0.0), white, LIGHT_FALLOFF),
    ]


def frustum_bounds(fov: float) -> tuple[float, float, float, float, float, float]:
    """Left, right, bottom, top, near and far of the perspective frustum."""
    half_width = ASPECT_RATIO * fov
    return (-half_width, half_width, -fov, fov, NEAR_PLANE, FAR_PLANE)


def texture_for(plane: Plane, wall_texture: Any, floor_texture: Any) -> Any:
    """Floors (normal pointing up) use the floor texture, everything else the wall one."""
    return floor_texture if plane.is_floor() else wall_texture


def anim_factor(elapsed: float) -> float:
    """Light pulse factor in [0, 1] for the elapsed time in seconds."""
    return abs(math.cos(elapsed))


@dataclass
class _Scene:
    player: Player = field(default_factory=Player)
    camera: Camera = field(default_factory=Camera)
    elapsed: float = 0.0


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the walk-through until it is closed."""
    parser = argparse.ArgumentParser(prog="brushwalk", description=__doc__)
    parser.add_argument("--map", default=DEFAULT_MAP, help="brush map to load")
    args = parser.parse_args(argv)
    return _run(args.map)


def _run(map_path: str) -> int:
    import pyglet
    from pyglet import gl
    from pyglet.gl import gl_compat
    from pyglet.graphics.shader import Shader, ShaderException
    from pyglet.image.codecs import ImageDecodeException
    from pyglet.window import key as keys

    key_map = {
        keys.W: Key.W, keys.A: Key.A, keys.S: Key.S, keys.D: Key.D,
        keys.Q: Key.Q, keys.E: Key.E,
        keys.LCTRL: Key.LCONTROL, keys.SPACE: Key.SPACE,
        keys.LEFT: Key.LEFT, keys.RIGHT: Key.RIGHT,
        keys.UP: Key.UP, keys.DOWN: Key.DOWN,
    }

    try:
        config = gl.Config(double_buffer=True, depth_size=24, major_version=2, minor_version=1)
        window = pyglet.window.Window(fullscreen=True, caption="My window", config=config)
    except pyglet.window.NoSuchConfigException:
        window = pyglet.window.Window(fullscreen=True, caption="My window")

    settings = window.context.config
    print(f"OpenGLVersion: {settings.major_version}.{settings.minor_version}")
    window.switch_to()

    try:
        with open(VERTEX_SHADER, encoding="utf-8") as handle:
            vertex_source = handle.read()
        with open(FRAGMENT_SHADER, encoding="utf-8") as handle:
            fragment_source = handle.read()
        vertex = Shader(vertex_source, "vertex")
        fragment = Shader(fragment_source, "fragment")
    except (OSError, ShaderException):
        print("Failed to load shader")
        return 1

    program = gl.glCreateProgram()
    gl.glAttachShader(program, vertex.id)
    gl.glAttachShader(program, fragment.id)
    gl.glLinkProgram(program)
    status = gl.GLint(0)
    gl.glGetProgramiv(program, gl.GL_LINK_STATUS, status)
    if not status.value:
        print("Failed to load shader")
        return 1

    try:
        wall_texture = pyglet.image.load(WALL_TEXTURE).get_texture()
        floor_texture = pyglet.image.load(FLOOR_TEXTURE).get_texture()
    except (OSError, ImageDecodeException):
        print("Failed to load texture")
        return 1

    gl.glEnable(gl.GL_DEPTH_TEST)
    if CULL_FACE:
        gl.glEnable(gl.GL_CULL_FACE)
        gl.glCullFace(gl.GL_BACK)

    gl.glUseProgram(program)

    gl_compat.glEnableClientState(gl_compat.GL_VERTEX_ARRAY)
    gl_compat.glEnableClientState(gl_compat.GL_TEXTURE_COORD_ARRAY)
    gl_compat.glEnableClientState(gl_compat.GL_NORMAL_ARRAY)
    gl_compat.glDisableClientState(gl_compat.GL_COLOR_ARRAY)

    for texture in (wall_texture, floor_texture):
        gl.glBindTexture(texture.target, texture.id)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)

    planes = load_map(map_path, wall_texture)
    print(f"LOADED MAP WITH {len(planes)} WALLS")

    def as_array(values: list[float]):
        return (gl.GLfloat * len(values))(*values)

    def arrays_for(plane: Plane):
        vertices = [plane.vertex(i) for i in range(6)]
        return (
            as_array([v for vertex in vertices for v in vertex[0:3]]),
            as_array([v for vertex in vertices for v in vertex[3:6]]),
            as_array([v for vertex in vertices for v in vertex[6:8]]),
        )

    plane_arrays = [arrays_for(plane) for plane in planes]

    def uniform_name(name: str):
        encoded = name.encode()
        buffer = (gl.GLchar * (len(encoded) + 1))()
        buffer.value = encoded
        return buffer

    def set_uniform(name: str, value) -> None:
        location = gl.glGetUniformLocation(program, uniform_name(name))
        if isinstance(value, tuple):
            gl.glUniform3f(location, *value)
        else:
            gl.glUniform1f(location, float(value))

    scene = _Scene()
    held = keys.KeyStateHandler()
    window.push_handlers(held)

    def update(delta_time: float) -> None:
        if PRINT_FPS and delta_time > 0:
            print(1.0 / delta_time)
        scene.elapsed += delta_time
        pressed = {ours for theirs, ours in key_map.items() if held[theirs]}
        scene.player.step(delta_time, pressed)
        scene.player.place_camera(scene.camera)

        set_uniform("lightFactor", anim_factor(scene.elapsed))
        set_uniform("cameraPosition", scene.camera.position.as_tuple())
        for name, value in light_uniforms(default_point_lights(scene.player.position)).items():
            set_uniform(name, value)

    @window.event
    def on_resize(width: int, height: int):
        gl.glViewport(0, 0, width, height)
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_draw() -> None:
        camera = scene.camera
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        gl_compat.glMatrixMode(gl_compat.GL_PROJECTION)
        gl_compat.glLoadIdentity()
        gl_compat.glFrustum(*frustum_bounds(camera.fov))

        gl_compat.glMatrixMode(gl_compat.GL_MODELVIEW)
        gl_compat.glLoadIdentity()
        gl_compat.glRotatef(camera.rotation.z, 0.0, 0.0, 1.0)
        gl_compat.glRotatef(camera.rotation.y, 1.0, 0.0, 0.0)
        gl_compat.glRotatef(camera.rotation.x, 0.0, 1.0, 0.0)
        gl_compat.glTranslatef(-camera.position.x, -camera.position.y, -camera.position.z)

        previous = None
        for plane, (positions, normals, uvs) in zip(planes, plane_arrays):
            texture = texture_for(plane, wall_texture, floor_texture)
            if texture is not previous:
                gl.glBindTexture(texture.target, texture.id)
                previous = texture
            gl_compat.glVertexPointer(3, gl.GL_FLOAT, 0, positions)
            gl_compat.glNormalPointer(gl.GL_FLOAT, 0, normals)
            gl_compat.glTexCoordPointer(2, gl.GL_FLOAT, 0, uvs)
            gl.glDrawArrays(gl.GL_TRIANGLES, 0, 6)

    pyglet.clock.schedule(update)
    pyglet.app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())