from brushwalk.camera import Camera
from brushwalk.vectors import Vec3


def test_default_camera():
    camera = Camera()
    assert camera.position == Vec3()
    assert camera.rotation == Vec3()
    assert camera.fov == 1.0


def test_copy_is_equal():
    camera = Camera(Vec3(1.0, 2.0, 3.0), Vec3(10.0, 20.0, 30.0), 2.0)
    assert camera.copy() == camera


def test_copy_is_independent():
    camera = Camera(Vec3(1.0, 2.0, 3.0))
    duplicate = camera.copy()
    duplicate.position = Vec3(9.0, 9.0, 9.0)
    duplicate.fov = 0.5
    assert camera.position == Vec3(1.0, 2.0, 3.0)
    assert camera.fov == 1.0