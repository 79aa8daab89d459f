import pytest

from brushwalk.camera import Camera
from brushwalk.player import Key, Player, input_vector
from brushwalk.vectors import Vec2, Vec3


def test_input_vector_forward():
    assert input_vector({Key.W}) == Vec2(0.0, -1.0)


def test_input_vector_opposites_cancel():
    assert input_vector({Key.W, Key.S, Key.A, Key.D}) == Vec2(0.0, 0.0)


def test_input_vector_ignores_other_keys():
    assert input_vector({Key.SPACE, Key.Q}) == Vec2(0.0, 0.0)


def test_idle_player_does_not_move():
    player = Player(Vec3(1.0, 2.0, 3.0))
    player.step(0.1, set())
    assert player.position == Vec3(1.0, 2.0, 3.0)
    assert player.velocity == Vec3()


def test_space_raises_player():
    player = Player()
    player.step(0.5, {Key.SPACE})
    assert player.position.y == pytest.approx(80.0 * 0.5)


def test_control_and_space_cancel():
    player = Player()
    player.step(0.2, {Key.SPACE, Key.LCONTROL})
    assert player.position.y == pytest.approx(0.0)


def test_left_and_right_turn_opposite():
    left = Player()
    right = Player()
    left.step(0.1, {Key.LEFT})
    right.step(0.1, {Key.RIGHT})
    assert left.rotation.x == pytest.approx(-right.rotation.x)
    assert right.rotation.x == pytest.approx(90.0 * 0.1)


def test_pitch_and_roll_keys():
    player = Player()
    player.step(0.1, {Key.DOWN, Key.E})
    assert player.rotation.y == pytest.approx(player.rotation.z)
    assert player.rotation.y > 0
    assert player.rotation.x == 0.0


def test_forward_moves_along_negative_z():
    player = Player()
    player.step(0.1, {Key.W})
    assert player.velocity.z < 0
    assert player.velocity.x == pytest.approx(0.0)
    assert player.position.z == pytest.approx(player.velocity.z * 0.1)


def test_forward_follows_yaw():
    player = Player(rotation=Vec3(90.0, 0.0, 0.0))
    player.step(0.1, {Key.W})
    assert player.velocity.x > 0
    assert player.velocity.z == pytest.approx(0.0, abs=1e-9)


def test_diagonal_is_no_faster_than_straight():
    straight = Player()
    diagonal = Player()
    straight.step(0.05, {Key.W})
    diagonal.step(0.05, {Key.W, Key.D})
    assert diagonal.velocity.length() == pytest.approx(straight.velocity.length())


def test_speed_is_capped():
    player = Player()
    for _ in range(50):
        player.step(0.01, {Key.W, Key.D})
        assert player.velocity.length() <= 80.0 + 1e-9


def test_drag_slows_player():
    player = Player(velocity=Vec3(10.0, 0.0, 0.0))
    player.step(0.1, set())
    assert 0 < player.velocity.x < 10.0


def test_place_camera_copies_pose():
    player = Player(Vec3(1.0, 2.0, 3.0), Vec3(4.0, 5.0, 6.0))
    camera = Camera(fov=2.0)
    player.place_camera(camera)
    assert camera.position == player.position
    assert camera.rotation == player.rotation
    assert camera.fov == 2.0