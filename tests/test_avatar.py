import logging

import pytest

from marioworld.avatar import Avatar, Key, MarioState
from marioworld.geometry import Rectf, Vector2f


class FakeLevel:
    def __init__(self, on_ground=True, hitting_wall=False):
        self.on_ground = on_ground
        self.hitting_wall = hitting_wall
        self.collisions = []

    def is_on_ground(self, shape, velocity):
        return self.on_ground

    def is_hitting_wall(self, shape, velocity):
        return self.hitting_wall

    def handle_collision(self, shape, velocity):
        self.collisions.append((shape, velocity))


def test_initial_state():
    avatar = Avatar()
    assert avatar.state is MarioState.IDLE
    assert avatar.shape == Rectf(20.0, 100.0, 12.0, 20.0)
    assert avatar.velocity == Vector2f(0.0, 0.0)
    assert avatar.sprite.total_frames() == 40


def test_walk_right_and_left():
    avatar = Avatar()
    level = FakeLevel()
    avatar.avatar_input(level, 0.01, {Key.RIGHT})
    assert avatar.state is MarioState.WALKING
    assert avatar.velocity.x == 100.0
    assert avatar.facing() == 1.0

    other = Avatar()
    other.avatar_input(level, 0.01, {Key.LEFT})
    assert other.velocity.x == -100.0
    assert other.facing() == -1.0


def test_change_direction_briefly_slows_down():
    avatar = Avatar()
    level = FakeLevel()
    avatar.avatar_input(level, 0.01, {Key.RIGHT})
    avatar.avatar_input(level, 0.01, {Key.LEFT})
    assert avatar.state is MarioState.CHANGE_DIRECTION
    assert avatar.velocity.x == -10.0
    for _ in range(20):
        avatar.avatar_input(level, 0.01, {Key.LEFT})
    assert avatar.state is MarioState.WALKING
    assert avatar.velocity.x == -100.0
    assert avatar.is_direction_changed is False


def test_deceleration_from_left_moves_towards_zero():
    avatar = Avatar()
    avatar.velocity.x = -100.0
    avatar.deceleration(0.1)
    assert -100.0 < avatar.velocity.x < 0


def test_release_keys_on_ground_goes_idle():
    avatar = Avatar()
    level = FakeLevel(on_ground=True)
    avatar.avatar_input(level, 0.01, {Key.RIGHT})
    avatar.avatar_input(level, 0.01, set())
    assert avatar.state is MarioState.IDLE


def test_duck_changes_hitbox_height():
    avatar = Avatar()
    avatar.idle_down_hitbox_change({Key.DOWN})
    assert avatar.shape.height == 10.0
    avatar.idle_down_hitbox_change(set())
    assert avatar.shape.height == 20.0


def test_holding_x_while_walking_leads_to_running():
    avatar = Avatar()
    for _ in range(200):
        avatar.state = MarioState.WALKING
        avatar.accelerating_walk({Key.X})
        if avatar.state is MarioState.RUNNING:
            break
    assert avatar.state is MarioState.RUNNING
    assert avatar.horizontal_speed >= 200.0
    assert avatar.gravity.y == -800.0


def test_running_while_jumping_uses_lighter_gravity():
    avatar = Avatar()
    avatar.is_jumping = True
    avatar.horizontal_speed = 200.0
    avatar.state = MarioState.WALKING
    avatar.accelerating_walk({Key.X})
    assert avatar.gravity.y == -600.0


def test_releasing_x_resets_speed():
    avatar = Avatar()
    avatar.horizontal_speed = 150.0
    avatar.accelerating_walk(set())
    assert avatar.horizontal_speed == 100.0


def test_jump_toggle_needs_ground():
    avatar = Avatar()
    avatar.jump_toggle({Key.Z}, False)
    assert avatar.is_jumping is False
    avatar.jump_toggle({Key.Z}, True)
    assert avatar.is_jumping is True


def test_jump_applies_jump_speed():
    avatar = Avatar()
    avatar.jumping({Key.Z}, True, 0.01)
    assert avatar.is_jumping is True
    assert avatar.state is MarioState.JUMPING
    assert avatar.velocity.y == avatar.jump_speed


def test_jump_ends_after_max_time():
    avatar = Avatar()
    avatar.jumping({Key.Z}, True, 0.01)
    for _ in range(100):
        avatar.jumping({Key.Z}, False, 0.01)
        if not avatar.is_jumping:
            break
    assert avatar.is_jumping is False
    assert avatar.velocity.y == 0.0
    assert avatar.jump_time == 0.0


def test_short_tap_stops_jump():
    avatar = Avatar()
    avatar.jumping({Key.Z}, True, 0.01)
    avatar.jump_time = 0.15
    avatar.jumping(set(), False, 0.0)
    assert avatar.should_stop_jumping is True
    avatar.jumping(set(), False, 0.01)
    assert avatar.is_jumping is False
    assert avatar.velocity.y == 0.0


def test_run_jumping_keeps_max_speed():
    avatar = Avatar()
    avatar.state = MarioState.RUNNING
    avatar.jumping({Key.RIGHT, Key.Z}, False, 0.01)
    assert avatar.state is MarioState.RUN_JUMPING
    assert avatar.horizontal_speed == 201.0


@pytest.mark.parametrize(
    "vy, on_ground, expected",
    [
        (10.0, False, MarioState.JUMPING),
        (-10.0, False, MarioState.FALLING),
        (-10.0, True, MarioState.IDLE),
    ],
)
def test_check_jump_or_fall(vy, on_ground, expected):
    avatar = Avatar()
    avatar.velocity.y = vy
    avatar.check_jump_or_fall(on_ground)
    assert avatar.state is expected


def test_update_position_applies_gravity_in_air():
    avatar = Avatar()
    avatar.update_position(FakeLevel(on_ground=False), 0.1)
    assert avatar.velocity.y < 0
    assert avatar.shape.bottom < 100.0
    assert avatar.shape.left == 20.0


def test_update_position_on_ground_keeps_vertical_speed():
    avatar = Avatar()
    avatar.velocity.x = 50.0
    avatar.update_position(FakeLevel(on_ground=True), 0.1)
    assert avatar.velocity.y == 0.0
    assert avatar.shape.bottom == 100.0
    assert avatar.shape.left > 20.0


def test_update_hands_shape_to_level_collision():
    avatar = Avatar()
    level = FakeLevel(on_ground=True)
    avatar.update(0.01, level, {Key.RIGHT})
    assert len(level.collisions) == 1
    shape, velocity = level.collisions[0]
    assert shape is avatar.shape
    assert velocity is avatar.velocity


@pytest.mark.parametrize(
    "state, keys, frame",
    [
        (MarioState.IDLE, set(), 0),
        (MarioState.IDLE, {Key.UP}, 4),
        (MarioState.IDLE, {Key.DOWN}, 8),
        (MarioState.WALKING, set(), 12),
        (MarioState.RUNNING, set(), 16),
        (MarioState.JUMPING, set(), 24),
        (MarioState.FALLING, set(), 28),
        (MarioState.RUN_JUMPING, set(), 36),
        (MarioState.CHANGE_DIRECTION, set(), 20),
    ],
)
def test_select_frame(state, keys, frame):
    avatar = Avatar()
    avatar.state = state
    assert avatar.select_frame(keys) == frame
    assert avatar.sprite.current_frame == frame


def test_walking_frame_keeps_cycle():
    avatar = Avatar()
    avatar.state = MarioState.WALKING
    avatar.sprite.set_current_frame(13)
    assert avatar.select_frame(set()) == 13


def test_power_up_hit_logs(caplog):
    avatar = Avatar()
    with caplog.at_level(logging.INFO, logger="marioworld.avatar"):
        avatar.power_up_hit()
    assert "Power-up Get!" in caplog.text