"""The player's avatar: input handling, movement, jumping and sprite frame choice."""

from __future__ import annotations

import enum
import logging
from collections.abc import Collection
from typing import Protocol

from marioworld.geometry import Rectf, Vector2f
from marioworld.sprite import Sprite

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    """Keys the avatar reacts to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    X = enum.auto()
    Z = enum.auto()


class MarioState(enum.Enum):
    IDLE = 0
    WALKING = 1
    JUMPING = 2
    FALLING = 3
    RUNNING = 4
    RUN_JUMPING = 5
    CHANGE_DIRECTION = 6


class _Terrain(Protocol):
    """What the avatar needs from the level it moves through."""

    def is_on_ground(self, avatar_shape: Rectf, avatar_velocity: Vector2f) -> bool: ...

    def is_hitting_wall(self, avatar_shape: Rectf, avatar_velocity: Vector2f) -> bool: ...

    def handle_collision(self, avatar_shape: Rectf, avatar_velocity: Vector2f) -> None: ...


_WALK_SPEED = 100.0
_RUN_SPEED = 200.0
_GRAVITY = -800.0
_RUN_JUMP_GRAVITY = -600.0
_CHANGE_DIRECTION_TIME = 0.1
_CHANGE_DIRECTION_SPEED = 10.0

_FRAME_WIDTH = 16.0
_FRAME_HEIGHT = 22.0
_SHEET_COLS = 4
_SHEET_ROWS = 10

_STATE_FRAMES = {
    MarioState.IDLE: 0,
    MarioState.JUMPING: 24,
    MarioState.FALLING: 28,
    MarioState.RUN_JUMPING: 36,
    MarioState.CHANGE_DIRECTION: 20,
}
_CYCLING_FRAMES = {
    MarioState.WALKING: (12, 13),
    MarioState.RUNNING: (16, 17),
}


class Avatar:
    """Baby Mario: a hit box moved by keyboard input, gravity and the level."""

    IMAGE_PATH = "Resources/Images/BabyMarioSprite2.png"

    def __init__(self, sprite: Sprite | None = None) -> None:
        self.state = MarioState.IDLE
        self.shape = Rectf(20.0, 100.0, 12.0, 20.0)
        self.draw_offset = Vector2f(0.0, -3.0)
        self.horizontal_speed = _WALK_SPEED
        self.jump_speed = 300.0
        self.jump_time = 0.0
        self.max_jump_time = 0.25
        self.deceleration_timer = 0.0
        self.velocity = Vector2f(0.0, 0.0)
        self.gravity = Vector2f(0.0, _GRAVITY)
        self.last_input_velocity = 0.0
        self.is_jumping = False
        self.should_stop_jumping = False
        self.is_direction_changed = False
        self.change_direction_timer = 0.0
        self.power_ups_collected = 0
        if sprite is None:
            sprite = Sprite(
                _FRAME_WIDTH * _SHEET_COLS,
                _FRAME_HEIGHT * _SHEET_ROWS,
                _SHEET_COLS,
                _SHEET_ROWS,
                0.2,
            )
        self.sprite = sprite

    def update(self, elapsed_sec: float, level: _Terrain, keys: Collection[Key]) -> None:
        """One game tick: input, movement, animation and level collision."""
        self.avatar_input(level, elapsed_sec, keys)
        self.update_position(level, elapsed_sec)
        # The animation advances twice per tick, once directly and once as sprite update.
        self.sprite.update(elapsed_sec)
        self.sprite.update(elapsed_sec)
        level.handle_collision(self.shape, self.velocity)

    def avatar_input(
        self, level: _Terrain, elapsed_sec: float, keys: Collection[Key]
    ) -> None:
        """Turn the pressed keys into a state and a velocity."""
        is_on_ground = level.is_on_ground(self.shape, self.velocity)
        is_hitting_wall = level.is_hitting_wall(self.shape, self.velocity)
        logger.debug("current state: %d", self.state.value)

        left = Key.LEFT in keys
        right = Key.RIGHT in keys

        if left:
            if self.change_direction_timer == 0 and self.last_input_velocity > 0:
                self.is_direction_changed = True
            self.state = MarioState.WALKING
            self.velocity.x = -self.horizontal_speed
            self.last_input_velocity = self.velocity.x
        elif right:
            if self.change_direction_timer == 0 and self.last_input_velocity < 0:
                self.is_direction_changed = True
            self.state = MarioState.WALKING
            self.velocity.x = self.horizontal_speed
            self.last_input_velocity = self.velocity.x
        else:
            self.deceleration(elapsed_sec)
            if is_on_ground or is_hitting_wall:
                self.state = MarioState.IDLE

        if self.is_direction_changed and (left or right):
            self.change_direction_timer += elapsed_sec
            if self.change_direction_timer >= _CHANGE_DIRECTION_TIME:
                self.change_direction_timer = 0.0
                self.is_direction_changed = False
            else:
                self.state = MarioState.CHANGE_DIRECTION
                self.velocity.x = (
                    -_CHANGE_DIRECTION_SPEED if left else _CHANGE_DIRECTION_SPEED
                )

        self.accelerating_walk(keys)
        self.idle_down_hitbox_change(keys)
        self.jumping(keys, is_on_ground, elapsed_sec)
        self.check_jump_or_fall(is_on_ground)

    def update_position(self, level: _Terrain, elapsed_sec: float) -> None:
        """Apply gravity while airborne, then move by the velocity."""
        if not level.is_on_ground(self.shape, self.velocity):
            self.velocity = self.velocity + self.gravity * elapsed_sec
        self.shape.left += self.velocity.x * elapsed_sec
        self.shape.bottom += self.velocity.y * elapsed_sec

    def accelerating_walk(self, keys: Collection[Key]) -> None:
        """Holding X while walking speeds up until the avatar runs."""
        if Key.X in keys and self.state is MarioState.WALKING:
            if self.horizontal_speed <= _RUN_SPEED:
                self.horizontal_speed += 1.0
        else:
            self.horizontal_speed = _WALK_SPEED

        if self.horizontal_speed >= _RUN_SPEED:
            self.state = MarioState.RUNNING
            self.gravity.y = _RUN_JUMP_GRAVITY if self.is_jumping else _GRAVITY

    def deceleration(self, elapsed_sec: float) -> None:
        """Slow the horizontal motion down, ever faster, until it stops."""
        self.deceleration_timer += 12.0 * elapsed_sec
        if self.velocity.x < 0.0:
            self.velocity.x += self.deceleration_timer
            if self.velocity.x >= -0.1:
                self._stop()
        elif self.velocity.x > 0.0:
            self.velocity.x -= self.deceleration_timer
            if self.velocity.x <= 0.1:
                self._stop()

    def _stop(self) -> None:
        self.state = MarioState.IDLE
        self.velocity.x = 0.0
        self.deceleration_timer = 0.0

    def idle_down_hitbox_change(self, keys: Collection[Key]) -> None:
        """Ducking halves the hit box's height."""
        self.shape.height = 10.0 if Key.DOWN in keys else 20.0

    def jumping(
        self, keys: Collection[Key], is_on_ground: bool, elapsed_sec: float
    ) -> None:
        """Tap-or-hold jumping and the jump states of walking and running."""
        self.jump_toggle(keys, is_on_ground)
        jump_pressed = Key.Z in keys

        if self.is_jumping:
            self.jump_time += elapsed_sec
            if self.should_stop_jumping:
                self.should_stop_jumping = False
                self.is_jumping = False
                self.velocity.y = 0.0
                self.jump_time = 0.0
            elif jump_pressed:
                self.state = MarioState.JUMPING
                self.velocity.y = self.jump_speed
            elif self.max_jump_time / 2.0 < self.jump_time < self.max_jump_time:
                self.should_stop_jumping = True

        moving = Key.LEFT in keys or Key.RIGHT in keys
        if moving and self.state is MarioState.WALKING and jump_pressed:
            self.state = MarioState.JUMPING
        if moving and self.state is MarioState.RUNNING and jump_pressed:
            self.state = MarioState.RUN_JUMPING
            self.horizontal_speed = 201.0

    def jump_toggle(self, keys: Collection[Key], is_on_ground: bool) -> None:
        """Start a jump from the ground; flag its end once it has lasted long enough."""
        if not self.is_jumping and Key.Z in keys and is_on_ground:
            self.is_jumping = True
        if self.is_jumping and self.jump_time >= self.max_jump_time:
            self.should_stop_jumping = True

    def check_jump_or_fall(self, is_on_ground: bool) -> None:
        if self.velocity.y > 0:
            self.state = MarioState.JUMPING
        elif self.velocity.y < 0 and not is_on_ground:
            self.state = MarioState.FALLING

    def select_frame(self, keys: Collection[Key]) -> int:
        """Set the sprite frame that shows the current state and return it."""
        if self.state is MarioState.IDLE and Key.UP in keys:
            self.sprite.set_current_frame(4)
        elif self.state is MarioState.IDLE and Key.DOWN in keys:
            self.sprite.set_current_frame(8)
        elif self.state in _CYCLING_FRAMES:
            first, last = _CYCLING_FRAMES[self.state]
            if not first <= self.sprite.current_frame <= last:
                self.sprite.set_current_frame(first)
        else:
            self.sprite.set_current_frame(_STATE_FRAMES[self.state])
        return self.sprite.current_frame

    def facing(self) -> float:
        """1.0 when facing right, -1.0 when facing left."""
        return 1.0 if self.last_input_velocity >= 0 else -1.0

    def power_up_hit(self) -> int:
        """Record that the avatar touched a power-up; return how many it has touched."""
        self.power_ups_collected += 1
        logger.info("Power-up Get!")
        return self.power_ups_collected