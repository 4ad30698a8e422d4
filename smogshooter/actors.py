"""The player's character and the enemies that hunt it."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Iterable

import pygame

from .animation import AnimatedSprite, Animation, Direction
from .game_map import GameMap
from .game_state import FloatRect, Point, View

CHARACTER_SIZE = 64
CHARACTER_ATTACK_WIDTH = 96
CHARACTER_ATTACK_HEIGHT = 32
CHARACTER_ATTACK_DURATION = 1.5
CHARACTER_ATTACK_COOLDOWN = 0.5
CHARACTER_DAMAGE_COOLDOWN = 2.0
CHARACTER_STEP = 0.01

ENEMY_SIZE = 64
ENEMY_ATTACK_WIDTH = 48
ENEMY_ATTACK_HEIGHT = 64
ENEMY_ATTACK_DURATION = 2.0
ENEMY_ATTACK_COOLDOWN = 5.0
ENEMY_DAMAGE_COOLDOWN = 1.0
ENEMY_STEP = 0.011
ENEMY_STOP_DISTANCE = 64
ENEMY_ATTACK_RANGE = 150

Loader = Callable[[str], pygame.Surface]
Clock = Callable[[], float]

_RUN_ANIMATIONS = {
    Direction.FRONT: "frontRun",
    Direction.RIGHT: "rightRun",
    Direction.BACK: "backRun",
    Direction.LEFT: "leftRun",
}
_ATTACK_ANIMATIONS = {
    Direction.FRONT: "frontAttack",
    Direction.RIGHT: "rightAttack",
    Direction.LEFT: "leftAttack",
}


def _facing(from_point: Point, to_point: Point) -> Direction:
    angle = math.atan2(to_point[1] - from_point[1], to_point[0] - from_point[0])
    if -3 * math.pi / 4 <= angle < -math.pi / 4:
        return Direction.BACK
    if -math.pi / 4 <= angle < math.pi / 4:
        return Direction.RIGHT
    if math.pi / 4 <= angle < 3 * math.pi / 4:
        return Direction.FRONT
    return Direction.LEFT


def _distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _step_towards(sprite: AnimatedSprite, target: Point, speed: float, factor: float) -> None:
    dx = target[0] - sprite.position[0]
    dy = target[1] - sprite.position[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return
    sprite.move((dx / length * speed * factor, dy / length * speed * factor))


@dataclass
class AttackShape:
    """A rotated, textured rectangle marking the area an attack hits."""

    position: Point
    size: Point
    origin: Point
    rotation: float
    texture: pygame.Surface

    def _transform(self, local: Point) -> Point:
        x = local[0] - self.origin[0]
        y = local[1] - self.origin[1]
        cos, sin = math.cos(self.rotation), math.sin(self.rotation)
        return (
            self.position[0] + x * cos - y * sin,
            self.position[1] + x * sin + y * cos,
        )

    def global_bounds(self) -> FloatRect:
        """Axis-aligned box around the rotated rectangle in world coordinates."""
        width, height = self.size
        corners = [
            self._transform(corner)
            for corner in ((0.0, 0.0), (width, 0.0), (width, height), (0.0, height))
        ]
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def draw(self, surface: pygame.Surface, view: View) -> None:
        """Draw the shape onto ``surface`` as seen through ``view``."""
        window = surface.get_size()
        sx0, sy0 = view.to_screen((0.0, 0.0), window)
        sx1, sy1 = view.to_screen((1.0, 1.0), window)
        width = round(self.size[0] * (sx1 - sx0))
        height = round(self.size[1] * (sy1 - sy0))
        if width <= 0 or height <= 0:
            return
        image = pygame.transform.scale(self.texture, (width, height))
        if self.rotation:
            image = pygame.transform.rotate(image, -math.degrees(self.rotation))
        centre = self._transform((self.size[0] / 2, self.size[1] / 2))
        cx, cy = view.to_screen(centre, window)
        surface.blit(image, image.get_rect(center=(round(cx), round(cy))))


class Character(AnimatedSprite):
    """The hero: walks to a target point, shoots, and takes hits from enemies."""

    def __init__(
        self,
        name: str,
        max_health: int,
        attack_power: int,
        speed: int,
        game_map: GameMap,
        loader: Loader,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__(loader)
        self.name = name
        self.max_health = max_health
        self.current_health = max_health
        self.attack_power = attack_power
        self.speed = speed
        self._clock = clock

        self.is_moving = False
        self.target_point: Point = game_map.position
        self.direction = Direction.FRONT

        self.is_attacking = False
        self.can_attack = True
        self.attack_shape: AttackShape | None = None
        self._attack_started: float | None = None
        self._attack_cooldown_started: float | None = None
        self.bullet_texture = loader("s-bullet.png")

        self.can_take_damage = True
        self.is_taking_damage = False
        self._damage_cooldown_started: float | None = None

        self.is_alive = True

        self.position = game_map.position
        bounds = self.global_bounds()
        self.origin = (bounds.width / 2, bounds.height / 2)

        for name_, texture, frames in (
            ("frontRun", "s-front.png", 3),
            ("rightRun", "s-right.png", 3),
            ("backRun", "s-back.png", 3),
            ("leftRun", "s-left.png", 3),
            ("idle", "s-idle.png", 1),
            ("frontAttack", "s-front_attack.png", 1),
            ("rightAttack", "s-right_attack.png", 1),
            ("leftAttack", "s-left_attack.png", 1),
        ):
            self.add_animation(
                name_, texture, Animation(0, 0, CHARACTER_SIZE, CHARACTER_SIZE, frames, 0.2)
            )

    def set_target_point(self, point: Point) -> None:
        """Set the point the character walks towards."""
        self.target_point = (float(point[0]), float(point[1]))

    def wants_to_move(self) -> bool:
        """True while the target is at least one step away."""
        dx = self.target_point[0] - self.position[0]
        dy = self.target_point[1] - self.position[1]
        return dx * dx + dy * dy >= self.speed * self.speed

    def run(self) -> None:
        """Take one step towards the target point."""
        _step_towards(self, self.target_point, self.speed, CHARACTER_STEP)

    def set_is_attacking(self, attacking: bool) -> None:
        """Start or stop attacking; ignored while the attack is cooling down."""
        if not self.can_attack:
            return
        self.is_attacking = attacking

    def update_can_attack(self) -> bool:
        """Refresh and return whether the attack cooldown has passed."""
        if self._attack_cooldown_started is not None:
            if self._clock() - self._attack_cooldown_started <= CHARACTER_ATTACK_COOLDOWN:
                self.can_attack = False
                return False
            self._attack_cooldown_started = None
        self.can_attack = True
        return True

    def attack(self, mouse_pos: Point) -> None:
        """Aim the attack at ``mouse_pos``; end it once it has lasted long enough."""
        if self._attack_started is None:
            self._attack_started = self._clock()
        rotation = math.atan2(
            mouse_pos[1] - self.position[1], mouse_pos[0] - self.position[0]
        )
        self.attack_shape = AttackShape(
            position=self.position,
            size=(float(CHARACTER_ATTACK_WIDTH), float(CHARACTER_ATTACK_HEIGHT)),
            origin=(0.0, CHARACTER_ATTACK_HEIGHT / 2),
            rotation=rotation,
            texture=self.bullet_texture,
        )
        if self._clock() - self._attack_started >= CHARACTER_ATTACK_DURATION:
            self._attack_started = None
            self.attack_shape = None
            self._attack_cooldown_started = self._clock()
            self.is_attacking = False

    def update_can_take_damage(self) -> bool:
        """Refresh and return whether the character can be hurt again."""
        if self._damage_cooldown_started is not None:
            if self._clock() - self._damage_cooldown_started <= CHARACTER_DAMAGE_COOLDOWN:
                self.can_take_damage = False
                return False
            self._damage_cooldown_started = None
        self.can_take_damage = True
        return True

    def is_hit_by(self, enemy: Enemy) -> bool:
        """True if the enemy's attack overlaps the character."""
        shape = enemy.attack_shape
        return shape is not None and shape.global_bounds().intersects(self.global_bounds())

    def take_damage(self, enemy: Enemy) -> None:
        """Lose health to the enemy's attack and start the damage cooldown."""
        self.current_health -= enemy.attack_power
        self._damage_cooldown_started = self._clock()

    def check_alive(self) -> bool:
        """True while health remains."""
        return self.current_health > 0

    def update(self, mouse_pos: Point, enemies: Iterable[Enemy], delta_time: float) -> None:
        """Advance movement, attack, damage and animation by one frame."""
        self.is_moving = self.wants_to_move()
        self.direction = _facing(self.position, self.target_point)
        if self.is_moving:
            self.play(_RUN_ANIMATIONS[self.direction])
            self.run()
        else:
            self.play("idle")

        self.update_can_attack()
        if self.is_attacking and self.can_attack:
            animation = _ATTACK_ANIMATIONS.get(self.direction)
            if animation is not None:
                self.play(animation)
            self.attack(mouse_pos)

        self.update_can_take_damage()
        for enemy in enemies:
            self.is_taking_damage = self.is_hit_by(enemy)
            if self.can_take_damage and self.is_taking_damage:
                self.take_damage(enemy)
                break

        super().update(delta_time)
        self.is_alive = self.check_alive()

    def render(self, surface: pygame.Surface, view: View) -> None:
        """Draw the character's attack, if one is under way."""
        if self.attack_shape is not None:
            self.attack_shape.draw(surface, view)


class Enemy(AnimatedSprite):
    """A monster that chases the character and attacks it from close range."""

    def __init__(
        self,
        max_health: int,
        attack_power: int,
        speed: int,
        start_pos: Point,
        loader: Loader,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__(loader)
        self.max_health = max_health
        self.current_health = max_health
        self.attack_power = attack_power
        self.speed = speed
        self._clock = clock

        start = (float(start_pos[0]), float(start_pos[1]))
        self.is_moving = False
        self.target_point: Point = start
        self.direction = Direction.FRONT

        self.wants_to_attack = False
        self.can_attack = True
        self.attack_shape: AttackShape | None = None
        self._attack_started: float | None = None
        self._attack_cooldown_started: float | None = None
        self.bullet_texture = loader("m-bullet.png")

        self.can_take_damage = True
        self.is_taking_damage = False
        self._damage_cooldown_started: float | None = None

        self.is_alive = True

        self.position = start
        bounds = self.global_bounds()
        self.origin = (bounds.width / 2, bounds.height / 2)

        for name, texture, frames in (
            ("frontRun", "m-front.png", 3),
            ("rightRun", "m-right.png", 2),
            ("backRun", "m-back.png", 3),
            ("leftRun", "m-left.png", 2),
            ("frontAttack", "m-front_attack.png", 1),
            ("rightAttack", "m-right_attack.png", 1),
            ("leftAttack", "m-left_attack.png", 1),
        ):
            self.add_animation(
                name, texture, Animation(0, 0, ENEMY_SIZE, ENEMY_SIZE, frames, 0.2)
            )

    def _wants_to_move(self) -> bool:
        return _distance(self.position, self.target_point) > ENEMY_STOP_DISTANCE

    def _in_range_of(self, character: Character) -> bool:
        return _distance(self.position, character.position) <= ENEMY_ATTACK_RANGE

    def _update_can_attack(self) -> bool:
        if self._attack_cooldown_started is not None:
            if self._clock() - self._attack_cooldown_started <= ENEMY_ATTACK_COOLDOWN:
                self.can_attack = False
                return False
            self._attack_cooldown_started = None
        self.can_attack = True
        return True

    def _attack(self, character: Character) -> None:
        if self._attack_started is None:
            self._attack_started = self._clock()
        rotation = math.atan2(
            character.position[1] - self.position[1],
            character.position[0] - self.position[0],
        )
        self.attack_shape = AttackShape(
            position=self.position,
            size=(float(ENEMY_ATTACK_WIDTH), float(ENEMY_ATTACK_HEIGHT)),
            origin=(0.0, ENEMY_ATTACK_HEIGHT / 2),
            rotation=rotation,
            texture=self.bullet_texture,
        )
        if self._clock() - self._attack_started >= ENEMY_ATTACK_DURATION:
            self.attack_shape = None
            self._attack_started = None
            self._attack_cooldown_started = self._clock()

    def _update_can_take_damage(self) -> bool:
        if self._damage_cooldown_started is not None:
            if self._clock() - self._damage_cooldown_started <= ENEMY_DAMAGE_COOLDOWN:
                self.can_take_damage = False
                return False
            self._damage_cooldown_started = None
        self.can_take_damage = True
        return True

    def _is_hit_by(self, character: Character) -> bool:
        shape = character.attack_shape
        return shape is not None and shape.global_bounds().intersects(self.global_bounds())

    def _take_damage(self, character: Character) -> None:
        self.current_health -= character.attack_power
        self.can_take_damage = False
        self._damage_cooldown_started = self._clock()

    def check_alive(self) -> bool:
        """True while health remains."""
        return self.current_health > 0

    def update(self, character: Character, delta_time: float) -> None:
        """Chase, attack and take hits for one frame."""
        self.target_point = character.position
        self.direction = _facing(self.position, self.target_point)
        self.is_moving = self._wants_to_move()
        if self.is_moving:
            _step_towards(self, self.target_point, self.speed, ENEMY_STEP)
        self.play(_RUN_ANIMATIONS[self.direction])

        self.wants_to_attack = self._in_range_of(character)
        self._update_can_attack()
        if self.wants_to_attack and self.can_attack:
            animation = _ATTACK_ANIMATIONS.get(self.direction)
            if animation is not None:
                self.play(animation)
            self._attack(character)

        self._update_can_take_damage()
        self.is_taking_damage = self._is_hit_by(character)
        if self.can_take_damage and self.is_taking_damage:
            self._take_damage(character)

        super().update(delta_time)
        self.is_alive = self.check_alive()

    def render(self, surface: pygame.Surface, view: View) -> None:
        """Draw the enemy's attack, if one is under way."""
        if self.attack_shape is not None:
            self.attack_shape.draw(surface, view)