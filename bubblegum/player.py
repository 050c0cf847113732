"""The player's fighter: movement, jumping, shooting, ammo and power-ups."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

GROUND_X = 200.0
GROUND_Y = 344.0
RIGHT_LIMIT = 1300.0
LEFT_LIMIT = 25.0
AIR_LINE = 400.0
JUMP_CEILING = 900.0
JUMP_DURATION = 1.0

BASE_SPEED = 600
BASE_JUMP_HEIGHT = 200
BASE_DAMAGE = 1

IDLE_FRAME = "_sprite14.png"
DUCK_TEXTURE = "MENU/sprite_0.png"
DUCK_OFFSET = (0, -150)
ANIMATION_DELAY = 1.0 / 5

FIRST_BULLET_FRAME = 18
LAST_BULLET_FRAME = 23
SHOT_DURATION = 2.0
SHOT_TRAVEL = (2048.0, 380.0)
SHOT_SPIN = 600.0

RECHARGE_STEP = 12.5
RELOAD_TICKS = 9
RELOAD_DELAY = 0.14
RELOAD_INTERVAL = 0.06

WHITE = (255, 255, 255)

POWERUP_INTERVAL = 15.0
POWERUP_DROP_Y = 1200
POWERUP_FALL_SPEED = 150

SOUND_JUMP = ("Music/Jump.mp3", 0.15)
SOUND_AIR_JUMP = ("Music/Fire.mp3", 0.23)
SOUND_SHOOT = ("Music/Shoot.mp3", 0.8)
SOUND_RELOAD = ("Music/Reload.mp3", 0.28)
SOUND_WALK = ("Music/Walk.mp3", 0.4)


class Key(Enum):
    """Player intents that the keyboard and mouse map to."""

    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    JUMP = "jump"
    FIRE = "fire"
    RELOAD = "reload"
    FREEZE = "freeze"
    PAUSE = "pause"


class PowerUp(Enum):
    """The four pickups that fall from the sky."""

    LIFE = 0
    ATTACK = 1
    JUMP = 2
    SPEED = 3

    @property
    def texture(self) -> str:
        return f"MENU/_menu{21 + self.value}.png"

    @property
    def duration(self) -> float | None:
        return {PowerUp.ATTACK: 5.0, PowerUp.JUMP: 7.0, PowerUp.SPEED: 7.0}.get(self)

    @property
    def tint(self) -> tuple[int, int, int] | None:
        return {
            PowerUp.ATTACK: (245, 136, 73),
            PowerUp.JUMP: (128, 232, 109),
            PowerUp.SPEED: (94, 139, 230),
        }.get(self)


def frame_names(pattern: str, count: int, start: int) -> list[str]:
    """Return `count` sprite-frame names numbered upwards from `start`."""
    return [pattern % number for number in range(start, start + count)]


FIRE_FRAMES = frame_names("_sprite%d.png", 3, 15)


def spawn_powerup(rng: random.Random) -> tuple[PowerUp, int]:
    """Pick a random pickup and the x coordinate it drops from."""
    power = PowerUp(rng.randrange(4))
    x = rng.randrange(1300) + 50
    return power, x


@dataclass
class RechargeBar:
    """Ammunition gauge: every shot costs one eighth of it."""

    percentage: float = 100.0

    def fire(self) -> bool:
        """Spend one shot; return False when the gauge is empty."""
        if self.percentage <= 0:
            return False
        self.percentage = max(0.0, self.percentage - RECHARGE_STEP)
        return True

    def reload_tick(self) -> float:
        """Refill one shot, never beyond a full gauge."""
        self.percentage = min(100.0, self.percentage + RECHARGE_STEP)
        return self.percentage


@dataclass
class _Shot:
    frame: str
    start_x: float
    start_y: float
    dx: float
    dy: float
    scale: float
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        return min(self.elapsed / SHOT_DURATION, 1.0)

    @property
    def position(self) -> tuple[float, float]:
        return (self.start_x + self.dx * self.progress, self.start_y + self.dy * self.progress)

    @property
    def rotation(self) -> float:
        return SHOT_SPIN * self.progress

    @property
    def finished(self) -> bool:
        return self.elapsed >= SHOT_DURATION


@dataclass
class _Jump:
    height: float
    elapsed: float = 0.0

    def offset(self) -> float:
        t = min(self.elapsed / JUMP_DURATION, 1.0)
        frac = t % 1.0
        return self.height * 4 * frac * (1 - frac)


@dataclass
class Fighter:
    """The hero controlled by the keyboard and mouse."""

    x: float = GROUND_X
    y: float = GROUND_Y
    flipped: bool = False
    speed: int = BASE_SPEED
    jump_height: int = BASE_JUMP_HEIGHT
    damage: int = BASE_DAMAGE
    has_power: bool = False
    game_over: bool = False
    frozen: bool = False
    pause_requested: bool = False
    ducking: bool = False
    walking: bool = False
    frame: str = IDLE_FRAME
    body_offset: tuple[int, int] = (0, 0)
    tint: tuple[int, int, int] = WHITE
    bar: RechargeBar = field(default_factory=RechargeBar)
    bullets: list[_Shot] = field(default_factory=list)
    sounds: list[tuple[str, float]] = field(default_factory=list)
    dry_fires: int = 0

    def __init__(self) -> None:
        self.x = GROUND_X
        self.y = GROUND_Y
        self.flipped = False
        self.speed = BASE_SPEED
        self.jump_height = BASE_JUMP_HEIGHT
        self.damage = BASE_DAMAGE
        self.has_power = False
        self.game_over = False
        self.frozen = False
        self.pause_requested = False
        self.ducking = False
        self.walking = False
        self.frame = IDLE_FRAME
        self.body_offset = (0, 0)
        self.tint = WHITE
        self.bar = RechargeBar()
        self.bullets = []
        self.sounds = []
        self.dry_fires = 0
        self._held: set[Key] = set()
        self._next_bullet = FIRST_BULLET_FRAME
        self._jumps: list[_Jump] = []
        self._base_y = GROUND_Y
        self._animating = False
        self._anim_time = 0.0
        self._reload_left = 0
        self._reload_wait = 0.0
        self._power_timers: dict[PowerUp, float] = {}

    @property
    def held(self) -> frozenset[Key]:
        """Keys currently held down."""
        return frozenset(self._held)

    def press(self, key: Key) -> None:
        """React to a key going down."""
        if key is not Key.FIRE:
            self.next_bullet_frame()
        if key in (Key.RIGHT, Key.LEFT):
            if self.game_over:
                return
            if self.y < AIR_LINE:
                self.sounds.append(SOUND_WALK)
                self.walking = True
            else:
                self.walking = False
            self._held.add(key)
            self.flipped = key is Key.LEFT
        elif key is Key.DOWN:
            self._held.add(key)
        elif key is Key.JUMP:
            self.jump()
        elif key is Key.FIRE:
            self.shoot()
        elif key is Key.RELOAD:
            if not self.game_over:
                self.sounds.append(SOUND_RELOAD)
                self._reload_left = RELOAD_TICKS
                self._reload_wait = RELOAD_DELAY
        elif key is Key.FREEZE:
            self.frozen = True
        elif key is Key.PAUSE:
            self.pause_requested = True

    def release(self, key: Key) -> None:
        """React to a key coming up."""
        self.walking = False
        self._held.discard(key)

    def jump(self) -> bool:
        """Start a jump; return whether the fighter left the ground."""
        if self.game_over:
            return False
        jumped = False
        if self.y < JUMP_CEILING:
            self.sounds.append(SOUND_JUMP if self.y < AIR_LINE else SOUND_AIR_JUMP)
            self._jumps.append(_Jump(float(self.jump_height)))
            jumped = True
        self._animating = True
        self._anim_time = 0.0
        self.frame = FIRE_FRAMES[0]
        return jumped

    def shoot(self) -> _Shot | None:
        """Throw a bubble if there is ammunition; return the shot."""
        frame = self.next_bullet_frame()
        if self.game_over:
            return None
        if not self.bar.fire():
            self.dry_fires += 1
            return None
        direction = -1.0 if self.flipped else 1.0
        shot = _Shot(
            frame=frame,
            start_x=self.x + 10 * direction,
            start_y=self.y + 30,
            dx=SHOT_TRAVEL[0] * direction,
            dy=SHOT_TRAVEL[1],
            scale=4.7 if self.damage > 1 else 2.8,
        )
        self.sounds.append(SOUND_SHOOT)
        self.bullets.append(shot)
        return shot

    def next_bullet_frame(self) -> str:
        """Return the sprite frame for the next bubble, cycling through six."""
        if self._next_bullet > LAST_BULLET_FRAME:
            self._next_bullet = FIRST_BULLET_FRAME
        name = f"_sprite{self._next_bullet}.png"
        self._next_bullet += 1
        return name

    def apply_powerup(self, power: PowerUp) -> None:
        """Grant a timed boost; the life pickup is handled by the combat rules."""
        if power.duration is None:
            return
        self.has_power = True
        self.tint = power.tint or WHITE
        if power is PowerUp.ATTACK:
            self.damage = 2
        elif power is PowerUp.JUMP:
            self.jump_height = 450
        elif power is PowerUp.SPEED:
            self.speed = 1050
        self._power_timers[power] = power.duration

    def expire_powerup(self, power: PowerUp) -> None:
        """Take a boost away and restore the normal value."""
        self.has_power = False
        self.tint = WHITE
        if power is PowerUp.ATTACK:
            self.damage = BASE_DAMAGE
        elif power is PowerUp.JUMP:
            self.jump_height = BASE_JUMP_HEIGHT
        elif power is PowerUp.SPEED:
            self.speed = BASE_SPEED
        self._power_timers.pop(power, None)

    def update(self, dt: float) -> None:
        """Advance the fighter by `dt` seconds."""
        if not self.frozen:
            self._advance_jumps(dt)
            self._advance_animation(dt)
            self._advance_bullets(dt)
        self._advance_reload(dt)
        self._advance_powerups(dt)

        if self.y < AIR_LINE:
            self._animating = False
            self.frame = IDLE_FRAME
        if self.game_over:
            return
        if Key.RIGHT in self._held and self.x < RIGHT_LIMIT:
            self.x += self.speed * dt
        if Key.LEFT in self._held and self.x > LEFT_LIMIT:
            self.x -= self.speed * dt
        if Key.DOWN in self._held and self.y < AIR_LINE:
            self.ducking = True
            self.frame = DUCK_TEXTURE
            self.body_offset = DUCK_OFFSET
        elif Key.DOWN in self._held:
            self.ducking = False
            self.frame = IDLE_FRAME
            self.body_offset = (0, 0)
        else:
            self.ducking = False
            self.body_offset = (0, 0)

    def _advance_jumps(self, dt: float) -> None:
        for active in self._jumps:
            active.elapsed += dt
        self.y = self._base_y + sum(active.offset() for active in self._jumps)
        self._jumps = [active for active in self._jumps if active.elapsed < JUMP_DURATION]

    def _advance_animation(self, dt: float) -> None:
        if self._animating:
            self._anim_time += dt
            self.frame = FIRE_FRAMES[int(self._anim_time / ANIMATION_DELAY) % len(FIRE_FRAMES)]

    def _advance_bullets(self, dt: float) -> None:
        for shot in self.bullets:
            shot.elapsed += dt
        self.bullets = [shot for shot in self.bullets if not shot.finished]

    def _advance_reload(self, dt: float) -> None:
        if not self._reload_left:
            return
        self._reload_wait -= dt
        while self._reload_left and self._reload_wait <= 0:
            self.bar.reload_tick()
            self._reload_left -= 1
            self._reload_wait += RELOAD_INTERVAL

    def _advance_powerups(self, dt: float) -> None:
        for power in list(self._power_timers):
            self._power_timers[power] -= dt
            if self._power_timers[power] <= 0:
                self.expire_powerup(power)