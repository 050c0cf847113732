"""The three bosses: where they stand, how they throw food, and the arena walls."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .resolution import DESIGN_RESOLUTION

ENEMY_TAG = 10
BULLET_TAG = 20
FLOOR_TAG = 12

FADE_IN = 0.85
SHOT_SOUND = ("Music/eShoot.MP3", 1.0)
THROW_DISTANCE = -2000.0

ARENA_SIZE = (2600.0, 1200.0)
ARENA_THICKNESS = 20.0
FLOOR_THICKNESS = 50.0
WALL_X = 1500.0
WALL_THICKNESS = 20.0


class Motion(Enum):
    """How a thrown piece of food travels."""

    JUMP = "jump"
    MOVE = "move"
    BEZIER = "bezier"


@dataclass(frozen=True)
class ShotPlan:
    """Everything needed to launch one projectile from a boss.

    For JUMP and MOVE motions `travel` is a displacement; for BEZIER it is
    the absolute end point and `controls` holds the two control points.
    """

    frame: str
    start: tuple[float, float]
    motion: Motion
    duration: float
    travel: tuple[float, float]
    scale: float
    body: str
    jump_height: float = 0.0
    jumps: int = 0
    controls: tuple[tuple[float, float], ...] = ()
    spin: tuple[float, float] | None = None
    start_opacity: int = 255
    fade_in: float = FADE_IN


@dataclass(frozen=True)
class Edge:
    """A static wall of the arena; a box is given by opposite corners."""

    kind: str
    start: tuple[float, float]
    end: tuple[float, float]
    thickness: float
    tag: int | None = None


class Boss(ABC):
    """A stationary enemy that throws food at the hero on a fixed rhythm."""

    stage: int
    frame: str
    position: tuple[float, float]
    background: str
    music: tuple[str, float]
    scale: float = 2.8
    body: str = "circle"
    interval: float
    first_delay: float = 1.5
    recoil: tuple[tuple[float, float], ...]
    floor_y: float = 250.0
    has_wall: bool = True

    @abstractmethod
    def plan_shot(self, rng: random.Random) -> ShotPlan:
        """Draw the random choices for the next throw and describe it."""

    def edges(self) -> list[Edge]:
        """Return the arena's static walls."""
        center_x = DESIGN_RESOLUTION[0] / 2
        center_y = DESIGN_RESOLUTION[1] / 2
        half_w, half_h = ARENA_SIZE[0] / 2, ARENA_SIZE[1] / 2
        walls = [
            Edge(
                "box",
                (center_x - half_w, center_y - half_h),
                (center_x + half_w, center_y + half_h),
                ARENA_THICKNESS,
            ),
            Edge(
                "segment",
                (0.0, self.floor_y),
                (float(DESIGN_RESOLUTION[0]), self.floor_y),
                FLOOR_THICKNESS,
                FLOOR_TAG,
            ),
        ]
        if self.has_wall:
            walls.append(
                Edge("segment", (WALL_X, 0.0), (WALL_X, float(DESIGN_RESOLUTION[1])), WALL_THICKNESS)
            )
        return walls


class PicklesBoss(Boss):
    """First boss: lobs pickles in hops and curves fries along a Bézier path."""

    stage = 0
    frame = "_sprite0.png"
    position = (1650.0, 508.0)
    background = "Backgrounds/pxArt1.png"
    music = ("Music/Boss1.MP3", 0.08)
    interval = 2.6
    recoil = ((0.3, 13.0), (0.4, 0.0), (0.15, -13.0))

    def plan_shot(self, rng: random.Random) -> ShotPlan:
        height = rng.randrange(500) + 100
        seconds = rng.randrange(5) + 4
        hops = rng.randrange(6) + 2
        kind = rng.randrange(2) + 2
        first = (-500.0 + rng.randrange(700), 200.0 + 10 * hops)
        second = (-600.0 + rng.randrange(900), 1000.0 + height)
        x, y = self.position
        pickle = kind == 2
        common = dict(
            frame=f"_sprite{kind}.png",
            start=(x - 200, y - 180),
            scale=1.6 if pickle else 2.3,
            body="circle" if pickle else "box",
            spin=(6.0, 1500.0),
            start_opacity=0,
        )
        if pickle:
            return ShotPlan(
                motion=Motion.JUMP,
                duration=float(seconds),
                travel=(THROW_DISTANCE, 0.0),
                jump_height=float(height),
                jumps=hops,
                **common,
            )
        return ShotPlan(
            motion=Motion.BEZIER,
            duration=seconds - 2.8,
            travel=(x - 100, y - 100),
            controls=(first, second),
            **common,
        )


class DonutBoss(Boss):
    """Second boss: fires treats in straight lines at varying angles."""

    stage = 1
    frame = "_sprite4.png"
    position = (1650.0, 572.0)
    background = "Backgrounds/pxArt2.png"
    music = ("Music/Boss2.MP3", 0.1)
    interval = 1.8
    recoil = ((0.35, 13.0), (0.4, 0.0), (0.1, -13.0))

    def plan_shot(self, rng: random.Random) -> ShotPlan:
        rise = rng.randrange(700)
        seconds = rng.randrange(3) + 1
        rng.randrange(6)
        kind = rng.randrange(3) + 6
        x, y = self.position
        return ShotPlan(
            frame=f"_sprite{kind}.png",
            start=(x - 170, y - 100),
            motion=Motion.MOVE,
            duration=float(seconds),
            travel=(THROW_DISTANCE, float(rise - 200)),
            scale=2.8,
            body="circle",
            spin=(4.0, 1000.0),
        )


class TacoBoss(Boss):
    """Last boss: rolls burritos, slings guacamole and bounces meatballs."""

    stage = 2
    frame = "_sprite9.png"
    position = (1650.0, 533.0)
    background = "Backgrounds/pxArt3.png"
    music = ("Music/Boss3.MP3", 0.2)
    body = "box"
    interval = 1.9
    recoil = ((0.35, 13.0), (0.4, 0.0), (0.1, -13.0))
    floor_y = 240.0
    has_wall = False

    def plan_shot(self, rng: random.Random) -> ShotPlan:
        extra = rng.randrange(500)
        seconds = rng.randrange(3) + 3
        hops = rng.randrange(6) + 2
        rng.randrange(30)
        kind = rng.randrange(3) + 11
        x, y = self.position
        frame = f"_sprite{kind}.png"
        if kind == 11:
            return ShotPlan(
                frame=frame,
                start=(x - 80, y - 210),
                motion=Motion.MOVE,
                duration=5.7,
                travel=(THROW_DISTANCE, 0.0),
                scale=2.8,
                body="circle",
            )
        if kind == 12:
            return ShotPlan(
                frame=frame,
                start=(x - 190, y - 170),
                motion=Motion.MOVE,
                duration=float(seconds - 1),
                travel=(THROW_DISTANCE, float(extra)),
                scale=2.8,
                body="circle",
                spin=(4.0, 1000.0),
            )
        return ShotPlan(
            frame=frame,
            start=(x - 190, y - 170),
            motion=Motion.JUMP,
            duration=float(seconds),
            travel=(THROW_DISTANCE, 0.0),
            scale=2.8,
            body="circle",
            jump_height=float(extra + 100),
            jumps=hops,
            spin=(4.0, 1000.0),
        )


_BOSSES: tuple[type[Boss], ...] = (PicklesBoss, DonutBoss, TacoBoss)


def boss_for_stage(stage: int) -> Boss:
    """Return the boss fought on a stage numbered from 0."""
    if not 0 <= stage < len(_BOSSES):
        raise ValueError(f"no boss for stage {stage}")
    return _BOSSES[stage]()