"""The game loop: screens, stage battles, input and drawing."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass
from pathlib import Path

import pygame

from .bosses import SHOT_SOUND, Motion, ShotPlan, boss_for_stage
from .combat import Combat
from .player import (
    POWERUP_DROP_Y,
    POWERUP_FALL_SPEED,
    POWERUP_INTERVAL,
    Fighter,
    Key,
    PowerUp,
    spawn_powerup,
)
from .resolution import DESIGN_RESOLUTION, FRAME_RATE, WINDOW_TITLE, choose_resolution
from .screens import (
    CENTER,
    MENU_MUSIC,
    Action,
    MenuScreen,
    PauseScreen,
    ScoreScreen,
    VictoryScreen,
)
from .session import MAX_LIVES, Session
from .storage import HighScoreStore

BONUS_DELAY = 1.0
BONUS_INTERVAL = 0.8
NEXT_STAGE_DELAY = 1.6
PICKUP_LIFETIME = 6.0 + 6 * 0.15

FIGHTER_RADIUS = 60.0
FIGHTER_BODY_OFFSET = 12.0
BOSS_RADIUS = 170.0
PROJECTILE_RADIUS = 40.0
PICKUP_RADIUS = 40.0
BUTTON_SIZE = (320.0, 120.0)

ENEMY_GRUNT = ("Music/eGrunt.mp3", 0.3)
PLAYER_GRUNT = ("Music/pGrunt.mp3", 0.5)
WIN_SOUND = ("Music/Win.mp3", 0.9)

LOSE_BUTTONS = {
    "again": (CENTER[0] + 370, CENTER[1] + 123),
    "home": (CENTER[0] + 370, CENTER[1] - 123),
}

_STAGE_COLORS = ((70, 40, 90), (40, 70, 90), (90, 60, 40))
_PICKUP_COLORS = {
    PowerUp.LIFE: (230, 60, 80),
    PowerUp.ATTACK: (245, 136, 73),
    PowerUp.JUMP: (128, 232, 109),
    PowerUp.SPEED: (94, 139, 230),
}

_KEYMAP = {
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LSHIFT: Key.DOWN,
    pygame.K_RSHIFT: Key.DOWN,
    pygame.K_w: Key.JUMP,
    pygame.K_UP: Key.JUMP,
    pygame.K_SPACE: Key.FIRE,
    pygame.K_r: Key.RELOAD,
    pygame.K_e: Key.FREEZE,
    pygame.K_ESCAPE: Key.PAUSE,
}


def _near(a: tuple[float, float], b: tuple[float, float], radius: float) -> bool:
    return math.dist(a, b) < radius


@dataclass
class _Projectile:
    plan: ShotPlan
    elapsed: float = 0.0

    @property
    def done(self) -> bool:
        return self.elapsed >= self.plan.fade_in + self.plan.duration

    @property
    def opacity(self) -> int:
        plan = self.plan
        if plan.start_opacity >= 255 or self.elapsed >= plan.fade_in:
            return 255
        return int(plan.start_opacity + (255 - plan.start_opacity) * self.elapsed / plan.fade_in)

    @property
    def position(self) -> tuple[float, float]:
        plan = self.plan
        sx, sy = plan.start
        p = max(0.0, min((self.elapsed - plan.fade_in) / plan.duration, 1.0))
        if plan.motion is Motion.BEZIER:
            (c1x, c1y), (c2x, c2y) = plan.controls
            ex, ey = plan.travel
            q = 1.0 - p
            x = q**3 * sx + 3 * q * q * p * c1x + 3 * q * p * p * c2x + p**3 * ex
            y = q**3 * sy + 3 * q * q * p * c1y + 3 * q * p * p * c2y + p**3 * ey
            return (x, y)
        dx, dy = plan.travel
        x, y = sx + dx * p, sy + dy * p
        if plan.motion is Motion.JUMP and plan.jumps:
            frac = (p * plan.jumps) % 1.0
            y += plan.jump_height * 4 * frac * (1 - frac)
        return (x, y)


@dataclass
class _Pickup:
    power: PowerUp
    x: float
    y: float = float(POWERUP_DROP_Y)
    age: float = 0.0


class _Battle:
    """One stage: the hero against a boss."""

    def __init__(self, session: Session, store: HighScoreStore, rng: random.Random) -> None:
        self.boss = boss_for_stage(session.stage)
        self.fighter = Fighter()
        self.combat = Combat(session, self.fighter, store)
        self.rng = rng
        self.projectiles: list[_Projectile] = []
        self.pickups: list[_Pickup] = []
        self.sounds: list[tuple[str, float]] = []
        self.shot_wait = self.boss.first_delay
        self.powerup_wait = POWERUP_INTERVAL
        self.bonus_wait = BONUS_DELAY
        self.win_time = 0.0

    def step(self, dt: float) -> Action | None:
        """Advance the stage by `dt` seconds; return an action if one is due."""
        if self.fighter.pause_requested:
            self.fighter.pause_requested = False
            return Action.PAUSE
        self.fighter.update(dt)
        if self.combat.won:
            return self._after_win(dt)
        if self.combat.lost:
            return None
        self._throw(dt)
        self._drop(dt)
        self._move(dt)
        self._collide()
        if self.combat.finished:
            self.projectiles.clear()
            self.pickups.clear()
            if self.combat.won:
                self.sounds.append(WIN_SOUND)
        return None

    @property
    def hitbox(self) -> tuple[float, float]:
        """Centre of the hero's body."""
        return (
            self.fighter.x,
            self.fighter.y + FIGHTER_BODY_OFFSET + self.fighter.body_offset[1],
        )

    def _after_win(self, dt: float) -> Action | None:
        self.win_time += dt
        self.bonus_wait -= dt
        while self.combat.bonus_left and self.bonus_wait <= 0:
            self.combat.bonus_tick()
            self.bonus_wait += BONUS_INTERVAL
        due = self.combat.spare_lives * NEXT_STAGE_DELAY
        if self.combat.result is not None and self.win_time >= due:
            return Action.NEXT_STAGE
        return None

    def _throw(self, dt: float) -> None:
        self.shot_wait -= dt
        while self.shot_wait <= 0:
            self.projectiles.append(_Projectile(self.boss.plan_shot(self.rng)))
            self.sounds.append(SHOT_SOUND)
            self.shot_wait += self.boss.interval

    def _drop(self, dt: float) -> None:
        self.powerup_wait -= dt
        while self.powerup_wait <= 0:
            power, x = spawn_powerup(self.rng)
            self.pickups.append(_Pickup(power, float(x)))
            self.powerup_wait += POWERUP_INTERVAL

    def _move(self, dt: float) -> None:
        for projectile in self.projectiles:
            projectile.elapsed += dt
        self.projectiles = [p for p in self.projectiles if not p.done]
        rest_y = self.boss.floor_y + PICKUP_RADIUS
        for pickup in self.pickups:
            pickup.age += dt
            pickup.y = max(rest_y, pickup.y - POWERUP_FALL_SPEED * dt)
        self.pickups = [p for p in self.pickups if p.age < PICKUP_LIFETIME]

    def _collide(self) -> None:
        for shot in list(self.fighter.bullets):
            if self.combat.finished:
                return
            if _near(shot.position, self.boss.position, BOSS_RADIUS):
                self.fighter.bullets.remove(shot)
                self.combat.enemy_hit()
                self.sounds.append(ENEMY_GRUNT)
        hitbox = self.hitbox
        for projectile in list(self.projectiles):
            if self.combat.finished:
                return
            if _near(projectile.position, hitbox, FIGHTER_RADIUS + PROJECTILE_RADIUS):
                self.projectiles.remove(projectile)
                self.combat.player_hit()
                self.sounds.append(PLAYER_GRUNT)
        for pickup in list(self.pickups):
            if self.combat.finished:
                return
            if _near((pickup.x, pickup.y), hitbox, FIGHTER_RADIUS + PICKUP_RADIUS):
                self.pickups.remove(pickup)
                self.combat.pickup(pickup.power)


class _Audio:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.track: tuple[str, float] | None = None
        self._cache: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
            self.enabled = True
        except pygame.error:
            self.enabled = False

    def effect(self, name: str, volume: float) -> None:
        if not self.enabled:
            return
        sound = self._cache.get(name)
        if sound is None:
            path = self.root / name
            if not path.is_file():
                return
            try:
                sound = pygame.mixer.Sound(str(path))
            except pygame.error:
                return
            self._cache[name] = sound
        sound.set_volume(volume)
        sound.play()

    def music(self, track: tuple[str, float] | None) -> None:
        if not self.enabled or track == self.track:
            return
        self.track = track
        pygame.mixer.music.stop()
        if track is None:
            return
        name, volume = track
        path = self.root / name
        if not path.is_file():
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.set_volume(volume)
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass


def _to_screen(point: tuple[float, float]) -> tuple[int, int]:
    return (int(point[0]), int(DESIGN_RESOLUTION[1] - point[1]))


def _clicked(buttons: dict[str, tuple[float, float]], pos: tuple[int, int]) -> str | None:
    x, y = pos[0], DESIGN_RESOLUTION[1] - pos[1]
    for item, (bx, by) in buttons.items():
        if abs(x - bx) <= BUTTON_SIZE[0] / 2 and abs(y - by) <= BUTTON_SIZE[1] / 2:
            return item
    return None


class Game:
    """Holds the screen stack and reacts to actions from the screens."""

    def __init__(self, store: HighScoreStore | None = None) -> None:
        self.store = store if store is not None else HighScoreStore()
        self.session = Session()
        self.rng = random.Random()
        self.screens: list[object] = [MenuScreen(self.session)]
        self.battle: _Battle | None = None
        self.running = True
        self.fullscreen = True
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def screen(self) -> object:
        """The screen currently on top."""
        return self.screens[-1]

    def handle(self, action: Action) -> None:
        """Carry out a screen change."""
        if action is Action.START:
            self.session.lives = MAX_LIVES
            self._begin_stage()
        elif action is Action.SHOW_SCORES:
            self.screens.append(ScoreScreen(self.store))
        elif action is Action.QUIT:
            self.running = False
        elif action is Action.RESUME:
            if len(self.screens) > 1:
                self.screens.pop()
        elif action is Action.HOME:
            self.battle = None
            self.screens = [MenuScreen(self.session)]
        elif action is Action.PAUSE:
            if self.battle is None:
                raise RuntimeError("there is no battle to pause")
            self.screens.append(PauseScreen(self.session.stage))
        elif action is Action.PLAY_AGAIN:
            self.session.new_game()
            self._begin_stage()
        elif action is Action.NEXT_STAGE:
            if self.battle is None or self.battle.combat.result is None:
                raise RuntimeError("the stage is not over")
            result = self.battle.combat.result
            if result.victory:
                self.battle = None
                self.screens = [VictoryScreen(result.final_score)]
            else:
                self._begin_stage()

    def _begin_stage(self) -> None:
        self.battle = _Battle(self.session, self.store, self.rng)
        self.screens = [self.battle]

    def run(self) -> None:
        """Open the window and play until the player quits."""
        pygame.init()
        try:
            frame_height = pygame.display.Info().current_h
            audio = _Audio(Path(choose_resolution(frame_height).search_path))
            flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
            surface = pygame.display.set_mode(DESIGN_RESOLUTION, flags)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while self.running:
                dt = clock.tick(FRAME_RATE) / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    else:
                        self._on_event(event)
                if self.battle is not None and self.screen is self.battle:
                    action = self.battle.step(dt)
                    if action is not None:
                        self.handle(action)
                self._play(audio)
                self._draw(surface)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _on_event(self, event: pygame.event.Event) -> None:
        screen = self.screen
        if event.type == pygame.KEYDOWN:
            if screen is self.battle:
                key = _KEYMAP.get(event.key)
                if key is not None:
                    self.battle.fighter.press(key)
            elif isinstance(screen, PauseScreen) and event.key == pygame.K_ESCAPE:
                self.handle(screen.choose("escape"))
            elif isinstance(screen, ScoreScreen) and event.key == pygame.K_ESCAPE:
                self.handle(Action.RESUME)
            elif isinstance(screen, VictoryScreen):
                self.handle(Action.HOME)
        elif event.type == pygame.KEYUP and screen is self.battle:
            key = _KEYMAP.get(event.key)
            if key is not None:
                self.battle.fighter.release(key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if screen is self.battle:
                if self.battle.combat.lost:
                    item = _clicked(LOSE_BUTTONS, event.pos)
                    if item is not None:
                        self.handle(Action.HOME if item == "home" else Action.PLAY_AGAIN)
                else:
                    self.battle.fighter.press(Key.FIRE)
            elif isinstance(screen, (MenuScreen, PauseScreen)):
                item = _clicked(screen.buttons, event.pos)
                if item is not None:
                    self.handle(screen.choose(item))
            elif isinstance(screen, ScoreScreen):
                if _clicked(screen.buttons, event.pos) is not None:
                    self.handle(Action.HOME)

    def _play(self, audio: _Audio) -> None:
        screen = self.screen
        pending: list[tuple[str, float]] = []
        if isinstance(screen, MenuScreen):
            pending, screen.sounds[:] = list(screen.sounds), []
            audio.music(screen.music)
        elif isinstance(screen, VictoryScreen):
            audio.music(screen.music)
        elif screen is self.battle:
            pending = self.battle.sounds + self.battle.fighter.sounds
            self.battle.sounds.clear()
            self.battle.fighter.sounds.clear()
            audio.music(None if self.battle.combat.finished else self.battle.boss.music)
        for name, volume in pending:
            audio.effect(name, volume)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface: pygame.Surface, text: str, size: int, at: tuple[float, float]) -> None:
        image = self._font(size).render(text, True, (255, 255, 255))
        surface.blit(image, image.get_rect(center=_to_screen(at)))

    def _buttons(self, surface: pygame.Surface, buttons: dict[str, tuple[float, float]]) -> None:
        for item, center in buttons.items():
            rect = pygame.Rect(0, 0, *BUTTON_SIZE)
            rect.center = _to_screen(center)
            pygame.draw.rect(surface, (240, 110, 170), rect, border_radius=16)
            self._text(surface, item.upper(), 60, center)

    def _draw(self, surface: pygame.Surface) -> None:
        screen = self.screen
        surface.fill((40, 20, 60))
        if isinstance(screen, MenuScreen):
            self._text(surface, WINDOW_TITLE, 140, (CENTER[0] - 350, CENTER[1]))
            self._buttons(surface, screen.buttons)
        elif isinstance(screen, PauseScreen):
            surface.fill(_STAGE_COLORS[screen.stage % len(_STAGE_COLORS)])
            self._text(surface, screen.title, 160, (CENTER[0], CENTER[1] + 330))
            self._buttons(surface, screen.buttons)
        elif isinstance(screen, ScoreScreen):
            heading, value = screen.lines()
            self._text(surface, heading, 150, (CENTER[0], CENTER[1] + 200))
            self._text(surface, value, 400, (CENTER[0], CENTER[1] - 100))
            self._buttons(surface, screen.buttons)
        elif isinstance(screen, VictoryScreen):
            score, prompt = screen.lines()
            self._text(surface, "VICTORY", 180, (CENTER[0], CENTER[1] + 230))
            self._text(surface, score, 110, (CENTER[0], CENTER[1] - 40))
            self._text(surface, prompt, 70, (CENTER[0], CENTER[1] - 180))
        elif screen is self.battle:
            self._draw_battle(surface, self.battle)

    def _bar(self, surface: pygame.Surface, center: tuple[float, float], percentage: float,
             color: tuple[int, int, int]) -> None:
        back = pygame.Rect(0, 0, 400, 40)
        back.center = _to_screen(center)
        pygame.draw.rect(surface, (30, 30, 30), back)
        filled = back.copy()
        filled.width = int(back.width * max(0.0, min(percentage, 100.0)) / 100)
        pygame.draw.rect(surface, color, filled)

    def _draw_battle(self, surface: pygame.Surface, battle: _Battle) -> None:
        boss, fighter, combat = battle.boss, battle.fighter, battle.combat
        width, height = DESIGN_RESOLUTION
        surface.fill(_STAGE_COLORS[boss.stage])
        floor_top = _to_screen((0, boss.floor_y))[1]
        pygame.draw.rect(surface, (30, 30, 30), (0, floor_top, width, height - floor_top))
        pygame.draw.circle(surface, (200, 80, 80), _to_screen(boss.position), int(BOSS_RADIUS * 0.7))

        body_height = 70 if fighter.ducking else 140
        body = pygame.Rect(0, 0, 100, body_height)
        body.center = _to_screen(battle.hitbox)
        pygame.draw.rect(surface, fighter.tint, body)
        for shot in fighter.bullets:
            pygame.draw.circle(surface, (255, 150, 200), _to_screen(shot.position), int(10 * shot.scale))
        for projectile in battle.projectiles:
            shade = projectile.opacity / 255
            color = (int(240 * shade), int(200 * shade), int(60 * shade))
            pygame.draw.circle(surface, color, _to_screen(projectile.position), int(PROJECTILE_RADIUS))
        for pickup in battle.pickups:
            rect = pygame.Rect(0, 0, 2 * PICKUP_RADIUS, 2 * PICKUP_RADIUS)
            rect.center = _to_screen((pickup.x, pickup.y))
            pygame.draw.rect(surface, _PICKUP_COLORS[pickup.power], rect)

        self._text(surface, f"SCORE:{self.session.score}", 70, (1500, 1100))
        for index, lit in enumerate(combat.hearts):
            heart = pygame.Rect(0, 0, 80, 80)
            heart.center = _to_screen((120 + 180 * index, 1070))
            pygame.draw.rect(surface, (230, 60, 80) if lit else (0, 0, 0), heart)
        if not combat.lost:
            self._bar(surface, (1650, 800), combat.life_bar, (220, 50, 50))
        self._bar(surface, (300, 140), fighter.bar.percentage, (90, 200, 240))

        if combat.finished:
            shade = pygame.Surface(DESIGN_RESOLUTION, pygame.SRCALPHA)
            shade.fill((0, 0, 0, 150))
            surface.blit(shade, (0, 0))
        if combat.won:
            self._text(surface, "STAGE CLEAR", 160, (CENTER[0], CENTER[1] + 250))
        elif combat.lost:
            self._text(surface, "GAME OVER", 160, (CENTER[0] - 150, CENTER[1]))
            self._buttons(surface, LOSE_BUTTONS)


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="bubblegum", description="A boss-battle arcade game.")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    parser.add_argument("--scores", type=Path, default=None, help="high-score file")
    args = parser.parse_args(argv)
    game = Game(HighScoreStore(args.scores))
    game.fullscreen = not args.windowed
    game.run()
    return 0