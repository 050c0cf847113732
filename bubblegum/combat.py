"""Collision rules: bubbles hitting the boss, food hitting the hero, pickups."""

from __future__ import annotations

from enum import Enum

from .player import BASE_DAMAGE, IDLE_FRAME, Fighter, PowerUp
from .session import MAX_LIVES, Session, StageResult
from .storage import HighScoreStore

BASE_ENEMY_LIFE = 50
ENEMY_LIFE_PER_STAGE = 20
HIT_SCORE = 5
HURT_PENALTY = 50
BONUS_PER_LIFE = 100
FULL_LIFE_BONUS = 50
FULL_LIFE_BONUS_REPEATS = 3


class Outcome(Enum):
    """What a collision or pickup led to."""

    IGNORED = "ignored"
    ENEMY_HURT = "enemy_hurt"
    ENEMY_DEFEATED = "enemy_defeated"
    PLAYER_HURT = "player_hurt"
    PLAYER_DEFEATED = "player_defeated"
    LIFE_RESTORED = "life_restored"
    BONUS = "bonus"
    BOOST = "boost"


def enemy_life_for_stage(stage: int) -> int:
    """Return the boss's starting life for a stage numbered from 0."""
    return BASE_ENEMY_LIFE + stage * ENEMY_LIFE_PER_STAGE


def life_bar_percentage(enemy_life: int, stage: int) -> int:
    """Return how full the boss's life bar is, a full boss giving 100."""
    if enemy_life <= 0:
        return 0
    return enemy_life * 10 // (5 + 2 * stage)


class Combat:
    """Applies the effects of hits and pickups to one stage of play."""

    def __init__(self, session: Session, fighter: Fighter, store: HighScoreStore) -> None:
        self.session = session
        self.fighter = fighter
        self.store = store
        self.enemy_life = enemy_life_for_stage(session.stage)
        self.life_bar: float = 100.0
        self.won = False
        self.lost = False
        self.spare_lives = 0
        self.bonus_left = 0
        self.result: StageResult | None = None

    @property
    def finished(self) -> bool:
        """Whether the stage has been won or lost."""
        return self.won or self.lost

    @property
    def hearts(self) -> tuple[bool, ...]:
        """Which of the heart icons are lit."""
        return tuple(index < self.session.lives for index in range(MAX_LIVES))

    def enemy_hit(self) -> Outcome:
        """A bubble struck the boss."""
        if self.finished:
            return Outcome.IGNORED
        damage = self.fighter.damage
        self.enemy_life -= damage
        self.session.add_score(damage * HIT_SCORE)
        self.life_bar = life_bar_percentage(self.enemy_life, self.session.stage)
        if self.enemy_life >= 1:
            return Outcome.ENEMY_HURT

        self.store.submit(self.session.score)
        self.fighter.frame = IDLE_FRAME
        self.fighter.flipped = False
        self.fighter.game_over = True
        self.fighter.damage = BASE_DAMAGE
        self.life_bar = 0
        self.won = True
        self.spare_lives = self.session.lives
        self.session.lives = 0
        self.bonus_left = self.spare_lives
        if not self.bonus_left:
            self._finish_stage()
        return Outcome.ENEMY_DEFEATED

    def player_hit(self) -> Outcome:
        """A thrown piece of food struck the hero."""
        if self.finished:
            return Outcome.IGNORED
        self.session.lives -= 1
        self.session.lose_score(HURT_PENALTY)
        if self.session.lives >= 1:
            return Outcome.PLAYER_HURT

        self.store.submit(self.session.score)
        self.fighter.game_over = True
        self.life_bar = 0
        self.lost = True
        self.session.stage = 0
        return Outcome.PLAYER_DEFEATED

    def pickup(self, power: PowerUp) -> Outcome:
        """The hero caught a falling pickup."""
        if self.finished:
            return Outcome.IGNORED
        if power is PowerUp.LIFE:
            if self.session.lives < MAX_LIVES:
                self.session.lives += 1
                return Outcome.LIFE_RESTORED
            for _ in range(FULL_LIFE_BONUS_REPEATS):
                self.session.add_score(FULL_LIFE_BONUS)
            return Outcome.BONUS
        self.fighter.apply_powerup(power)
        return Outcome.BOOST

    def bonus_tick(self) -> int:
        """Award one remaining life's bonus after a win; return the new score."""
        if not self.won or not self.bonus_left:
            raise RuntimeError("no bonus is pending")
        self.session.lives = self.spare_lives
        score = self.session.add_score(BONUS_PER_LIFE)
        self.store.submit(score)
        self.bonus_left -= 1
        if not self.bonus_left:
            self._finish_stage()
        return score

    def _finish_stage(self) -> None:
        self.fighter.damage = BASE_DAMAGE
        self.result = self.session.advance_stage()