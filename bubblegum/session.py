"""Game-wide progress: current stage, running score and remaining lives."""

from __future__ import annotations

from dataclasses import dataclass

MAX_LIVES = 5
STAGE_COUNT = 3
SCORE_FLOOR = 100


@dataclass(frozen=True)
class StageResult:
    """What follows a beaten boss."""

    stage: int
    victory: bool
    final_score: int


@dataclass
class Session:
    """State shared by every screen of one play-through."""

    stage: int = 0
    score: int = 0
    lives: int = MAX_LIVES

    def new_game(self) -> None:
        """Start again from the first boss with full lives and no score."""
        self.stage = 0
        self.score = 0
        self.lives = MAX_LIVES

    def add_score(self, points: int) -> int:
        """Add points and return the new score."""
        self.score += points
        return self.score

    def lose_score(self, points: int) -> int:
        """Take points away; a score under the floor drops to zero."""
        self.score -= points
        if self.score < SCORE_FLOOR:
            self.score = 0
        return self.score

    def advance_stage(self) -> StageResult:
        """Move past the current boss; after the last one the run ends."""
        self.stage += 1
        final_score = self.score
        if self.stage >= STAGE_COUNT:
            self.stage = 0
            self.score = 0
            return StageResult(stage=STAGE_COUNT, victory=True, final_score=final_score)
        return StageResult(stage=self.stage, victory=False, final_score=final_score)