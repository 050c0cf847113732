"""Menu, pause, high-score and victory screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .resolution import DESIGN_RESOLUTION
from .session import MAX_LIVES, Session
from .storage import HighScoreStore

CENTER = (DESIGN_RESOLUTION[0] / 2, DESIGN_RESOLUTION[1] / 2)

SELECT_SOUND = ("Music/blipSelect.mp3", 1.0)
MENU_MUSIC = ("Music/Menu.MP3", 0.2)

TITLE_FONT = "fonts/8Bit.ttf"
BODY_FONT = "fonts/NineteenNinetySeven.ttf"


class Action(Enum):
    """A request to change what is on screen."""

    START = "start"
    SHOW_SCORES = "show_scores"
    QUIT = "quit"
    RESUME = "resume"
    HOME = "home"
    PAUSE = "pause"
    PLAY_AGAIN = "play_again"
    NEXT_STAGE = "next_stage"


_MENU_ACTIONS = {
    "start": Action.START,
    "score": Action.SHOW_SCORES,
    "exit": Action.QUIT,
}

_PAUSE_ACTIONS = {
    "continue": Action.RESUME,
    "escape": Action.RESUME,
    "home": Action.HOME,
}

_PAUSE_BACKGROUNDS = {
    0: "Backgrounds/pxArt1_.png",
    1: "Backgrounds/pxArt2_.png",
    2: "Backgrounds/pxArt3_.png",
}


@dataclass
class MenuScreen:
    """The title screen with its start, score and exit buttons."""

    session: Session
    sounds: list[tuple[str, float]] = field(default_factory=list)

    background = "Backgrounds/_menu.png"
    title_image = "MENU/_menu6.png"
    music = MENU_MUSIC

    @property
    def buttons(self) -> dict[str, tuple[float, float]]:
        """Button centres keyed by item name."""
        x = CENTER[0] + 520
        return {
            "start": (x, CENTER[1] + 400),
            "score": (x, CENTER[1] + 200),
            "exit": (x, CENTER[1]),
        }

    def choose(self, item: str) -> Action:
        """Press a menu button and return what should happen next."""
        try:
            action = _MENU_ACTIONS[item]
        except KeyError:
            raise ValueError(f"unknown menu item {item!r}") from None
        self.sounds.append(SELECT_SOUND)
        if action is Action.START:
            self.session.lives = MAX_LIVES
        return action


@dataclass
class PauseScreen:
    """Shown over a battle until the player continues or goes home."""

    stage: int

    title = "PAUSED"

    def background(self) -> str:
        """Return the darkened backdrop of the paused stage."""
        return _PAUSE_BACKGROUNDS.get(self.stage, _PAUSE_BACKGROUNDS[0])

    @property
    def buttons(self) -> dict[str, tuple[float, float]]:
        """Button centres keyed by item name."""
        y = CENTER[1] - 70
        return {"continue": (CENTER[0] + 170, y), "home": (CENTER[0] - 170, y)}

    def choose(self, item: str) -> Action:
        """Press a button (or escape) and return what should happen next."""
        try:
            return _PAUSE_ACTIONS[item]
        except KeyError:
            raise ValueError(f"unknown pause item {item!r}") from None


@dataclass
class ScoreScreen:
    """Shows the best score stored so far."""

    store: HighScoreStore

    background = "Backgrounds/_score.png"
    buttons = {"home": (100.0, 100.0)}

    def lines(self) -> tuple[str, str]:
        """Return the heading and the high score as text."""
        return ("HIGH SCORE:", str(self.store.high_score()))


@dataclass
class VictoryScreen:
    """Shown after the last boss falls; any key returns to the menu."""

    final_score: int

    background = "Backgrounds/_victory.png"
    banner = "MENU/_menu25.png"
    music = MENU_MUSIC

    def lines(self) -> tuple[str, str]:
        """Return the final score line and the prompt."""
        return (f"FINAL SCORE: {self.final_score}", "Press any key to continue...")