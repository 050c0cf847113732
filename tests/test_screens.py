import pytest

from bubblegum.screens import (
    SELECT_SOUND,
    Action,
    MenuScreen,
    PauseScreen,
    ScoreScreen,
    VictoryScreen,
)
from bubblegum.session import MAX_LIVES, Session
from bubblegum.storage import HighScoreStore


def test_menu_start_restores_lives():
    session = Session(lives=2)
    assert MenuScreen(session).choose("start") is Action.START
    assert session.lives == MAX_LIVES


@pytest.mark.parametrize(
    "item, action", [("score", Action.SHOW_SCORES), ("exit", Action.QUIT)]
)
def test_menu_other_items(item, action):
    session = Session(lives=3)
    assert MenuScreen(session).choose(item) is action
    assert session.lives == 3


def test_menu_choice_plays_select_sound():
    screen = MenuScreen(Session())
    screen.choose("score")
    assert screen.sounds == [SELECT_SOUND]


def test_menu_unknown_item():
    screen = MenuScreen(Session())
    with pytest.raises(ValueError):
        screen.choose("options")
    assert screen.sounds == []


def test_menu_buttons_stacked():
    buttons = MenuScreen(Session()).buttons
    assert set(buttons) == {"start", "score", "exit"}
    assert buttons["start"][1] > buttons["score"][1] > buttons["exit"][1]
    assert buttons["start"][0] == buttons["exit"][0]


@pytest.mark.parametrize(
    "stage, image",
    [
        (0, "Backgrounds/pxArt1_.png"),
        (1, "Backgrounds/pxArt2_.png"),
        (2, "Backgrounds/pxArt3_.png"),
        (7, "Backgrounds/pxArt1_.png"),
    ],
)
def test_pause_background(stage, image):
    assert PauseScreen(stage).background() == image


@pytest.mark.parametrize(
    "item, action",
    [("continue", Action.RESUME), ("escape", Action.RESUME), ("home", Action.HOME)],
)
def test_pause_choices(item, action):
    assert PauseScreen(0).choose(item) is action


def test_pause_unknown_item():
    with pytest.raises(ValueError):
        PauseScreen(0).choose("restart")


def test_pause_buttons_side_by_side():
    buttons = PauseScreen(1).buttons
    assert buttons["continue"][1] == buttons["home"][1]
    assert buttons["continue"][0] > buttons["home"][0]


def test_score_screen_empty_store(tmp_path):
    screen = ScoreScreen(HighScoreStore(tmp_path / "scores.json"))
    assert screen.lines() == ("HIGH SCORE:", "0")


def test_score_screen_shows_stored_score(tmp_path):
    store = HighScoreStore(tmp_path / "scores.json")
    store.submit(340)
    assert ScoreScreen(store).lines()[1] == "340"


def test_victory_lines():
    assert VictoryScreen(275).lines() == (
        "FINAL SCORE: 275",
        "Press any key to continue...",
    )