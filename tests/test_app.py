import random

import pytest

from bubblegum.app import Game, main
from bubblegum.bosses import SHOT_SOUND
from bubblegum.combat import enemy_life_for_stage
from bubblegum.player import Key
from bubblegum.screens import Action, MenuScreen, PauseScreen, ScoreScreen, VictoryScreen
from bubblegum.session import MAX_LIVES
from bubblegum.storage import HighScoreStore


@pytest.fixture
def game(tmp_path):
    g = Game(HighScoreStore(tmp_path / "scores.json"))
    g.rng = random.Random(1)
    return g


def _win(game):
    combat = game.battle.combat
    while not combat.won:
        combat.enemy_hit()
    while combat.result is None:
        combat.bonus_tick()
    return combat.result


def test_starts_on_menu(game):
    assert isinstance(game.screen, MenuScreen)
    assert game.battle is None
    assert game.running


def test_start_begins_first_stage(game):
    game.session.lives = 1
    game.handle(Action.START)
    assert game.screen is game.battle
    assert game.battle.boss.stage == 0
    assert game.session.lives == MAX_LIVES


def test_pause_and_resume(game):
    game.handle(Action.START)
    battle = game.battle
    game.handle(Action.PAUSE)
    assert isinstance(game.screen, PauseScreen)
    game.handle(Action.RESUME)
    assert game.screen is battle


def test_pause_without_battle(game):
    with pytest.raises(RuntimeError):
        game.handle(Action.PAUSE)


def test_scores_push_and_pop(game):
    game.handle(Action.SHOW_SCORES)
    assert isinstance(game.screen, ScoreScreen)
    game.handle(Action.RESUME)
    assert isinstance(game.screen, MenuScreen)
    game.handle(Action.RESUME)
    assert len(game.screens) == 1


def test_quit(game):
    game.handle(Action.QUIT)
    assert game.running is False


def test_home_clears_battle(game):
    game.handle(Action.START)
    game.handle(Action.PAUSE)
    game.handle(Action.HOME)
    assert game.battle is None
    assert len(game.screens) == 1
    assert isinstance(game.screen, MenuScreen)


def test_next_stage_needs_finished_battle(game):
    game.handle(Action.START)
    with pytest.raises(RuntimeError):
        game.handle(Action.NEXT_STAGE)


def test_winning_moves_to_next_boss(game):
    game.handle(Action.START)
    result = _win(game)
    game.handle(Action.NEXT_STAGE)
    assert game.battle.boss.stage == 1
    assert game.session.lives == MAX_LIVES
    assert game.session.score == result.final_score
    assert game.battle.combat.enemy_life == enemy_life_for_stage(1)


def test_last_boss_leads_to_victory(game):
    game.session.stage = 2
    game.handle(Action.START)
    result = _win(game)
    game.handle(Action.NEXT_STAGE)
    assert isinstance(game.screen, VictoryScreen)
    assert game.screen.final_score == result.final_score
    assert game.session.score == 0
    assert game.battle is None


def test_loss_then_play_again(game):
    game.handle(Action.START)
    combat = game.battle.combat
    for _ in range(MAX_LIVES):
        combat.player_hit()
    assert combat.lost
    assert game.battle.step(1.0) is None
    game.handle(Action.PLAY_AGAIN)
    assert game.battle.boss.stage == 0
    assert game.session.lives == MAX_LIVES
    assert game.session.score == 0


def test_battle_step_requests_pause(game):
    game.handle(Action.START)
    game.battle.fighter.press(Key.PAUSE)
    assert game.battle.step(0.01) is Action.PAUSE
    assert game.battle.step(0.01) is None


def test_battle_step_after_win_requests_next_stage(game):
    game.handle(Action.START)
    combat = game.battle.combat
    while not combat.won:
        combat.enemy_hit()
    assert game.battle.step(20.0) is Action.NEXT_STAGE
    assert combat.bonus_left == 0
    assert combat.result is not None


def test_boss_throws_after_first_delay(game):
    game.handle(Action.START)
    battle = game.battle
    assert battle.step(battle.boss.first_delay - 0.5) is None
    assert battle.projectiles == []
    battle.step(0.51)
    assert len(battle.projectiles) == 1
    assert SHOT_SOUND in battle.sounds


def test_bubble_hits_boss(game):
    game.handle(Action.START)
    battle = game.battle
    battle.fighter.x = battle.boss.position[0] - 90
    battle.fighter.press(Key.FIRE)
    battle.step(0.01)
    assert battle.combat.enemy_life == enemy_life_for_stage(0) - 1
    assert battle.fighter.bullets == []


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2