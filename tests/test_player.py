import random

import pytest

from bubblegum.player import (
    GROUND_Y,
    RIGHT_LIMIT,
    Fighter,
    Key,
    PowerUp,
    RechargeBar,
    frame_names,
    spawn_powerup,
)


def test_frame_names_counts_up_from_start():
    assert frame_names("_sprite%d.png", 3, 15) == [
        "_sprite15.png",
        "_sprite16.png",
        "_sprite17.png",
    ]


def test_recharge_bar_empties_after_eight_shots():
    bar = RechargeBar()
    results = [bar.fire() for _ in range(9)]
    assert results[:8] == [True] * 8
    assert results[8] is False
    assert bar.percentage == 0


def test_recharge_bar_never_exceeds_full():
    bar = RechargeBar()
    bar.fire()
    for _ in range(5):
        bar.reload_tick()
    assert bar.percentage == 100.0


def test_bullet_frames_cycle():
    fighter = Fighter()
    names = [fighter.next_bullet_frame() for _ in range(7)]
    assert names[0] == "_sprite18.png"
    assert names[6] == names[0]
    assert len(set(names[:6])) == 6


def test_moving_right_and_left():
    fighter = Fighter()
    start = fighter.x
    fighter.press(Key.RIGHT)
    fighter.update(0.5)
    assert fighter.x == pytest.approx(start + fighter.speed * 0.5)
    assert fighter.flipped is False
    fighter.release(Key.RIGHT)
    fighter.press(Key.LEFT)
    fighter.update(0.5)
    assert fighter.x == pytest.approx(start)
    assert fighter.flipped is True


def test_right_limit_stops_movement():
    fighter = Fighter()
    fighter.x = RIGHT_LIMIT
    fighter.press(Key.RIGHT)
    fighter.update(0.1)
    assert fighter.x == RIGHT_LIMIT


def test_game_over_blocks_movement_and_shooting():
    fighter = Fighter()
    fighter.game_over = True
    start = fighter.x
    fighter.press(Key.RIGHT)
    fighter.update(0.5)
    assert fighter.x == start
    assert fighter.shoot() is None
    assert fighter.jump() is False


def test_jump_rises_and_lands():
    fighter = Fighter()
    assert fighter.jump() is True
    assert fighter.sounds[-1][0] == "Music/Jump.mp3"
    fighter.update(0.5)
    assert fighter.y > GROUND_Y
    fighter.update(0.5)
    assert fighter.y == pytest.approx(GROUND_Y)


def test_jump_powerup_jumps_higher():
    plain = Fighter()
    boosted = Fighter()
    boosted.apply_powerup(PowerUp.JUMP)
    plain.jump()
    boosted.jump()
    plain.update(0.5)
    boosted.update(0.5)
    assert boosted.y > plain.y


def test_attack_powerup_expires():
    fighter = Fighter()
    fighter.apply_powerup(PowerUp.ATTACK)
    assert fighter.damage == 2
    assert fighter.has_power is True
    fighter.update(5.0)
    assert fighter.damage == 1
    assert fighter.has_power is False


def test_speed_powerup_and_expire():
    fighter = Fighter()
    fighter.apply_powerup(PowerUp.SPEED)
    assert fighter.speed == 1050
    fighter.expire_powerup(PowerUp.SPEED)
    assert fighter.speed == 600


def test_shot_direction_follows_facing():
    fighter = Fighter()
    right = fighter.shoot()
    assert right.dx > 0
    fighter.press(Key.LEFT)
    left = fighter.shoot()
    assert left.dx < 0
    assert len(fighter.bullets) == 2


def test_shot_disappears_after_flight():
    fighter = Fighter()
    fighter.shoot()
    fighter.update(2.0)
    assert fighter.bullets == []


def test_empty_bar_dry_fires():
    fighter = Fighter()
    for _ in range(8):
        fighter.shoot()
    assert fighter.shoot() is None
    assert fighter.dry_fires == 1


def test_reload_refills_bar():
    fighter = Fighter()
    for _ in range(8):
        fighter.shoot()
    fighter.press(Key.RELOAD)
    for _ in range(60):
        fighter.update(1 / 60)
    assert fighter.bar.percentage == 100.0


def test_ducking_on_ground():
    fighter = Fighter()
    fighter.press(Key.DOWN)
    fighter.update(0.01)
    assert fighter.ducking is True
    assert fighter.body_offset == (0, -150)
    fighter.release(Key.DOWN)
    fighter.update(0.01)
    assert fighter.body_offset == (0, 0)


def test_pause_key_requests_pause():
    fighter = Fighter()
    fighter.press(Key.PAUSE)
    assert fighter.pause_requested is True


def test_spawn_powerup_within_range():
    rng = random.Random(7)
    for _ in range(50):
        power, x = spawn_powerup(rng)
        assert power in PowerUp
        assert 50 <= x < 1350


def test_spawned_powerups_carry_textures():
    textures = {
        "MENU/_menu21.png",
        "MENU/_menu22.png",
        "MENU/_menu23.png",
        "MENU/_menu24.png",
    }
    rng = random.Random(11)
    seen = set()
    for _ in range(200):
        power, _x = spawn_powerup(rng)
        assert power.texture in textures
        seen.add(power)
    assert seen == set(PowerUp)
    assert PowerUp.LIFE.texture == "MENU/_menu21.png"
    assert PowerUp.SPEED.texture == "MENU/_menu24.png"
    assert PowerUp.LIFE.duration is None