import pygame
import pytest

import constants as C
from physics import (
    Player,
    apply_gravity,
    clamp,
    constrain_system,
    gravity_system,
    handle_flap,
    integrate,
    lerp_window,
    move_system,
    spawn_player,
)


def test_apply_gravity_is_plain_euler():
    for vel, dt, g in [(0.0, 0.1, -650.0), (150.0, 1 / 60, -650.0), (-300.0, 0.0, -9.8), (5.0, 2.0, 3.0)]:
        assert apply_gravity(vel, dt, g) == vel + g * dt


def test_apply_gravity_does_not_clamp():
    assert apply_gravity(-10_000.0, 10.0, C.GRAVITY) == -10_000.0 + C.GRAVITY * 10.0


def test_clamp_at_rest_on_floor_is_stable():
    assert clamp(C.LOWER_BOUND, 0.0, C.LOWER_BOUND, C.UPPER_BOUND) == (C.LOWER_BOUND, 0.0)


def test_clamp_below_floor_while_falling():
    assert clamp(-20.0, -5.0, -12.0, 212.0) == (-12.0, 0.0)


def test_clamp_above_ceiling_while_rising():
    assert clamp(250.0, 30.0, -12.0, 212.0) == (212.0, 0.0)


def test_clamp_inside_bounds_is_untouched():
    assert clamp(50.0, -5.0, -12.0, 212.0) == (50.0, -5.0)


def test_clamp_leaves_outward_position_moving_back_in():
    # below the floor but already flying up: no clamp, no zeroed velocity
    assert clamp(-20.0, 40.0, -12.0, 212.0) == (-20.0, 40.0)
    assert clamp(250.0, -40.0, -12.0, 212.0) == (250.0, -40.0)


def test_default_bounds_match_screen():
    assert C.LOWER_BOUND == -12
    assert C.UPPER_BOUND == 212


def test_integrate_zero_velocity_does_not_move():
    pos = pygame.Vector2(48.0, 100.0)
    for dt in (0.0, 1 / 60, 0.5, 3.0):
        assert integrate(pos, 0.0, dt) == pos


def test_integrate_moves_only_y():
    new = integrate(pygame.Vector2(48.0, 100.0), -65.0, 0.1)
    assert new.x == 48.0
    assert new.y == pytest.approx(93.5)


def test_handle_flap_sets_jump_velocity_and_plays_once():
    played = []
    p = Player((48.0, 100.0), y_vel=-100.0)
    assert handle_flap(p, True, 150.0, played.append)
    assert p.y_vel == 150.0
    assert played == [C.SFX_WING]


def test_handle_flap_without_edge_keeps_velocity():
    played = []
    p = Player((48.0, 100.0), y_vel=-100.0)
    assert not handle_flap(p, False, 150.0, played.append)
    assert p.y_vel == -100.0
    assert played == []


def test_handle_flap_without_sound_sink():
    p = Player((0.0, 0.0))
    assert handle_flap(p, True)
    assert p.y_vel == C.JUMP_VELOCITY


def test_systems_ignore_missing_player():
    played = []
    assert not handle_flap(None, True, 150.0, played.append)
    assert played == []
    gravity_system(None, 0.1)
    assert constrain_system(None) is None
    move_system(None, 0.1)


def test_constrain_system_reports_bound_hit():
    p = Player((48.0, -20.0), y_vel=-5.0)
    assert constrain_system(p) == C.LOWER_BOUND
    assert p.pos.y == C.LOWER_BOUND
    assert p.y_vel == 0.0

    p = Player((48.0, 250.0), y_vel=30.0)
    assert constrain_system(p) == C.UPPER_BOUND
    assert (p.pos.y, p.y_vel) == (C.UPPER_BOUND, 0.0)

    p = Player((48.0, 50.0), y_vel=-5.0)
    assert constrain_system(p) is None
    assert (p.pos.y, p.y_vel) == (50.0, -5.0)


def test_one_tick_of_free_fall():
    p = Player((100.0, 100.0), y_vel=0.0)
    gravity_system(p, 0.1, -650.0)
    constrain_system(p)
    move_system(p, 0.1)
    assert p.y_vel == pytest.approx(-65.0)
    assert p.pos.y == pytest.approx(93.5)
    assert p.pos.x == 100.0


def test_spawn_point():
    p = spawn_player()
    assert p.pos == lerp_window(C.SPAWN_UV)
    assert p.pos.x == pytest.approx(48.0)
    assert p.pos.y == pytest.approx(100.0)
    assert p.y_vel == 0.0
