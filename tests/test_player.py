import pygame
import pytest

from spacepirates.player import Player


@pytest.fixture
def player():
    texture = pygame.Surface((100, 50))
    texture.fill((0, 0, 255))
    return Player(texture)


def test_starts_with_full_health(player):
    assert player.hp == player.hp_max == 50


def test_lose_hp_reduces_health(player):
    player.lose_hp(10)
    assert player.hp == player.hp_max - 10


def test_lose_hp_clamps_at_zero(player):
    player.lose_hp(1000)
    assert player.hp == 0


def test_can_attack_only_after_cooldown(player):
    assert player.can_attack() is True
    assert player.can_attack() is False
    for _ in range(3):
        player.update()
    assert player.can_attack() is False
    for _ in range(4):
        player.update()
    assert player.can_attack() is True


def test_cooldown_does_not_exceed_maximum(player):
    for _ in range(20):
        player.update_attack()
    assert player.attack_cooldown == player.attack_cooldown_max


def test_move_scales_by_speed(player):
    player.move(1.0, 0.0)
    assert player.pos == (6.0, 0.0)
    player.move(0.0, -1.0)
    assert player.pos == (6.0, -6.0)


def test_set_position(player):
    player.set_position(12.5, 30)
    assert player.pos == (12.5, 30.0)
    assert (player.bounds.left, player.bounds.top) == (12.5, 30.0)


def test_bounds_are_scaled_texture(player):
    assert player.bounds.width == pytest.approx(10.0)
    assert player.bounds.height == pytest.approx(5.0)


def test_render_draws_sprite(player):
    target = pygame.Surface((50, 50))
    target.fill((0, 0, 0))
    player.set_position(5, 5)
    player.render(target)
    assert tuple(target.get_at((6, 6)))[:3] == (0, 0, 255)
    assert tuple(target.get_at((40, 40)))[:3] == (0, 0, 0)