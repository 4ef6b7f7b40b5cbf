"""Tests for random walkable placement."""

import random

from crab.game.spawn import random_walkable_position


def test_positions_stay_on_walkable_band(settings):
    rng = random.Random(7)
    width, height = settings.sprite_width, settings.sprite_height

    for _ in range(10_000):
        x, y = random_walkable_position(settings, rng, width, height)
        assert 0 <= x < settings.screen_width - width
        assert settings.walkable_min_y <= y < settings.walkable_max_y - height


def test_positions_cover_the_band(settings):
    rng = random.Random(11)
    samples = [
        random_walkable_position(settings, rng, 48, 48) for _ in range(5_000)
    ]
    xs = [x for x, _ in samples]
    ys = [y for _, y in samples]

    # Uniform draws reach both ends of each range
    assert min(xs) < 50
    assert max(xs) > settings.screen_width - 48 - 50
    assert min(ys) < settings.walkable_min_y + 20
    assert max(ys) > settings.walkable_max_y - 48 - 20


def test_same_seed_same_positions(settings):
    first = [random_walkable_position(settings, random.Random(3), 48, 48) for _ in range(3)]
    second = [random_walkable_position(settings, random.Random(3), 48, 48) for _ in range(3)]
    assert first == second
