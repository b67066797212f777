"""
test_spawn_manager.py
---------------------
Range checks for spawned comets.
"""

import random

import pytest

from comet_dodge.systems.spawn_manager import CometSpawner

WIDTH = 480


@pytest.fixture
def spawner():
    return CometSpawner(WIDTH, rng=random.Random(2024))


def test_radius_and_position_ranges(spawner):
    for _ in range(500):
        comet = spawner.spawn(1.0)

        assert 10 <= comet.radius < 24
        assert comet.x - comet.radius >= 0
        assert comet.x + comet.radius <= WIDTH
        assert comet.y == pytest.approx(-comet.radius - 10)


@pytest.mark.parametrize("multiplier", [1.0, 2.5, 4.0])
def test_speed_scales_with_multiplier(spawner, multiplier):
    bonus = multiplier * 25
    for _ in range(300):
        comet = spawner.spawn(multiplier)
        assert 160 + bonus <= comet.speed < 280 + bonus


def test_each_call_creates_a_new_comet(spawner):
    first = spawner.spawn(1.0)
    second = spawner.spawn(1.0)

    assert first is not second
    assert spawner.total_spawned == 2


def test_spawns_vary(spawner):
    xs = {round(spawner.spawn(1.0).x, 3) for _ in range(20)}
    assert len(xs) > 1
