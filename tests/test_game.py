import random

import pytest

from weeninja.fruit import Fruit, FruitType
from weeninja.game import GameFullError, GameState, Ray


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _ray_at(x, y):
    return Ray(position=(x, y, 0.0), direction=(0.0, 0.0, -1.0))


def test_spawn_starts_below_screen():
    state = GameState()
    fruit = state.spawn_fruit(FruitType.APPLE, random.Random(7))
    assert state.fruit == [fruit]
    assert fruit.position[1] == -10.0
    assert fruit.omega == 0.3
    assert fruit.theta == 0.0
    assert fruit.alive
    assert fruit.type is FruitType.APPLE


def test_spawn_values_stay_in_range():
    state = GameState()
    rng = random.Random(3)
    for _ in range(200):
        fruit = state.spawn_fruit(FruitType.ORANGE, rng)
        assert -4.0 <= fruit.position[0] <= 12.0
        assert 7.0 <= fruit.velocity[1] <= 21.0


def test_spawn_with_zero_rng():
    fruit = GameState().spawn_fruit(FruitType.KIWIFRUIT, _FixedRng(0.0))
    assert fruit.velocity == (-0.5, 7.0)
    assert fruit.position == (-4.0, -10.0)


def test_spawn_rejects_when_full():
    state = GameState(max_fruit=1)
    state.spawn_fruit(FruitType.APPLE, _FixedRng(0.5))
    with pytest.raises(GameFullError):
        state.spawn_fruit(FruitType.APPLE, _FixedRng(0.5))


def test_kill_fruit():
    state = GameState()
    fruit = state.spawn_fruit(FruitType.APPLE, _FixedRng(0.5))
    state.kill_fruit(fruit)
    assert list(state.alive_fruit()) == []


def test_update_zero_dt_keeps_state():
    state = GameState()
    fruit = state.spawn_fruit(FruitType.APPLE, _FixedRng(0.5))
    before = (fruit.position, fruit.velocity, fruit.theta)
    state.update(0.0)
    assert (fruit.position, fruit.velocity, fruit.theta) == before


def test_update_rises_and_slows():
    state = GameState()
    fruit = state.spawn_fruit(FruitType.APPLE, _FixedRng(0.5))
    vy = fruit.velocity[1]
    state.update(0.1)
    assert fruit.position[1] > -10.0
    assert fruit.velocity[1] < vy
    assert fruit.theta > 0.0
    assert fruit.alive


def test_update_kills_fallen_fruit():
    state = GameState([Fruit(FruitType.APPLE, (0.0, -9.9), (0.0, -5.0))])
    state.update(1.0)
    assert not state.fruit[0].alive


def test_update_skips_dead_fruit():
    dead = Fruit(FruitType.APPLE, (1.0, 2.0), (3.0, 4.0), alive=False)
    state = GameState([dead])
    state.update(1.0)
    assert dead.position == (1.0, 2.0)
    assert dead.velocity == (3.0, 4.0)


def test_split_whole_fruit_makes_halves():
    apple = Fruit(FruitType.APPLE, (2.0, 3.0), (1.0, 1.0))
    state = GameState([apple])
    left, right = state.split_fruit(apple)
    assert not apple.alive
    assert state.fruit == [apple, left, right]
    for half in (left, right):
        assert half.type is FruitType.APPLE_HALF
        assert half.position == apple.position
        assert half.alive
        assert half.omega == 0.0
    assert left.velocity == (-8.0, 0.0)
    assert right.velocity == (8.0, 0.0)


def test_split_pineapple_gives_top():
    pineapple = Fruit(FruitType.PINEAPPLE)
    halves = GameState([pineapple]).split_fruit(pineapple)
    assert [h.type for h in halves] == [FruitType.PINEAPPLE_HALF_TOP] * 2


def test_split_half_only_kills():
    half = Fruit(FruitType.ORANGE_HALF)
    state = GameState([half])
    assert state.split_fruit(half) == ()
    assert state.fruit == [half]
    assert not half.alive


def test_split_rejects_when_full():
    apple = Fruit(FruitType.APPLE)
    state = GameState([apple], max_fruit=2)
    with pytest.raises(GameFullError):
        state.split_fruit(apple)
    assert len(state.fruit) == 1


def test_pick_hits_fruit():
    apple = Fruit(FruitType.APPLE, (1.0, 1.0))
    state = GameState([apple])
    state.fruit_pick(_ray_at(1.2, 0.9))
    assert not apple.alive
    assert [f.type for f in state.fruit[1:]] == [FruitType.APPLE_HALF] * 2
    # Halves at the same spot are picked in the same pass.
    assert list(state.alive_fruit()) == []


def test_pick_misses_fruit():
    apple = Fruit(FruitType.APPLE, (1.0, 1.0))
    state = GameState([apple])
    state.fruit_pick(_ray_at(5.0, 5.0))
    assert apple.alive
    assert state.fruit == [apple]


def test_pick_parallel_ray_does_nothing():
    apple = Fruit(FruitType.APPLE, (0.0, 0.0))
    state = GameState([apple])
    state.fruit_pick(Ray((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)))
    assert apple.alive
    assert len(state.fruit) == 1