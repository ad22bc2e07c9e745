import pytest

from weeninja.fruit import Fruit, FruitType


@pytest.mark.parametrize(
    "whole, half",
    [
        (FruitType.APPLE, FruitType.APPLE_HALF),
        (FruitType.ORANGE, FruitType.ORANGE_HALF),
        (FruitType.KIWIFRUIT, FruitType.KIWIFRUIT_HALF),
        (FruitType.PINEAPPLE, FruitType.PINEAPPLE_HALF_TOP),
    ],
)
def test_whole_fruit_halves(whole, half):
    assert whole.half() is half


@pytest.mark.parametrize(
    "kind",
    [
        FruitType.APPLE_HALF,
        FruitType.ORANGE_HALF,
        FruitType.KIWIFRUIT_HALF,
        FruitType.PINEAPPLE_HALF_TOP,
        FruitType.PINEAPPLE_HALF_BOTTOM,
    ],
)
def test_cut_fruit_does_not_split(kind):
    assert kind.half() is None


def test_enum_values_match_table():
    halves = [FruitType(value).half() for value in range(4)]
    assert [int(k) for k in halves] == [4, 5, 6, 7]
    assert FruitType(8).half() is None
    assert FruitType(8) is FruitType.PINEAPPLE_HALF_BOTTOM


def test_fruit_defaults():
    fruit = Fruit(FruitType.ORANGE)
    assert fruit.alive is True
    assert fruit.position == (0.0, 0.0)
    assert fruit.velocity == (0.0, 0.0)
    assert fruit.theta == 0.0