import pytest

from gridsnake import constants
from gridsnake.food import Food, food_target
from gridsnake.render import Container
from gridsnake.utils import Position

from conftest import make_snake


@pytest.mark.parametrize("snakes, target", [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2), (7, 4)])
def test_food_target_is_half_rounded_up(snakes, target):
    assert food_target(snakes) == target


def test_spawn_stays_inside_playable_area():
    container = Container(6, 5)
    for _ in range(200):
        food = Food.spawn([], container)
        assert 0 <= food.position.x < 6
        assert constants.HEADER_ROWS <= food.position.y < 5
        assert food.color in constants.FOOD_COLORS


def test_spawn_never_lands_on_a_snake():
    # 3x3 playable cells below the header, all but (2, 3) taken.
    container = Container(3, 4)
    first = make_snake("a", [(0, 1), (1, 1), (2, 1), (2, 2)])
    second = make_snake("b", [(1, 2), (0, 2), (0, 3), (1, 3)])

    for _ in range(20):
        food = Food.spawn([first, second], container, attempts=1000)
        assert food.position == Position(2, 3)


def test_spawn_gives_up_on_a_full_board():
    container = Container(2, 2)
    snake = make_snake("a", [(0, 1), (1, 1)])

    assert Food.spawn([snake], container, attempts=25) is None


def test_spawn_may_stack_on_existing_food(monkeypatch):
    container = Container(5, 5)
    monkeypatch.setattr("gridsnake.utils.random_cell", lambda *args: Position(2, 2))

    first = Food.spawn([], container)
    second = Food.spawn([], container)

    assert first.position == second.position == Position(2, 2)
