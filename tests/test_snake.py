import pytest

from gridsnake import constants
from gridsnake.snake import Snake
from gridsnake.utils import Direction, Position

from conftest import make_snake


def test_create_lays_body_behind_head():
    snake = Snake.create("a", Position(5, 5), "red", size=3)

    assert snake.segments == [Position(5, 5), Position(4, 5), Position(3, 5)]
    assert snake.direction is Direction.RIGHT
    assert snake.pending_direction is Direction.RIGHT


def test_create_follows_direction():
    snake = Snake.create("a", Position(5, 5), "red", size=2, direction=Direction.UP)

    assert snake.segments == [Position(5, 5), Position(5, 6)]


def test_snake_requires_segments():
    with pytest.raises(ValueError):
        Snake(owner="a", color="red", segments=[])


def test_length_constant_without_food():
    snake = make_snake("a", [(5, 5), (4, 5), (3, 5)])

    for _ in range(4):
        snake.move()

    assert len(snake.segments) == 3
    assert snake.head == Position(9, 5)
    assert snake.segments[-1] == Position(7, 5)


def test_growth_adds_exactly_one_segment():
    snake = make_snake("a", [(5, 5), (4, 5), (3, 5)])
    lengths = []
    for step in range(5):
        snake.move(grow=step == 2)
        lengths.append(len(snake.segments))

    assert lengths == [3, 3, 4, 4, 4]


def test_move_commits_pending_direction():
    snake = make_snake("a", [(5, 5), (4, 5), (3, 5)])
    snake.change_direction(Direction.UP)

    assert snake.direction is Direction.RIGHT
    assert snake.next_head() == Position(5, 4)
    assert snake.move() == Position(5, 4)
    assert snake.direction is Direction.UP


@pytest.mark.parametrize(
    "current, requested, accepted",
    [
        (Direction.RIGHT, Direction.LEFT, False),
        (Direction.RIGHT, Direction.RIGHT, True),
        (Direction.RIGHT, Direction.UP, True),
        (Direction.RIGHT, Direction.DOWN, True),
        (Direction.UP, Direction.DOWN, False),
        (Direction.UP, Direction.LEFT, True),
        (Direction.DOWN, Direction.UP, False),
        (Direction.LEFT, Direction.RIGHT, False),
    ],
)
def test_change_direction_rejects_only_reversal(current, requested, accepted):
    snake = make_snake("a", [(5, 5)], direction=current)
    snake.change_direction(requested)

    expected = requested if accepted else current
    assert snake.pending_direction is expected


def test_reversal_is_judged_against_committed_heading():
    snake = make_snake("a", [(5, 5), (4, 5), (3, 5)])
    snake.change_direction(Direction.UP)
    snake.change_direction(Direction.LEFT)

    # Still heading right, so left is a reversal even after queueing up.
    assert snake.pending_direction is Direction.UP


def test_is_at_checks_every_segment():
    snake = make_snake("a", [(5, 5), (4, 5), (3, 5)])

    assert snake.is_at(Position(5, 5))
    assert snake.is_at(Position(3, 5))
    assert not snake.is_at(Position(6, 5))


@pytest.mark.parametrize(
    "head, expected",
    [
        ((0, constants.HEADER_ROWS), False),
        ((9, 9), False),
        ((5, 5), False),
        ((10, 5), True),
        ((-1, 5), True),
        ((5, 10), True),
        ((5, constants.HEADER_ROWS - 1), True),
    ],
)
def test_hit_detects_walls(head, expected):
    snake = make_snake("a", [head])

    assert snake.hit(10, 10) is expected


def test_hit_snake_matches_any_segment_of_other():
    snake = make_snake("a", [(4, 6), (3, 6)])
    other = make_snake("b", [(6, 6), (5, 6), (4, 6)])

    assert snake.hit_snake(other)
    assert not other.hit_snake(snake)


def test_hit_snake_head_on():
    snake = make_snake("a", [(4, 6), (3, 6)])
    other = make_snake("b", [(4, 6), (5, 6)])

    assert snake.hit_snake(other)


def test_hit_snake_detects_self_intersection():
    looped = make_snake("a", [(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)])
    straight = make_snake("b", [(5, 5), (4, 5), (3, 5)])

    assert looped.hit_snake(looped)
    assert not straight.hit_snake(straight)


def test_scored_adds_food_value():
    snake = make_snake("a", [(5, 5)])
    snake.scored()
    snake.scored()

    assert snake.score == 2 * constants.FOOD_SCORE


def test_bye_runs_once():
    calls = []
    snake = make_snake("a", [(5, 5)])
    snake.on_bye = calls.append

    snake.bye()
    snake.bye()

    assert calls == [snake]
    assert not snake.alive


def test_removed_snake_ignores_input_and_moves():
    snake = make_snake("a", [(5, 5), (4, 5)])
    snake.bye()
    snake.change_direction(Direction.UP)

    assert snake.move() == Position(5, 5)
    assert snake.pending_direction is Direction.RIGHT
