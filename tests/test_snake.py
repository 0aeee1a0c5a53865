import random

import pytest

from pixelplay.snake import (
    Block,
    Direction,
    Food,
    RecordStore,
    SnakeGame,
)


@pytest.fixture
def game():
    return SnakeGame(30, 30, random.Random(1))


def test_initial_snake_is_centred_and_heads_right(game):
    assert game.snake == [Block(15, 15), Block(14, 15), Block(13, 15)]
    assert game.direction is Direction.RIGHT
    assert game.playing and not game.menu
    assert game.score == 0


def test_fruit_inside_field(game):
    assert 0 <= game.fruit.x < 30
    assert 0 <= game.fruit.y < 30


def test_move_shifts_body(game):
    game.move()
    assert game.snake == [Block(16, 15), Block(15, 15), Block(14, 15)]


def test_turn_refuses_reverse(game):
    assert game.turn(Direction.LEFT) is False
    assert game.direction is Direction.RIGHT
    assert game.turn(Direction.UP) is True
    game.move()
    assert game.head == Block(15, 14)


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_involution(game, direction):
    assert direction.opposite.opposite is direction
    dx, dy = direction.delta
    ox, oy = direction.opposite.delta
    assert (dx + ox, dy + oy) == (0, 0)
    game.direction = direction
    assert game.turn(direction.opposite) is False
    assert game.direction is direction
    game.move()
    assert game.head == Block(15 + dx, 15 + dy)


def test_eating_grows_and_scores(game):
    game.fruit = Food(16, 15)
    game.step()
    assert game.score == 1
    assert len(game.snake) == 4
    assert game.snake[-1] == Block(-1, -1)
    game.step()
    assert len(game.snake) == 4
    assert Block(-1, -1) not in game.snake


def test_no_eat_when_fruit_elsewhere(game):
    game.fruit = Food(0, 0)
    assert game.eat() is False
    assert game.score == 0


def test_trim_cuts_after_deep_bite(game):
    game.snake = [
        Block(5, 5), Block(6, 5), Block(6, 6), Block(5, 6),
        Block(4, 6), Block(5, 5), Block(5, 4),
    ]
    assert game.trim_self_collision() == 2
    assert len(game.snake) == 5


def test_trim_ignores_shallow_bite(game):
    original = [Block(5, 5), Block(6, 5), Block(5, 5), Block(4, 5), Block(3, 5), Block(2, 5)]
    game.snake = list(original)
    assert game.trim_self_collision() == 0
    assert game.snake == original


def test_leaving_field_ends_game(game):
    game.snake = [Block(29, 3), Block(28, 3), Block(27, 3)]
    game.fruit = Food(0, 0)
    game.step()
    assert game.playing is False
    assert game.menu is True
    frozen = list(game.snake)
    game.step()
    assert game.snake == frozen


def test_reset_after_game_over(game):
    game.snake = [Block(-1, 3), Block(0, 3), Block(1, 3)]
    assert game.check_bounds() is True
    game.reset()
    assert game.playing
    assert len(game.snake) == 3


def test_resize_uses_square_root(game):
    game.resize(900, 400)
    assert game.field_width == pytest.approx(30.0)
    assert game.field_height == pytest.approx(20.0)
    assert game.cell_width == game.field_width


def test_food_random_in_range():
    rng = random.Random(7)
    for _ in range(200):
        food = Food.random(12, 5, rng)
        assert 0 <= food.x < 12
        assert 0 <= food.y < 5


def test_sprite_cells_for_straight_snake(game):
    cells = game.sprite_cells()
    assert [(c.x, c.y) for c in cells] == [(15, 15), (14, 15), (13, 15)]
    assert (cells[0].sprite_x, cells[0].sprite_y) == (120, 0)
    assert (cells[1].sprite_x, cells[1].sprite_y) == (30, 0)
    assert (cells[2].sprite_x, cells[2].sprite_y) == (120, 60)


def test_sprite_cells_cover_whole_snake(game):
    game.snake = [Block(3, 3), Block(3, 4), Block(4, 4), Block(5, 4), Block(5, 5)]
    cells = game.sprite_cells()
    assert len(cells) == len(game.snake)
    assert [(c.x, c.y) for c in cells] == [(b.x, b.y) for b in game.snake]


def test_record_store_missing_file(tmp_path):
    assert RecordStore(tmp_path / "records.txt").load() == 0


def test_record_store_keeps_best(tmp_path):
    store = RecordStore(tmp_path / "records.txt")
    assert store.update(5) == 5
    assert (tmp_path / "records.txt").read_text() == "5"
    assert store.update(3) == 5
    assert store.load() == 5
    assert store.update(9) == 9


def test_record_store_reads_leading_number(tmp_path):
    path = tmp_path / "records.txt"
    path.write_text("  12abc")
    assert RecordStore(path).load() == 12
    path.write_text("junk")
    assert RecordStore(path).load() == 0