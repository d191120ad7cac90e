# tests/test_food.py
import random
from core.food import FoodSpawner
from core.grid import Grid
from core.interfaces import Heading
from core.snake_body import SnakeBody

def test_spawn_in_bounds_and_off_snake():
    grid = Grid(5, 5)
    snake = SnakeBody((2, 2), 3)
    spawner = FoodSpawner(random.Random(0))
    for _ in range(200):
        cell = spawner.spawn(grid, snake)
        assert grid.contains(cell)
        assert not snake.occupies(cell)

def test_same_seed_same_food():
    grid = Grid(20, 20)
    snake = SnakeBody((10, 10), 3)
    a = [FoodSpawner(random.Random(3)).spawn(grid, snake) for _ in range(3)]
    b = [FoodSpawner(random.Random(3)).spawn(grid, snake) for _ in range(3)]
    assert a == b

def test_single_free_cell_found_after_rejections():
    grid = Grid(3, 1)
    snake = SnakeBody((1, 0), 2)        # (1,0), (0,0); only (2,0) free
    spawner = FoodSpawner(random.Random(1), max_attempts=0)
    assert spawner.spawn(grid, snake) == (2, 0)

def test_full_board_returns_none():
    grid = Grid(2, 1)
    snake = SnakeBody((1, 0), 2)
    assert FoodSpawner(random.Random(0)).spawn(grid, snake) is None

def test_crowded_board_terminates():
    grid = Grid(4, 4)
    snake = SnakeBody((3, 0), 4)
    for h in (Heading.DOWN, Heading.LEFT, Heading.LEFT, Heading.LEFT,
              Heading.DOWN, Heading.RIGHT, Heading.RIGHT, Heading.RIGHT,
              Heading.DOWN, Heading.LEFT, Heading.LEFT):
        snake.advance(h)
        snake.grow()
    # 15 of 16 cells covered
    assert len(snake) == 15
    cell = FoodSpawner(random.Random(0), max_attempts=1).spawn(grid, snake)
    assert cell == (0, 3)
