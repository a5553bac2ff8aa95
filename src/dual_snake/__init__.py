"""Dual Snake — one snake game core, two front-ends."""

from dual_snake.config import GameConfig
from dual_snake.engine import GameEngine, GameState, Outcome, advance
from dual_snake.food import FoodSpawner
from dual_snake.grid import Grid
from dual_snake.snake import Direction, Snake

__all__ = [
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "Outcome",
    "Snake",
    "advance",
]
