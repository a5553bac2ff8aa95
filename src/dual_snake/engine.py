"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from dual_snake.config import GameConfig
from dual_snake.food import FoodSpawner
from dual_snake.grid import Grid
from dual_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """Result of advancing the game by one tick."""

    CONTINUE = "continue"
    ATE = "ate"
    DIED = "died"
    WON = "won"


@dataclass
class GameState:
    """Everything a renderer needs to draw one frame."""

    snake: Snake
    food: tuple[int, int] | None
    score: int = 0
    game_over: bool = False
    won: bool = False
    tick: int = 0


def advance(
    grid: Grid, snake: Snake, food: tuple[int, int] | None,
) -> Outcome:
    """Move *snake* one cell along its heading.

    Returns ``DIED`` without touching the snake when the new head leaves
    the grid or lands on a segment that stays occupied. The tail only
    counts as an obstacle when the snake is about to grow, because
    otherwise it vacates its cell on this same tick. Returns ``ATE`` when
    the head reaches *food* (the snake keeps its tail) and ``CONTINUE``
    otherwise.
    """
    new_head = snake.next_head()

    # --- boundary check ---
    if not grid.in_bounds(*new_head):
        return Outcome.DIED

    # --- self-collision check (look-ahead) ---
    will_grow = new_head == food
    if snake.collides(new_head, tail_vacates=not will_grow):
        return Outcome.DIED

    # --- move ---
    snake.move(grow=will_grow)
    return Outcome.ATE if will_grow else Outcome.CONTINUE


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the grid, the game state and the food spawner. Each
    call to :meth:`step` advances the game by one tick.
    """

    def __init__(
        self,
        grid: Grid | None = None,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = grid if grid is not None else Grid(
            width=self.config.grid_width, height=self.config.grid_height,
        )
        self.rng = np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(
            self.grid, rng=self.rng, max_attempts=self.config.spawn_attempts,
        )

        start_col, start_row = self.grid.center
        snake = Snake(
            start_col, start_row, Direction.RIGHT,
            length=self.config.initial_length,
        )
        self.state = GameState(
            snake=snake, food=self.food_spawner.spawn(snake.body),
        )
        self._pending_direction: Direction | None = None
        logger.info(
            "New game on a %dx%d grid, snake at %s, food at %s.",
            self.grid.width, self.grid.height, snake.head, self.state.food,
        )

    @property
    def snake(self) -> Snake:
        return self.state.snake

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def set_direction(self, direction: Direction) -> bool:
        """Buffer a heading change for the next step.

        A direct reversal of the current heading is rejected. A later
        legal change replaces an earlier one from the same tick. Returns
        whether the change was accepted.
        """
        if self.state.game_over or not self.snake.can_turn(direction):
            return False
        self._pending_direction = direction
        return True

    def step(self) -> Outcome | None:
        """Advance the game by one tick.

        Returns the tick's outcome, or ``None`` once the game has ended.
        """
        state = self.state
        if state.game_over:
            return None

        if self._pending_direction is not None:
            state.snake.set_direction(self._pending_direction)
            self._pending_direction = None

        outcome = advance(self.grid, state.snake, state.food)
        state.tick += 1

        if outcome is Outcome.DIED:
            state.game_over = True
            logger.info(
                "Snake died at tick %d with score %d.", state.tick, state.score,
            )
        elif outcome is Outcome.ATE:
            state.score += self.config.food_reward
            state.food = self.food_spawner.spawn(state.snake.body)
            if state.food is None:
                state.game_over = True
                state.won = True
                outcome = Outcome.WON
                logger.info(
                    "Board filled at tick %d with score %d.",
                    state.tick, state.score,
                )
        return outcome
