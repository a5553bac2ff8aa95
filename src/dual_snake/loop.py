"""Fixed-tick run loop shared by both front-ends."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from dual_snake.controls import Command

if TYPE_CHECKING:
    from dual_snake.engine import GameEngine, GameState
    from dual_snake.ui.base import Frontend

logger = logging.getLogger(__name__)


class GameLoop:
    """Drives a :class:`GameEngine` through a :class:`Frontend`.

    Every iteration polls input for at most the time left until the next
    tick, applies heading changes, advances the engine once the tick
    interval has elapsed, and redraws. Rendering happens on every
    iteration, so the end screen stays up until the player quits.
    """

    def __init__(
        self,
        engine: GameEngine,
        frontend: Frontend,
        tick_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.engine = engine
        self.frontend = frontend
        self.tick_seconds = (
            tick_seconds if tick_seconds is not None
            else engine.config.tick_seconds
        )
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive.")
        self._clock = clock

    def run(self) -> GameState:
        """Play until the player quits and return the final state."""
        state = self.engine.state
        last_update = self._clock()

        while True:
            if state.game_over:
                timeout = self.tick_seconds
            else:
                elapsed = self._clock() - last_update
                timeout = max(0.0, self.tick_seconds - elapsed)
            for action in self.frontend.poll(timeout, state.game_over):
                if action is Command.QUIT:
                    logger.info(
                        "Quit after %d ticks with score %d.",
                        state.tick, state.score,
                    )
                    return state
                self.engine.set_direction(action)

            now = self._clock()
            if not state.game_over and now - last_update >= self.tick_seconds:
                self.engine.step()
                last_update = now

            self.frontend.draw(state)
