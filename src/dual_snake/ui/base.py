"""Interfaces shared by the window and terminal front-ends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dual_snake.controls import Action
    from dual_snake.engine import GameState


class FrontendError(RuntimeError):
    """A front-end could not acquire its window or terminal."""


class Renderer(Protocol):
    """Draws a game state onto some surface. Must not mutate the state."""

    def draw(self, state: GameState) -> None: ...


class Frontend(Protocol):
    """Input source plus renderer, as consumed by the game loop."""

    def poll(self, timeout: float, game_over: bool) -> list[Action]:
        """Return the actions received within *timeout* seconds."""
        ...

    def draw(self, state: GameState) -> None: ...


def end_message(state: GameState) -> str:
    """Text shown once the game has ended."""
    if state.won:
        return "You Win! Press Q to quit"
    return "Game Over! Press Q to quit"
