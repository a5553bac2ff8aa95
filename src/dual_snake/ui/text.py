"""Curses terminal front-end."""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from dual_snake.controls import Action, KeyMap
from dual_snake.grid import Grid
from dual_snake.snake import Direction
from dual_snake.ui.base import FrontendError, Renderer, end_message

if TYPE_CHECKING:
    from dual_snake.config import GameConfig, Glyphs
    from dual_snake.engine import GameState

logger = logging.getLogger(__name__)

TERMINAL_KEYS = KeyMap(
    directions={
        curses.KEY_UP: Direction.UP,
        curses.KEY_DOWN: Direction.DOWN,
        curses.KEY_LEFT: Direction.LEFT,
        curses.KEY_RIGHT: Direction.RIGHT,
    },
    quit_keys=frozenset({ord("q"), ord("Q")}),
)


class TextRenderer:
    """Redraws the whole board as characters on a curses window.

    The grid spans the full window; its outer ring holds the wall frame.
    """

    def __init__(self, window: curses.window, grid: Grid, glyphs: Glyphs) -> None:
        self.window = window
        self.grid = grid
        self.glyphs = glyphs

    def _put(self, row: int, col: int, text: str) -> None:
        # addstr on the last row would advance the cursor past the
        # bottom-right corner and raise; insstr leaves the cursor alone.
        if row == self.grid.height - 1:
            self.window.insstr(row, col, text)
        else:
            self.window.addstr(row, col, text)

    def _draw_border(self) -> None:
        width, height = self.grid.width, self.grid.height
        wall = self.glyphs.wall
        self._put(0, 0, wall * width)
        for row in range(1, height - 1):
            self._put(row, 0, wall)
            self._put(row, width - 1, wall)
        self._put(height - 1, 0, wall * width)

    def draw(self, state: GameState) -> None:
        """Erase the window and redraw the whole board."""
        self.window.erase()
        self._draw_border()

        for col, row in state.snake.body:
            self._put(row, col, self.glyphs.snake)
        if state.food is not None:
            col, row = state.food
            self._put(row, col, self.glyphs.food)

        label = f" Score: {state.score} "
        self._put(0, 2, label[: max(0, self.grid.width - 4)])

        if state.game_over:
            message = end_message(state)[: self.grid.width - 2]
            row = self.grid.height // 2
            col = max(1, (self.grid.width - len(message)) // 2)
            self._put(row, col, message)

        self.window.refresh()


class TerminalFrontend:
    """Reads keys from and draws to a curses window."""

    def __init__(
        self,
        window: curses.window,
        grid: Grid,
        config: GameConfig,
        keymap: KeyMap = TERMINAL_KEYS,
    ) -> None:
        self.window = window
        self.grid = grid
        self.keymap = keymap
        self.renderer: Renderer = TextRenderer(window, grid, config.glyphs)

    @classmethod
    def open(cls, window: curses.window, config: GameConfig) -> TerminalFrontend:
        """Put the terminal into raw mode and size the grid to the window."""
        try:
            curses.raw()
            curses.noecho()
            curses.curs_set(0)
            window.keypad(True)
            rows, cols = window.getmaxyx()
            grid = Grid(width=cols, height=rows, inset=1)
        except (curses.error, ValueError) as exc:
            raise FrontendError(f"Cannot set up terminal: {exc}") from exc
        logger.info("Terminal grid is %dx%d.", cols, rows)
        return cls(window, grid, config)

    def poll(self, timeout: float, game_over: bool) -> list[Action]:
        """Block up to *timeout* seconds for a key, then drain the rest."""
        actions: list[Action] = []
        self.window.timeout(int(timeout * 1000))
        key = self.window.getch()
        while key != -1:
            action = self.keymap.translate(key, game_over)
            if action is not None:
                actions.append(action)
            self.window.timeout(0)
            key = self.window.getch()
        return actions

    def draw(self, state: GameState) -> None:
        """Delegate to the text renderer."""
        self.renderer.draw(state)
