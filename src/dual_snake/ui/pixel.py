"""Pygame window front-end."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from dual_snake.controls import Action, Command, KeyMap
from dual_snake.snake import Direction
from dual_snake.ui.base import FrontendError, Renderer, end_message

if TYPE_CHECKING:
    from dual_snake.config import GameConfig
    from dual_snake.engine import GameState

logger = logging.getLogger(__name__)

_SCORE_POS = (10, 10)

WINDOW_KEYS = KeyMap(
    directions={
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    },
    quit_keys=frozenset({pygame.K_ESCAPE}),
    end_quit_keys=frozenset({pygame.K_q}),
)


class PixelRenderer:
    """Draws the game as filled cells plus rasterised text on a surface."""

    def __init__(
        self, surface: pygame.Surface, font: pygame.font.Font, config: GameConfig,
    ) -> None:
        self.surface = surface
        self.font = font
        self.config = config

    def _cell_rect(self, col: int, row: int) -> pygame.Rect:
        size = self.config.cell_size
        return pygame.Rect(col * size, row * size, size, size)

    def draw(self, state: GameState) -> None:
        """Paint *state* onto the surface without presenting it."""
        palette = self.config.palette
        self.surface.fill(palette.background)

        for col, row in state.snake.body:
            pygame.draw.rect(self.surface, palette.snake, self._cell_rect(col, row))

        if state.food is not None:
            pygame.draw.rect(self.surface, palette.food, self._cell_rect(*state.food))

        score = self.font.render(f"Score: {state.score}", True, palette.text)
        self.surface.blit(score, _SCORE_POS)

        if state.game_over:
            text = self.font.render(end_message(state), True, palette.text)
            rect = text.get_rect(center=self.surface.get_rect().center)
            self.surface.blit(text, rect)


class WindowFrontend:
    """Owns the pygame display, its event queue and the frame clock."""

    def __init__(self, config: GameConfig, keymap: KeyMap = WINDOW_KEYS) -> None:
        self.config = config
        self.keymap = keymap
        try:
            pygame.init()
            surface = pygame.display.set_mode(config.window_size)
            pygame.display.set_caption(config.title)
            font = pygame.font.Font(None, config.font_size)
        except pygame.error as exc:
            pygame.quit()
            raise FrontendError(f"Cannot open game window: {exc}") from exc
        self.renderer: Renderer = PixelRenderer(surface, font, config)
        self.clock = pygame.time.Clock()
        logger.info("Opened %dx%d window.", *config.window_size)

    def __enter__(self) -> WindowFrontend:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def poll(self, timeout: float, game_over: bool) -> list[Action]:
        """Drain the event queue without blocking; frames are paced in :meth:`draw`."""
        actions: list[Action] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                actions.append(Command.QUIT)
            elif event.type == pygame.KEYDOWN:
                action = self.keymap.translate(event.key, game_over)
                if action is not None:
                    actions.append(action)
        return actions

    def draw(self, state: GameState) -> None:
        """Render, present the frame and wait out the frame budget."""
        self.renderer.draw(state)
        pygame.display.flip()
        self.clock.tick(self.config.frame_rate)

    def close(self) -> None:
        pygame.quit()
