"""Tests for the pygame renderer and window front-end."""

import pygame
import pytest

from dual_snake.config import GameConfig
from dual_snake.controls import Command
from dual_snake.engine import GameState
from dual_snake.snake import Direction, Snake
from dual_snake.ui.base import FrontendError
from dual_snake.ui.pixel import PixelRenderer, WindowFrontend

GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def renderer():
    pygame.font.init()
    config = GameConfig()
    surface = pygame.Surface(config.window_size)
    font = pygame.font.Font(None, config.font_size)
    yield PixelRenderer(surface, font, config)
    pygame.font.quit()


def _state(**kwargs):
    snake = Snake(15, 10, Direction.RIGHT, length=3)
    return GameState(snake=snake, food=(28, 18), **kwargs)


def _bright_pixels(surface, rect):
    count = 0
    for x in range(rect.left, rect.right):
        for y in range(rect.top, rect.bottom):
            r, g, b, _ = surface.get_at((x, y))
            if r > 200 and g > 200 and b > 200:
                count += 1
    return count


class TestPixelRenderer:
    def test_snake_cells_filled(self, renderer):
        renderer.draw(_state())
        for col in (13, 14, 15):
            assert renderer.surface.get_at((col * 20 + 5, 10 * 20 + 5))[:3] == GREEN

    def test_food_cell_filled(self, renderer):
        renderer.draw(_state())
        assert renderer.surface.get_at((28 * 20 + 10, 18 * 20 + 10))[:3] == RED

    def test_background_cleared(self, renderer):
        renderer.surface.fill((10, 20, 30))
        renderer.draw(_state())
        assert renderer.surface.get_at((100, 300))[:3] == BLACK

    def test_no_food_after_win(self, renderer):
        renderer.draw(GameState(
            snake=Snake(15, 10), food=None, game_over=True, won=True,
        ))
        assert renderer.surface.get_at((28 * 20 + 10, 18 * 20 + 10))[:3] == BLACK

    def test_score_text_drawn(self, renderer):
        renderer.draw(_state(score=30))
        assert _bright_pixels(renderer.surface, pygame.Rect(10, 10, 120, 24)) > 0

    def test_game_over_message_centered(self, renderer):
        band = pygame.Rect(150, 185, 300, 30)
        renderer.draw(_state())
        before = _bright_pixels(renderer.surface, band)
        renderer.draw(_state(game_over=True))
        assert _bright_pixels(renderer.surface, band) > before

    def test_does_not_mutate_state(self, renderer):
        state = _state(score=20)
        body = list(state.snake.body)
        renderer.draw(state)
        assert list(state.snake.body) == body
        assert state.food == (28, 18)
        assert state.score == 20


class TestWindowFrontend:
    def test_poll_translates_events(self):
        with WindowFrontend(GameConfig()) as frontend:
            pygame.event.clear()
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
            assert frontend.poll(0.0, game_over=False) == [Direction.UP]

    def test_close_event_quits(self):
        with WindowFrontend(GameConfig()) as frontend:
            pygame.event.clear()
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            assert frontend.poll(0.0, game_over=False) == [Command.QUIT]

    def test_q_quits_end_screen(self):
        with WindowFrontend(GameConfig()) as frontend:
            pygame.event.clear()
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
            assert frontend.poll(0.0, game_over=True) == [Command.QUIT]

    def test_draw_presents_frame(self):
        with WindowFrontend(GameConfig()) as frontend:
            frontend.draw(_state())
            assert frontend.renderer.surface.get_at((15 * 20 + 5, 205))[:3] == GREEN

    def test_display_failure_is_fatal(self, monkeypatch):
        def fail(*args, **kwargs):
            raise pygame.error("no display")

        monkeypatch.setattr(pygame.display, "set_mode", fail)
        with pytest.raises(FrontendError, match="no display"):
            WindowFrontend(GameConfig())
