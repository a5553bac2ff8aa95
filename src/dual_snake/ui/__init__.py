"""Window and terminal front-ends.

The front-end modules are imported directly (``dual_snake.ui.pixel``,
``dual_snake.ui.text``) so that the terminal game never loads pygame.
"""

from dual_snake.ui.base import Frontend, FrontendError, Renderer

__all__ = [
    "Frontend",
    "FrontendError",
    "Renderer",
]
