"""Actions and the key maps that translate raw key codes into them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from dual_snake.snake import Direction


class Command(enum.Enum):
    """Non-steering actions."""

    QUIT = "quit"


Action = Direction | Command


@dataclass(frozen=True)
class KeyMap:
    """Maps key codes to headings and quit commands.

    ``quit_keys`` work at any time; ``end_quit_keys`` only once the game
    is over. Each front-end builds its own map from its key constants.
    """

    directions: dict[int, Direction]
    quit_keys: frozenset[int] = field(default_factory=frozenset)
    end_quit_keys: frozenset[int] = field(default_factory=frozenset)

    def translate(self, key: int, game_over: bool = False) -> Action | None:
        """Return the action bound to *key*, or ``None`` if it has none."""
        if key in self.quit_keys:
            return Command.QUIT
        if game_over:
            return Command.QUIT if key in self.end_quit_keys else None
        return self.directions.get(key)
