"""Fixed game configuration shared by both front-ends."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """RGB colours used by the pixel renderer."""

    background: Color = (0, 0, 0)
    snake: Color = (0, 255, 0)
    food: Color = (255, 0, 0)
    text: Color = (255, 255, 255)


@dataclass(frozen=True)
class Glyphs:
    """Characters used by the terminal renderer."""

    wall: str = "#"
    snake: str = "O"
    food: str = "*"


@dataclass(frozen=True)
class GameConfig:
    """Game constants. Fixed at launch; the grid size is not user-tunable."""

    # Board
    grid_width: int = 30
    grid_height: int = 20
    initial_length: int = 1

    # Simulation
    tick_ms: int = 100
    food_reward: int = 10
    spawn_attempts: int = 32

    # Window front-end
    cell_size: int = 20
    font_size: int = 24
    frame_rate: int = 60
    title: str = "Snake Game"
    palette: Palette = field(default_factory=Palette)

    # Terminal front-end
    glyphs: Glyphs = field(default_factory=Glyphs)

    @property
    def window_size(self) -> tuple[int, int]:
        """Window dimensions in pixels."""
        return self.grid_width * self.cell_size, self.grid_height * self.cell_size

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples stay tuples)."""
        return asdict(self)
