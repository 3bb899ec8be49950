"""Board presets, AI tuning and presentation constants for NexusGrid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class NexusBoardSpec:
    """Configuration for a fresh NexusGrid board."""

    rows: int
    cols: int
    blocker_fraction: float


@dataclass(frozen=True)
class AIWeights:
    """Weights of the one-ply move heuristic."""

    own_cluster: float
    opponent_gain: float
    proximity: float
    proximity_reach_radii: float


NEXUS_BOARD_STANDARD: Final[NexusBoardSpec] = NexusBoardSpec(
    rows=8,
    cols=8,
    blocker_fraction=0.20,
)

AI_WEIGHTS_STANDARD: Final[AIWeights] = AIWeights(
    own_cluster=1.5,
    opponent_gain=1.2,
    proximity=0.1,
    proximity_reach_radii=5.0,
)

# Players
PLAYER_HUMAN: Final[int] = 0
PLAYER_CPU: Final[int] = 1

# Grid geometry (board-space units)
HEX_RADIUS: Final[float] = 40.0
ADJACENCY_DISTANCE_FACTOR: Final[float] = 1.9

# Window
WINDOW_TITLE: Final[str] = "NexusGrid"
SCREEN_WIDTH: Final[int] = 1024
SCREEN_HEIGHT: Final[int] = 768
TOP_BAR_HEIGHT: Final[int] = 60
BOARD_VIEW_WIDTH_SCALE: Final[float] = 0.9
BOARD_VIEW_HEIGHT_SCALE: Final[float] = 0.8
BOARD_FIT_SCALE: Final[float] = 0.95
FPS: Final[int] = 60

# Timing
CPU_MOVE_DELAY_SECONDS: Final[float] = 0.5

# Colours (RGB). Player colours double as the board's owner tags.
COLOR_PLAYER_HUMAN: Final[tuple[int, int, int]] = (255, 0, 0)
COLOR_PLAYER_CPU: Final[tuple[int, int, int]] = (0, 0, 255)
PLAYER_COLORS: Final[tuple[tuple[int, int, int], tuple[int, int, int]]] = (
    COLOR_PLAYER_HUMAN,
    COLOR_PLAYER_CPU,
)
COLOR_BACKGROUND: Final[tuple[int, int, int]] = (0, 0, 0)
COLOR_EMPTY_OUTLINE: Final[tuple[int, int, int]] = (170, 170, 170)
COLOR_BLOCKER: Final[tuple[int, int, int]] = (128, 128, 128)
COLOR_BAR: Final[tuple[int, int, int]] = (51, 51, 51)
COLOR_TEXT: Final[tuple[int, int, int]] = (255, 255, 255)
COLOR_TITLE: Final[tuple[int, int, int]] = (0, 255, 0)
COLOR_BUTTON: Final[tuple[int, int, int]] = (0, 128, 0)

# Rendering
UI_GRID_LINE_WIDTH_PX: Final[int] = 2
UI_SELECTED_LINE_WIDTH_PX: Final[int] = 4
UI_EMPTY_OUTLINE_ALPHA: Final[int] = 178
UI_POWER_NODE_INNER_SCALE: Final[float] = 0.45
FONT_NAME: Final[str] = "Arial"
FONT_SIZE_TITLE: Final[int] = 64
FONT_SIZE_BODY: Final[int] = 20
FONT_SIZE_BAR: Final[int] = 24
FONT_SIZE_BUTTON: Final[int] = 32
FONT_SIZE_RESULT: Final[int] = 48

MENU_INSTRUCTIONS: Final[str] = (
    "Goal: Create the largest cluster of connected hexagons.\n"
    "Click empty hexagons to claim them for your color.\n"
    "The game ends when all non-blocker hexagons are filled."
)

__all__ = [
    "NexusBoardSpec",
    "AIWeights",
    "NEXUS_BOARD_STANDARD",
    "AI_WEIGHTS_STANDARD",
    "PLAYER_HUMAN",
    "PLAYER_CPU",
    "HEX_RADIUS",
    "ADJACENCY_DISTANCE_FACTOR",
    "WINDOW_TITLE",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "TOP_BAR_HEIGHT",
    "BOARD_VIEW_WIDTH_SCALE",
    "BOARD_VIEW_HEIGHT_SCALE",
    "BOARD_FIT_SCALE",
    "FPS",
    "CPU_MOVE_DELAY_SECONDS",
    "COLOR_PLAYER_HUMAN",
    "COLOR_PLAYER_CPU",
    "PLAYER_COLORS",
    "COLOR_BACKGROUND",
    "COLOR_EMPTY_OUTLINE",
    "COLOR_BLOCKER",
    "COLOR_BAR",
    "COLOR_TEXT",
    "COLOR_TITLE",
    "COLOR_BUTTON",
    "UI_GRID_LINE_WIDTH_PX",
    "UI_SELECTED_LINE_WIDTH_PX",
    "UI_EMPTY_OUTLINE_ALPHA",
    "UI_POWER_NODE_INNER_SCALE",
    "FONT_NAME",
    "FONT_SIZE_TITLE",
    "FONT_SIZE_BODY",
    "FONT_SIZE_BAR",
    "FONT_SIZE_BUTTON",
    "FONT_SIZE_RESULT",
    "MENU_INSTRUCTIONS",
]
