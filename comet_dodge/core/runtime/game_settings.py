"""
game_settings.py
----------------
Centralized constants for the simulation, rendering and persistence.
"""


# ===========================================================
# Display
# ===========================================================

class Display:
    """Playfield and window configuration."""
    WIDTH: int = 480
    HEIGHT: int = 640
    FPS: int = 60
    CAPTION: str = "Comet Dodge"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing limits."""
    MAX_STEP: float = 0.033     # Largest dt a single tick may simulate


# ===========================================================
# Difficulty Scaling
# ===========================================================

class Difficulty:
    """Linear difficulty curve driven by elapsed session time."""
    SCORE_RATE: float = 10.0            # Points per second survived
    SPEED_RAMP_SECONDS: float = 18.0    # speed = 1 + time / SPEED_RAMP_SECONDS
    BASE_SPAWN_INTERVAL: float = 0.9
    MIN_SPAWN_INTERVAL: float = 0.35
    SPAWN_RAMP_SECONDS: float = 80.0    # interval = base - time / SPAWN_RAMP_SECONDS
    STARTING_LIVES: int = 3


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Ship dimensions and handling."""
    WIDTH: int = 26
    HEIGHT: int = 34
    BOTTOM_OFFSET: int = 70     # Distance from playfield bottom to ship centre
    ACCEL: float = 1800.0
    MAX_SPEED: float = 360.0
    DAMPING: float = 0.88       # Per-tick velocity decay with no input
    EDGE_MARGIN: int = 8


# ===========================================================
# Comets
# ===========================================================

class Comets:
    """Spawn ranges and cleanup margins."""
    MIN_RADIUS: float = 10.0
    RADIUS_RANGE: float = 14.0
    MIN_SPEED: float = 160.0
    SPEED_RANGE: float = 120.0
    SPEED_PER_MULTIPLIER: float = 25.0
    SPAWN_GAP: float = 10.0         # Spawn this far above the top edge
    CLEANUP_MARGIN: float = 40.0    # Removed once fully this far below the bottom


# ===========================================================
# Background Stars
# ===========================================================

class Stars:
    """Parallax star field."""
    COUNT: int = 80
    MIN_RADIUS: float = 0.4
    RADIUS_RANGE: float = 1.6
    MIN_SPEED: float = 20.0
    SPEED_RANGE: float = 20.0
    BASE_PARALLAX: float = 0.6
    PARALLAX_PER_MULTIPLIER: float = 0.2
    WRAP_MARGIN: float = 10.0


# ===========================================================
# Input Configuration
# ===========================================================

class Input:
    """Key identifier aliases for steering."""
    LEFT_KEYS = frozenset({"ArrowLeft", "a", "A"})
    RIGHT_KEYS = frozenset({"ArrowRight", "d", "D"})


# ===========================================================
# Persistence
# ===========================================================

class Persistence:
    """Best score storage."""
    BEST_KEY: str = "comet-best"
    DEFAULT_PATH: str = "comet_best.json"


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Palette used by the renderer and HUD."""
    BACKGROUND = (8, 17, 36)
    STAR = (255, 255, 255, 178)
    SHIP = (64, 224, 255)
    SHIP_GLOW = (64, 224, 255, 48)
    FLAME = (255, 180, 84)
    COMET_CORE = (255, 214, 161)
    COMET_EDGE = (255, 122, 89)
    HUD_TEXT = (230, 238, 255)
    PANEL = (12, 24, 48, 220)
    PANEL_BORDER = (64, 224, 255)
    BUTTON = (64, 224, 255)
    BUTTON_HOVER = (120, 236, 255)
    BUTTON_TEXT = (8, 17, 36)
