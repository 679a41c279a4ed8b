"""Gameplay constants shared across the simulation modules."""

CANVAS_WIDTH: int = 800
CANVAS_HEIGHT: int = 600
FPS: int = 60

GRAVITY: float = 0.05
FRICTION: float = 0.95
BOUNCE: float = 0.8
TILT_FORCE: float = 0.8
MAX_SPEED: float = 4.0

NORMAL_SPEED: float = 1.0
AFFLICTED_SPEED: float = 0.5

SNAKE_RADIUS: float = 15.0
TAIL_RADIUS_FACTOR: float = 0.8
SEGMENT_DISTANCE: float = 30.0
SELF_COLLISION_SKIP: int = 3
SEGMENTS_PER_LEVEL: int = 5

KEY_TILT: float = 0.8
TILT_DECAY: float = 0.85
ORIENTATION_RANGE: float = 30.0

FOOD_RADIUS: float = 25.0
SICK_RADIUS: float = 20.0
REMEDY_RADIUS: float = 15.0
REMEDY_POINTS: int = 10
MIN_FOOD_ON_BOARD: int = 2

SPAWN_MARGIN: float = 100.0
DOUBLE_SPAWN_CHANCE: float = 0.5
FRUIT_BIAS: float = 0.6
SICK_CHANCE: float = 0.2

EAT_FRAMES: int = 20
OUCH_FRAMES: int = 25
SICK_FRAMES: int = 30
CELEBRATION_FRAMES: int = 60
