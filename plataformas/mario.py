"""The player character: position, hitboxes and power-up state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto


@dataclass
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, other: Rect) -> bool:
        """True if ``other`` lies entirely inside this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


class Power(IntEnum):
    BASE = 0
    SETA = 1
    FLOR = 2
    ESTRELLA = 3


class MarioState(Enum):
    NORMAL = auto()
    TRANSFORMANDOSE = auto()
    TOCANDO_BANDERA = auto()
    BAJANDO_BANDERA = auto()
    CAMINANDO_CASTILLO = auto()
    LEVEL_COMPLETED = auto()


TRANSFORM_SEQUENCE = (0, 18, 0, 18, 0, 18, 36, 0, 18, 36)
INVERSE_TRANSFORM_SEQUENCE = (36, 18, 0, 36, 18, 0, 18, 0, 18, 0)


@dataclass
class Mario:
    """The player, 32x32, with four edge hitboxes used for collisions."""

    x: float = 0.0
    y: float = 0.0
    state: MarioState = MarioState.NORMAL
    has_played_die_sound: bool = False
    facing_right: bool = True
    sprite_status: int = 0
    transform_status: int = 0
    transform_timer: int = 0
    transform_sequence: tuple[int, ...] = TRANSFORM_SEQUENCE
    inverse_transform_sequence: tuple[int, ...] = INVERSE_TRANSFORM_SEQUENCE
    can_jump: bool = True
    is_jumping: bool = False
    jump_time: float = 0.0
    max_jump_time: float = 0.25
    speed: float = 0.0
    speed_x: float = 0.0
    anim_timer: float = 0.0
    power: Power = Power.BASE
    is_dead: bool = False
    death_animation_in_progress: bool = False
    death_velocity: float = -350.0
    death_anim_timer: float = 0.0
    position: Rect = field(init=False)
    feet: Rect = field(init=False)
    head: Rect = field(init=False)
    right: Rect = field(init=False)
    left: Rect = field(init=False)

    def __post_init__(self) -> None:
        x, y = self.x, self.y
        self.position = Rect(x, y, 32, 32)
        self.feet = Rect(x + 4, y + 30, 24, 1)
        self.head = Rect(x + 4, y, 24, 1)
        self.right = Rect(x + 30, y + 4, 1, 24)
        self.left = Rect(x, y + 4, 1, 24)

    def set_x(self, distance: float) -> None:
        self.position.x = distance
        self.update_hitboxes()

    def set_y(self, distance: float) -> None:
        self.position.y = distance
        self.update_hitboxes()

    def move_x(self, distance: float) -> None:
        self.position.x += distance
        self.update_hitboxes()

    def move_y(self, distance: float) -> None:
        self.position.y += distance
        self.update_hitboxes()

    def update_hitboxes(self) -> None:
        """Recompute the edge hitboxes from the current position and power."""
        p = self.position
        self.feet = Rect(p.x + 4, p.bottom - 4, p.width - 8, 4)
        self.head = Rect(p.x + 4, p.y, p.width - 8, 4)
        inset = 6 if self.power == Power.SETA else 4
        self.left = Rect(p.x, p.y + inset, 4, p.height - 2 * inset)
        self.right = Rect(p.right - 4, p.y + inset, 4, p.height - 2 * inset)