"""The walking enemy."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from plataformas.mario import Rect

WORLD_RIGHT_EDGE = 6000.0
WALK_SPEED = 30.0


@dataclass
class Goomba:
    """A 32x32 enemy that walks back and forth across the level."""

    x: float = 0.0
    y: float = 0.0
    current_frame: int = 0
    animation_timer: float = 0.0
    frame_speed: float = 0.2
    facing_right: bool = False
    active: bool = True
    hit_ground: bool = False
    speed: float = WALK_SPEED
    speed_y: float = 0.0
    position: Rect = field(init=False)
    initial_position: Rect = field(init=False)
    feet: Rect = field(init=False)
    head: Rect = field(init=False)
    right: Rect = field(init=False)
    left: Rect = field(init=False)

    def __post_init__(self) -> None:
        self.position = Rect(self.x, self.y, 32, 32)
        self.initial_position = replace(self.position)
        self._update_hitboxes()

    def reset(self) -> None:
        """Restore the state the goomba started with."""
        self.position = replace(self.initial_position)
        self.speed = WALK_SPEED
        self.facing_right = False
        self.active = True
        self.speed_y = 0.0
        self.current_frame = 0
        self.animation_timer = 0.0

    def update(self, delta: float) -> None:
        """Advance movement and animation by ``delta`` seconds."""
        if not self.active:
            return
        p = self.position
        p.x += (self.speed if self.facing_right else -self.speed) * delta
        p.y += self.speed_y * delta

        if p.x < 0:
            self.facing_right = True
        if p.x > WORLD_RIGHT_EDGE:
            self.facing_right = False

        self.animation_timer += delta
        if self.animation_timer >= self.frame_speed:
            self.current_frame = (self.current_frame + 1) % 2
            self.animation_timer = 0.0

        self._update_hitboxes()

    def _update_hitboxes(self) -> None:
        p = self.position
        self.feet = Rect(p.x + 6, p.bottom - 6, p.width - 12, 6)
        self.head = Rect(p.x + 6, p.y, p.width - 12, 6)
        self.left = Rect(p.x, p.y + 6, 6, p.height - 12)
        self.right = Rect(p.right - 6, p.y + 6, 6, p.height - 12)

    def source_rect(self) -> Rect:
        """The sprite-sheet region for the current frame, mirrored when facing left."""
        width = 16.0 if self.facing_right else -16.0
        return Rect(18.0 * self.current_frame, 16.0, width, 16.0)