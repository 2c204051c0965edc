"""Game-state logic for a side-scrolling platformer: player, enemy and resource lookup."""

__version__ = "0.1.0"
__all__ = ["mario", "goomba", "resources"]