"""Game logic for a side-scrolling platformer: geometry, collision, SVG outlines, sprites, camera, items and the avatar."""

__version__ = "0.1.0"