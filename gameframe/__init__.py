"""Building blocks for grid-based puzzle games: vectors, matrices, quaternions, collision tests, easing, text scanning, timing, resource caching, layered modes, animation, tile maps and game objects."""

__version__ = "0.1.0"