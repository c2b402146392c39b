"""A tile-based puzzle game: collect every key, then reach the door.

Includes map loading and validation, reachability checks, game logic,
a pygame front end and small text and buffer helpers.
"""

__version__ = "1.0.0"