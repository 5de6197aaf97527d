"""A tile game: collect every coin on a walled map, then reach the exit.

Includes map loading and checks, game state, an XPM image reader, X11
colour names, and a pygame display.
"""

__version__ = "0.1.0"