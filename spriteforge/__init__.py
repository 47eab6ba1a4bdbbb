"""Component-based 2D game engine on pygame with XML scenes, input actions and animation graphs."""

__version__ = "1.0.0"