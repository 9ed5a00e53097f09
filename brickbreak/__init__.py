"""A brick-breaker arcade game with power-ups, difficulty levels and a pygame front end."""

__version__ = "1.0.0"