"""snek: a turn-paced grid snake simulation with a thin pygame front-end."""
__version__ = "0.1.0"
