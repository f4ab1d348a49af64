"""ventureboard - staged business checklists with health scoring."""

__version__ = "0.1.0"
