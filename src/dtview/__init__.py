"""Project task and asset viewer."""

__version__ = "0.1.0"
