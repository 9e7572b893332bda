"""Print the current weather of a random world capital every few seconds."""

__version__ = "0.1.0"
