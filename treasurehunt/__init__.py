"""A tile-based treasure hunt: map loading, validation, game rules and a pygame window."""

__version__ = "1.0.0"