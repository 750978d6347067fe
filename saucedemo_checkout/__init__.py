"""Page-object checkout suite for the Sauce Demo store."""

__version__ = "1.0.0"
