"""battmon - live terminal battery monitor."""

__version__ = "1.0.0"
