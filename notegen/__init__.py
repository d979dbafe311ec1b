"""Generate dated markdown notes from templates."""

__version__ = "0.1.0"
