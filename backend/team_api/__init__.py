"""Team Project API: a two-endpoint JSON service."""

__version__ = "1.0.0"
