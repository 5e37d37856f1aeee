"""Turn-based auto-battle resolution engine."""

__version__ = "0.1.0"
