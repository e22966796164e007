"""Turn-based combat and status-effect resolution engine."""

__version__ = "0.1.0"
