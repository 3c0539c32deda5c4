"""Employee record store: JSON-file engine and descriptor-driven REST API."""

__version__ = "0.1.0"
