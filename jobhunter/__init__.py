"""Job posting discovery and pass/fail filtering."""

__version__ = "0.1.0"
