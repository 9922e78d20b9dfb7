"""Box plan configuration for laser-cut enclosures."""

__version__ = "0.1.0"
