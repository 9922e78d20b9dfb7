"""Command line interface for box plan configuration."""
