"""GTKTerm configuration persistence and validation."""

__version__ = "2.0.0"
