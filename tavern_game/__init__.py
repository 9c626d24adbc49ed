"""A windowless tavern cooking simulation on a minimal entity-component world."""

__version__ = "0.1.0"