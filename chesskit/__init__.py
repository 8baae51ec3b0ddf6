"""Chess value types with parsing, formatting and pseudo-legal move generation."""

__version__ = "1.0.0"