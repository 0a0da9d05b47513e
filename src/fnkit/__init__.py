"""fnkit — functional helpers and validation combinators."""

__version__ = "0.1.0"
