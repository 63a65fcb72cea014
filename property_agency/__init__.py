"""In-memory real-estate agency portfolio and query engine."""

__version__ = "0.1.0"
