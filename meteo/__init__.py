"""MeteoSchweiz forecast normalization."""

__version__ = "0.1.0"
