"""Treasury yield and mortgage rate dashboard."""

__version__ = "0.1.0"
