"""Discography - album and track catalog API."""
__version__ = "1.0.0"
