"""Download a single file over HTTP with a progress bar."""

__version__ = "0.1.0"
