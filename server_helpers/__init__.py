"""Backend helper functions shared by request handlers and migrations."""

__version__ = "0.1.0"
