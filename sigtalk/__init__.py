"""Send text between processes one bit at a time using the user signals."""

__version__ = "0.1.0"

__all__ = ["client", "fmt", "protocol", "server"]