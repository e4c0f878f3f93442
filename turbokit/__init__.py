"""Game runtime helpers: randomness, keyboard input, base64 encoding and program data types."""

__version__ = "5.1.0"
__all__ = ["client", "encoding", "keyboard", "keycodes", "random"]