"""Printf-style formatting to bytes with flags, width, precision and length modifiers."""

__version__ = "0.1.0"
__all__ = ["encoding", "values", "spec", "padding", "handlers", "printer"]