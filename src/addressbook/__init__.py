"""Contact book with descriptor-based partial updates and undo history."""

__version__ = "0.1.0"
