"""A small interactive command shell with built-in commands and &&, || and ; chaining."""

__version__ = "0.1.0"
__all__ = ["parser", "internal", "external", "executor", "shell"]