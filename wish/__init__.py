"""wish: a small Unix shell with parallel commands and output redirection."""

__version__ = "1.0.0"
