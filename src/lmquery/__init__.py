"""Ask a locally hosted language model a question, optionally with context."""

__version__ = "0.1.0"
