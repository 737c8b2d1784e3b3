"""Task records and ordering, SQLite account sessions and a singleton metaclass for a memo assistant."""

__version__ = "0.1.0"
__all__ = ["models", "singleton", "accounts"]