"""Runnable examples of decorator, adapter, command, facade, observer and strategy patterns."""

__version__ = "0.1.0"