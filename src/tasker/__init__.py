# src/tasker/__init__.py

"""Personal task tracker CLI backed by MongoDB."""

__version__ = "0.1.0"
