# src/bibi/__init__.py

"""bibi: a small text-command task manager."""

__version__ = "0.1.0"
