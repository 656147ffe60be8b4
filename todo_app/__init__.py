"""Single-list to-do backend: task store plus a small JSON API."""

__version__ = "1.0.0"
