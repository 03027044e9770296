"""Smart ToDo - a terminal task manager with live filtering and search."""

__version__ = "1.0.0"
