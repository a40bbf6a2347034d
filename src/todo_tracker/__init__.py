"""Single-user, in-memory task tracker driven by a numbered console menu."""

__version__ = "0.1.0"
