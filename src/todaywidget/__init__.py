"""Today widget: presentation rules for a home-screen task list."""

__version__ = "0.1.0"
