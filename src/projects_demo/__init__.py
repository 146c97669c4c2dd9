"""Projects Demo: project catalogue API and word-frequency ranking."""

__version__ = "0.1.0"
