"""Content model, validation and editing core for the quiz admin dashboard."""

__version__ = "0.1.0"
