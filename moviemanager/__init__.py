"""Movie and director models with genre-specific scoring and reports."""

__version__ = "0.1.0"
__all__ = ["dates", "people", "movie", "action", "animation", "scifi"]