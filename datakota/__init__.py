"""Register of cities and their residents, with an interactive terminal menu."""

__version__ = "0.1.0"
__all__ = ["registry", "cli"]