"""A side-scrolling platformer: run, jump and keep away from the fanatic."""

__version__ = "0.1.0"
__all__ = ["__version__"]