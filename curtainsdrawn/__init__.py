"""A terminal horror game played from an animatronic interfacing console."""

__version__ = "0.1.0"
__all__ = ["__version__"]