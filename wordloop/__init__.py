"""Arrange Russian words into a closed chain of matching last and first letters."""

__version__ = "0.1.0"
__all__ = ["__version__"]