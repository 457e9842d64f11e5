"""Providers bundled with the package."""

from .hello import HelloOptions, HelloWork, HelloWorkProvider

__all__ = ["HelloOptions", "HelloWork", "HelloWorkProvider"]
