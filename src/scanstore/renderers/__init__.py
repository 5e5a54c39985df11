"""Output renderers."""

from .console import render_listing

__all__ = ["render_listing"]
