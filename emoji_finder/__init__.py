# emoji_finder/__init__.py
"""Emoji Finder - type a keyword, get a ranked grid of matching emoji."""

from .finder import EmojiFinder

__all__ = ["EmojiFinder"]

__version__ = "0.1.0"
