"""Data records of the website core."""

from .website import Website

__all__ = ["Website"]
