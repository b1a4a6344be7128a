"""Responsive grid layout designer engine."""

__version__ = "0.1.0"
