"""Retained-mode UI elements for pygame with flexbox layout, inheritable styles and themes."""

__version__ = "0.1.0"