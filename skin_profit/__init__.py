"""Skin resale profit calculator"""

__version__ = "0.1.0"
