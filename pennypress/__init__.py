"""
PennyPress Backend

A FastAPI backend for the PennyPress pay-per-article reader.
Provides article browsing, category and keyword filtering, and comments.
"""

__version__ = "1.0.0"
