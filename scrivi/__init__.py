"""Data model, JSON formats and file and text utilities for Scrivi writing projects."""

__version__ = "0.1.0"