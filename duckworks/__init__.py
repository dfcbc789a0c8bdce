"""Rubber duck sighting readers (CSV, JSON, free text) and small numerical kernels."""

__version__ = "1.0.0"