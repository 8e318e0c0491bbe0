"""Utility helpers for output directory management."""

from .io import ensure_dirs, report_dirs

__all__ = ["ensure_dirs", "report_dirs"]
