"""Foldout template rendering (Principle: Reproducibility).

This module provides Jinja2-based template rendering with deterministic output.
Templates are designed to produce identical output for identical input.
"""

from foldout.templates.renderer import DocumentRenderer

__all__ = ["DocumentRenderer"]
