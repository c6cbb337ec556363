"""Foldout rendering helpers.

Jinja2 filters shared by the package templates.
"""

from foldout.renderers.filters import (
    assign_anchors,
    block_markdown,
    code_fence,
    language_class,
    link_text,
    prose_to_html,
    section_markdown,
    slugify,
)

__all__ = [
    "assign_anchors",
    "block_markdown",
    "code_fence",
    "language_class",
    "link_text",
    "prose_to_html",
    "section_markdown",
    "slugify",
]
