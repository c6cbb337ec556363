"""Foldout - Collapsible Section Documentation Renderer.

Foldout turns documentation written as an ordered list of titled,
collapsible sections into a navigable document: expandable HTML, Markdown
with a table of contents, or a bare table of contents.

Core principles:
- Order Preservation: Sections and blocks keep their source order
- Verbatim Code: Code samples are inert text, never modified or executed
- Reproducibility: Same input produces byte-identical output
- CI/CD Compatibility: No interactive prompts, meaningful exit codes
"""

__version__ = "0.1.0"
__author__ = "Foldout Contributors"
