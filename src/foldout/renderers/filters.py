"""Jinja2 filters for rendering sections.

This module provides the helpers templates use to turn sections into
navigable output: anchors for the table of contents, prose conversion for
HTML, and fence selection that keeps code samples verbatim in Markdown.
"""

import re

import markdown
from markupsafe import Markup

from foldout.models.section import Block, CodeBlock, DocumentSection
from foldout.parsers.blocks import closes_fence

# Python-Markdown extensions used for prose in HTML output
MARKDOWN_EXTENSIONS: list[str] = ["tables", "sane_lists"]

_SLUG_STRIP_RE = re.compile(r"[^\w\s-]", re.UNICODE)
_SLUG_SPACE_RE = re.compile(r"[\s_-]+")
_CLASS_UNSAFE_RE = re.compile(r"""[\s'"<>&=`]+""")


def slugify(title: str) -> str:
    """Convert a section title into an anchor slug.

    Args:
        title: Section title

    Returns:
        Lowercase slug of word characters and hyphens ("section" if empty)

    Examples:
        >>> slugify("Law of Demeter")
        'law-of-demeter'
        >>> slugify("SOLID: Single Responsibility")
        'solid-single-responsibility'
    """
    slug = _SLUG_STRIP_RE.sub("", title.lower())
    slug = _SLUG_SPACE_RE.sub("-", slug).strip("-")
    return slug or "section"


def assign_anchors(sections: list[DocumentSection]) -> list[str]:
    """Assign unique anchors to sections in order.

    Duplicate slugs get -1, -2, ... suffixes in order of appearance.

    Args:
        sections: Sections in source order

    Returns:
        Anchors aligned with the input sections
    """
    seen: dict[str, int] = {}
    anchors: list[str] = []

    for section in sections:
        base = slugify(section.title)
        anchor = base
        while anchor in seen:
            seen[base] += 1
            anchor = f"{base}-{seen[base]}"
        seen[anchor] = 0
        anchors.append(anchor)

    return anchors


def prose_to_html(text: str) -> Markup:
    """Convert Markdown prose into HTML.

    Args:
        text: Markdown text from a ProseBlock

    Returns:
        HTML markup safe to insert into an autoescaped template
    """
    html = markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
    return Markup(html)


def code_fence(block: CodeBlock) -> str:
    """Choose a fence that reproduces the code sample verbatim.

    Uses the block's own fence unless a line of the source would close it,
    in which case the fence is lengthened past the longest such line.

    Args:
        block: Code block to fence

    Returns:
        Fence marker string
    """
    fence = block.fence or "```"
    char = fence[0]

    longest = 0
    for line in block.source.split("\n"):
        if closes_fence(line, fence):
            longest = max(longest, len(line.strip()))

    if longest:
        return char * (longest + 1)
    return fence


def language_class(language: str) -> str:
    """Return the CSS class for a code sample's language.

    Keeps characters such as + and # so c++, c# and c stay distinct.

    Examples:
        >>> language_class("C++")
        'language-c++'
    """
    if not language:
        return ""
    token = _CLASS_UNSAFE_RE.sub("-", language.strip().lower()).strip("-")
    return f"language-{token}" if token else ""


def block_markdown(block: Block) -> str:
    """Render a single block back to Markdown.

    Code samples are emitted between fences with their source unchanged,
    so extracting the output again yields an equal block.
    """
    if isinstance(block, CodeBlock):
        fence = code_fence(block)
        return f"{fence}{block.language}\n{block.source}\n{fence}"
    return block.text


def section_markdown(section: DocumentSection) -> str:
    """Render a section body to Markdown, blocks separated by a blank line."""
    return "\n\n".join(block_markdown(block) for block in section.body)


def link_text(title: str) -> str:
    """Escape brackets so a title can be used as Markdown link text."""
    return title.replace("[", r"\[").replace("]", r"\]")
