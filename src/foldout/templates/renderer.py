"""Template renderer for section documents (Principle: Reproducibility).

Renders DocumentSection values to HTML or Markdown using Jinja2 templates.
All output is deterministic - same input always produces same output.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateNotFound, select_autoescape

from foldout.config import OUTPUT_FORMATS, FoldoutConfig
from foldout.models import DocumentSection
from foldout.renderers.filters import (
    assign_anchors,
    block_markdown,
    code_fence,
    language_class,
    link_text,
    prose_to_html,
    section_markdown,
)

logger = logging.getLogger(__name__)

# Template used for each output format
FORMAT_TEMPLATES: dict[str, str] = {
    "html": "document.html.j2",
    "markdown": "document.md.j2",
    "toc": "toc.md.j2",
}


@dataclass(frozen=True)
class TocEntry:
    """Section paired with its anchor for template rendering."""

    anchor: str
    section: DocumentSection


class DocumentRenderer:
    """Renders sections to a navigable document.

    Templates are loaded from the package; format, title and table of
    contents default to the configuration and can be overridden per call.

    Usage:
        renderer = DocumentRenderer(config)
        html = renderer.render(sections, format="html")
    """

    def __init__(self, config: FoldoutConfig | None = None) -> None:
        """Initialize the document renderer.

        Args:
            config: Foldout configuration
        """
        self.config = config or FoldoutConfig()

        # Set up Jinja2 environment with package templates
        self._env = Environment(
            loader=PackageLoader("foldout", "templates"),
            autoescape=select_autoescape(["html.j2", "html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        # Register custom filters
        self._env.filters["prose_to_html"] = prose_to_html
        self._env.filters["language_class"] = language_class
        self._env.filters["code_fence"] = code_fence
        self._env.filters["block_markdown"] = block_markdown
        self._env.filters["section_markdown"] = section_markdown
        self._env.filters["link_text"] = link_text

    def render(
        self,
        sections: list[DocumentSection],
        format: str | None = None,
        title: str | None = None,
        toc: bool | None = None,
    ) -> str:
        """Render sections to a document.

        Args:
            sections: Sections in source order
            format: Output format (html, markdown, toc); defaults to config
            title: Document title; defaults to config
            toc: Include a table of contents; defaults to config

        Returns:
            Rendered document string

        Raises:
            ValueError: If the format is unknown or rendering fails
        """
        output_format = format or self.config.output.format
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format}. Valid: {OUTPUT_FORMATS}")

        template_name = FORMAT_TEMPLATES[output_format]
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            logger.error("Failed to load template %s: %s", template_name, e)
            raise ValueError(f"Template not found: {template_name}") from e

        context = self._build_context(sections, title, toc)

        try:
            rendered = template.render(**context)
        except Exception as e:
            logger.error("Template rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

        logger.info(
            "Rendered %d section(s) as %s (%d characters)",
            len(sections),
            output_format,
            len(rendered),
        )
        return rendered

    def _build_context(
        self,
        sections: list[DocumentSection],
        title: str | None,
        toc: bool | None,
    ) -> dict[str, Any]:
        """Build the template rendering context.

        Args:
            sections: Sections in source order
            title: Title override
            toc: Table of contents override

        Returns:
            Template context dictionary
        """
        anchors = assign_anchors(sections)

        return {
            "title": title if title is not None else self.config.render.title,
            "toc": toc if toc is not None else self.config.render.toc,
            "items": [
                TocEntry(anchor=anchor, section=section)
                for anchor, section in zip(anchors, sections)
            ],
        }

    def render_to_file(
        self,
        sections: list[DocumentSection],
        output_path: Path,
        format: str | None = None,
        title: str | None = None,
    ) -> Path:
        """Render sections and write to file.

        Args:
            sections: Sections in source order
            output_path: Path to write output file
            format: Output format override
            title: Document title override

        Returns:
            Path to written file
        """
        content = self.render(sections, format=format, title=title)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        output_path.write_text(content, encoding="utf-8")
        logger.info("Wrote document to %s", output_path)

        return output_path

    def preview(
        self,
        sections: list[DocumentSection],
        format: str | None = None,
        title: str | None = None,
        max_lines: int = 50,
    ) -> str:
        """Generate a preview of the rendered output.

        Args:
            sections: Sections in source order
            format: Output format override
            title: Document title override
            max_lines: Maximum lines to include in preview

        Returns:
            Preview string with truncation indicator
        """
        full_content = self.render(sections, format=format, title=title)
        lines = full_content.split("\n")

        if len(lines) <= max_lines:
            return full_content

        preview_lines = lines[:max_lines]
        preview_lines.append(f"\n... [{len(lines) - max_lines} more lines] ...")

        return "\n".join(preview_lines)
