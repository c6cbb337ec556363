"""Section renderer (Principle: Order Preservation).

Turns raw section records into immutable DocumentSection values in a single,
stateless pass. Output order always equals input order; a malformed record
either halts the pass (strict) or is skipped and reported (lenient).
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from foldout.models import DocumentSection, RawSection, SectionIssue, ValidationReport
from foldout.parsers import MalformedSectionError, coerce_records, split_blocks
from foldout.parsers.details import collapse_whitespace

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of building sections from raw records.

    Attributes:
        sections: Built sections in source order
        errors: Malformed records skipped in lenient mode
    """

    sections: list[DocumentSection] = field(default_factory=list)
    errors: list[MalformedSectionError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Return True if every record produced a section."""
        return not self.errors


class SectionRenderer:
    """Builds DocumentSection values from raw section records.

    Usage:
        renderer = SectionRenderer(strict=False)
        result = renderer.build([("LoD", "A unit should..."), ("SOLID", "...")])
        for section in result.sections:
            print(section.title)

    Attributes:
        strict: Halt on the first malformed record instead of skipping it
    """

    def __init__(self, strict: bool = True) -> None:
        """Initialize the section renderer.

        Args:
            strict: Whether malformed records raise (True) or are collected
        """
        self.strict = strict

    def build_section(self, record: RawSection) -> DocumentSection:
        """Build a single section.

        Args:
            record: Raw section record

        Returns:
            DocumentSection with blocks in source order

        Raises:
            MalformedSectionError: If the record has no usable title
        """
        if record.title is None:
            raise MalformedSectionError(
                record.index,
                "missing title delimiter (<summary>...</summary>)",
                line=record.line,
            )

        title = collapse_whitespace(record.title)
        if not title:
            raise MalformedSectionError(
                record.index,
                "empty title",
                title=record.title,
                line=record.line,
            )

        return DocumentSection(title=title, body=split_blocks(record.body))

    def build(self, records: Iterable[Any]) -> RenderResult:
        """Build sections from raw records.

        Args:
            records: RawSection values, (title, body) pairs or mappings

        Returns:
            RenderResult with sections and, in lenient mode, skipped errors

        Raises:
            MalformedSectionError: In strict mode, on the first bad record
        """
        result = RenderResult()

        for record in coerce_records(records):
            try:
                section = self.build_section(record)
            except MalformedSectionError as e:
                if self.strict:
                    logger.error("%s", e)
                    raise
                logger.warning("Skipping %s", e)
                result.errors.append(e)
                continue

            logger.debug(
                "Built section %d '%s' (%d block(s))",
                record.index,
                section.title,
                len(section.body),
            )
            result.sections.append(section)

        logger.info(
            "Built %d section(s), skipped %d",
            len(result.sections),
            len(result.errors),
        )
        return result

    def validate(self, records: Iterable[Any], source: str = "<memory>") -> ValidationReport:
        """Validate records without halting on errors.

        Args:
            records: Record-like values in source order
            source: Name of the validated source for the report

        Returns:
            ValidationReport listing every malformed section by index
        """
        raw = coerce_records(records)
        report = ValidationReport(source=source, section_count=len(raw))

        for record in raw:
            try:
                self.build_section(record)
            except MalformedSectionError as e:
                report.issues.append(
                    SectionIssue(
                        index=e.index,
                        message=e.message,
                        title=e.title,
                        line=e.line,
                    )
                )

        return report


def render_sections(records: Iterable[Any], strict: bool = True) -> list[DocumentSection]:
    """Build sections from raw records.

    Args:
        records: RawSection values, (title, body) pairs or mappings
        strict: Raise on the first malformed record

    Returns:
        List of DocumentSection values in source order
    """
    return SectionRenderer(strict=strict).build(records).sections
