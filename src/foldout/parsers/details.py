"""Collapsible-section extractor for Markdown with HTML details markup.

Recognizes documents written as:

    <details>
    <summary>Law of Demeter</summary>

    A unit should only talk to its immediate friends.

    ```python
    order.customer.address.city  # violation
    ```

    </details>

Each top-level <details> element becomes one RawSection. Only tags on a line
that starts with <details> or </details> (HTML block position) are
structural; tags inside inline code spans or fenced code stay part of the
body, as do nested <details> pairs. Text outside any <details> element is
ignored.
"""

import html
import logging
import re
from dataclasses import dataclass, field

from foldout.models.section import RawSection
from foldout.parsers.blocks import closes_fence, match_fence, trim_blank_lines

logger = logging.getLogger(__name__)

DETAILS_TAG_RE = re.compile(r"<(?P<close>/)?details(?:\s[^>]*)?>", re.IGNORECASE)

# A structural line starts (after up to 3 spaces) with a details tag
STRUCTURAL_LINE_RE = re.compile(r"^ {0,3}<(?P<close>/)?details(?:\s[^>]*)?>", re.IGNORECASE)

SUMMARY_RE = re.compile(
    r"\A\s*<summary(?:\s[^>]*)?>(?P<title>.*?)</summary\s*>",
    re.IGNORECASE | re.DOTALL,
)

# Backtick run, content, matching backtick run of the same length
CODE_SPAN_RE = re.compile(r"(?<!`)(`+)(?!`)(.+?)(?<!`)\1(?!`)")

_INLINE_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and strip the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_title(raw: str) -> str:
    """Convert summary markup into a plain-text title.

    Strips inline tags, unescapes entities and collapses whitespace.

    Examples:
        >>> clean_title("<b>Law of Demeter</b>")
        'Law of Demeter'
        >>> clean_title("  SOLID &amp; friends ")
        'SOLID & friends'
    """
    text = _INLINE_TAG_RE.sub("", raw)
    return collapse_whitespace(html.unescape(text))


def mask_code_spans(line: str) -> str:
    """Blank out inline code spans, keeping character positions.

    The result has the same length as the input so match offsets can be
    used to slice the original line.
    """
    return CODE_SPAN_RE.sub(lambda m: " " * len(m.group(0)), line)


def structural_tag(line: str) -> str | None:
    """Return "open" or "close" if the line starts with a details tag."""
    match = STRUCTURAL_LINE_RE.match(mask_code_spans(line))
    if match is None:
        return None
    return "close" if match.group("close") else "open"


def split_summary(content: str) -> tuple[str | None, str]:
    """Separate the leading <summary> element from a section's content.

    Args:
        content: Everything between <details> and </details>

    Returns:
        (title, body); title is None when no summary delimiter was found
    """
    match = SUMMARY_RE.match(content)
    if match is None:
        return None, trim_blank_lines(content)

    title = clean_title(match.group("title"))
    body = trim_blank_lines(content[match.end():])
    return title, body


@dataclass
class _OpenSection:
    """Section being accumulated while scanning."""

    line: int
    parts: list[str] = field(default_factory=list)


def _fence_closes_before_next_section(lines: list[str], start: int, fence: str) -> bool:
    """Check whether the fence closes before the next <details> opens."""
    for line in lines[start:]:
        if closes_fence(line, fence):
            return True
        if structural_tag(line) == "open":
            return False
    return False


class DetailsExtractor:
    """Extracts raw section records from <details> markup.

    Single pass over the source lines. Fenced code is tracked at every level
    so that tags shown inside code samples never open or close sections. A
    fence that never closes ends with its section instead of swallowing the
    rest of the document.

    Usage:
        extractor = DetailsExtractor()
        records = extractor.extract(text)
    """

    def extract(self, text: str) -> list[RawSection]:
        """Extract section records in source order.

        Args:
            text: Source document

        Returns:
            List of RawSection values (titles may be None)
        """
        lines = text.split("\n")
        records: list[RawSection] = []
        current: _OpenSection | None = None
        depth = 0
        fence: str | None = None
        fence_line = 0

        for i, line in enumerate(lines):
            lineno = i + 1

            if fence is not None:
                if closes_fence(line, fence):
                    fence = None
                    if current is not None:
                        current.parts.append(line)
                    continue

                if not self._ends_unclosed_fence(
                    lines, i, fence, in_section=current is not None
                ):
                    if current is not None:
                        current.parts.append(line)
                    continue

                logger.warning(
                    "Unclosed code fence from line %d ends at line %d",
                    fence_line,
                    lineno,
                )
                fence = None
            else:
                opened = match_fence(line)
                if opened is not None:
                    fence = opened[0]
                    fence_line = lineno
                    if current is not None:
                        current.parts.append(line)
                    continue

            if structural_tag(line) is None:
                if current is not None:
                    current.parts.append(line)
                continue

            segment_start = 0
            for tag in DETAILS_TAG_RE.finditer(mask_code_spans(line)):
                if tag.group("close") is None:
                    if depth == 0:
                        current = _OpenSection(line=lineno)
                        segment_start = tag.end()
                    depth += 1
                    continue

                if depth == 0:
                    logger.debug("Ignoring stray </details> on line %d", lineno)
                    continue

                depth -= 1
                if depth == 0 and current is not None:
                    current.parts.append(line[segment_start:tag.start()])
                    records.append(self._finish(current, len(records)))
                    current = None

            if current is not None:
                current.parts.append(line[segment_start:])

        if fence is not None:
            logger.warning("Unclosed code fence from line %d runs to end of input", fence_line)

        if current is not None:
            logger.warning(
                "Unclosed <details> starting on line %d runs to end of input",
                current.line,
            )
            records.append(self._finish(current, len(records)))

        logger.debug("Extracted %d section record(s)", len(records))
        return records

    def _ends_unclosed_fence(
        self,
        lines: list[str],
        index: int,
        fence: str,
        in_section: bool,
    ) -> bool:
        """Decide whether a structural line ends an unclosed fence.

        Inside a section, a </details> line ends the fence when the fence
        does not close before the next section opens. Outside any section,
        a <details> line does the same.
        """
        expected = "close" if in_section else "open"
        if structural_tag(lines[index]) != expected:
            return False
        return not _fence_closes_before_next_section(lines, index + 1, fence)

    def _finish(self, section: _OpenSection, index: int) -> RawSection:
        """Build the RawSection for a completed <details> element."""
        title, body = split_summary("\n".join(section.parts))
        return RawSection(index=index, title=title, body=body, line=section.line)


def extract_records(text: str) -> list[RawSection]:
    """Extract section records from <details> markup.

    Args:
        text: Source document

    Returns:
        List of RawSection values in source order
    """
    return DetailsExtractor().extract(text)
