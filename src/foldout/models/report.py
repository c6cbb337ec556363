"""Validation report entities.

- SectionIssue: One malformed section with its position
- ValidationReport: Pass/fail outcome of validating a document
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SectionIssue:
    """A malformed section found during validation.

    Attributes:
        index: Zero-based position of the offending section
        message: Error description
        title: Raw title if one was found
        line: One-based source line (if known)
    """

    index: int
    message: str
    title: str | None = None
    line: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "index": self.index,
            "message": self.message,
            "title": self.title,
            "line": self.line,
        }


@dataclass
class ValidationReport:
    """Pass/fail report for a section document.

    Attributes:
        source: Name of the validated source (file path or "<memory>")
        section_count: Number of section records inspected
        issues: Malformed sections in source order
    """

    source: str
    section_count: int
    issues: list[SectionIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Return True if no section was malformed."""
        return not self.issues

    @property
    def valid_count(self) -> int:
        """Number of sections that parsed cleanly."""
        return self.section_count - len(self.issues)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "source": self.source,
            "passed": self.passed,
            "section_count": self.section_count,
            "valid_count": self.valid_count,
            "issues": [issue.to_dict() for issue in self.issues],
        }
