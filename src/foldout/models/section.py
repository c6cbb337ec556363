"""Section entities.

This module contains the immutable values produced by parsing:
- RawSection: Unvalidated (title, body) record in source order
- ProseBlock: Formatted Markdown text inside a section
- CodeBlock: Verbatim code sample with its language tag
- DocumentSection: Titled section made of ordered blocks
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class RawSection:
    """Section record as extracted from the source document.

    Attributes:
        index: Zero-based position of the record in the source
        title: Summary text, or None when no title delimiter was found
        body: Body text between the title and the end of the section
        line: One-based source line where the section starts (if known)
    """

    index: int
    title: str | None
    body: str = ""
    line: int | None = None


@dataclass(frozen=True)
class ProseBlock:
    """Formatted prose (Markdown) between code samples.

    Attributes:
        text: Prose text with surrounding blank lines trimmed
    """

    text: str

    kind = "prose"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"kind": self.kind, "text": self.text}


@dataclass(frozen=True)
class CodeBlock:
    """Literal code sample, never evaluated.

    Attributes:
        language: Language tag from the fence info string ("" when absent)
        source: Exact text between the opening and closing fences
        fence: Fence marker used in the source (``` or ~~~, 3+ chars)
    """

    language: str
    source: str
    fence: str = "```"

    kind = "code"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "language": self.language,
            "source": self.source,
        }


Block = Union[ProseBlock, CodeBlock]


@dataclass(frozen=True)
class DocumentSection:
    """A named, collapsible unit of documentation.

    Attributes:
        title: Section title taken from the summary text
        body: Ordered prose and code blocks
    """

    title: str
    body: tuple[Block, ...] = field(default_factory=tuple)

    @property
    def code_blocks(self) -> tuple[CodeBlock, ...]:
        """Return the code samples in source order."""
        return tuple(b for b in self.body if isinstance(b, CodeBlock))

    @property
    def is_empty(self) -> bool:
        """Return True if the section has no blocks."""
        return not self.body

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title,
            "body": [block.to_dict() for block in self.body],
        }
