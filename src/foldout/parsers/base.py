"""Parser errors.

MalformedSectionError is the only parse error kind. It always carries the
position of the offending section so callers can report it or skip it.
"""


class MalformedSectionError(Exception):
    """Raised when a section cannot be parsed into (title, body).

    Attributes:
        index: Zero-based position of the section in the source
        title: Raw title if one was found
        line: One-based source line where the section starts (if known)
    """

    def __init__(
        self,
        index: int,
        message: str,
        title: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            index: Section position
            message: Error description
            title: Raw title if available
            line: Source line if available
        """
        self.index = index
        self.message = message
        self.title = title
        self.line = line
        location = f"section {index}"
        if line is not None:
            location += f" (line {line})"
        super().__init__(f"Malformed {location}: {message}")
