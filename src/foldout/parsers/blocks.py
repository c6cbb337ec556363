"""Block splitter for section bodies.

Splits a body into ordered prose and fenced code blocks. Fences follow the
CommonMark rules that matter for documentation samples:

- Opening fence: up to 3 spaces of indent, then 3+ backticks or 3+ tildes,
  then an optional info string whose first word is the language tag
- Closing fence: same character, at least as long, nothing else on the line
- An unclosed fence runs to the end of the body

Code source is kept byte-for-byte. Only prose is trimmed.
"""

import re

from foldout.models.section import Block, CodeBlock, ProseBlock

FENCE_OPEN_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")


def match_fence(line: str) -> tuple[str, str] | None:
    """Return (fence, info) if the line opens a fenced code block.

    Args:
        line: A single line without its newline

    Returns:
        Fence marker and stripped info string, or None
    """
    match = FENCE_OPEN_RE.match(line)
    if match is None:
        return None

    fence = match.group("fence")
    info = match.group("info")

    # Backtick info strings may not contain backticks (inline code spans)
    if fence[0] == "`" and "`" in info:
        return None

    return fence, info.strip()


def closes_fence(line: str, fence: str) -> bool:
    """Check whether a line closes the given fence."""
    indent = len(line) - len(line.lstrip(" "))
    if indent > 3:
        return False

    stripped = line.strip()
    return (
        len(stripped) >= len(fence)
        and set(stripped) == {fence[0]}
    )


def trim_blank_lines(text: str) -> str:
    """Remove leading and trailing whitespace-only lines.

    Indentation of the first non-blank line is kept.
    """
    lines = text.split("\n")

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    end = len(lines)
    while end > start and not lines[end - 1].strip():
        end -= 1

    return "\n".join(lines[start:end])


def _flush_prose(prose_lines: list[str], blocks: list[Block]) -> None:
    """Append accumulated prose as a block unless it is blank."""
    if not prose_lines:
        return

    text = trim_blank_lines("\n".join(prose_lines))
    if text:
        blocks.append(ProseBlock(text=text))

    prose_lines.clear()


def split_blocks(body: str) -> tuple[Block, ...]:
    """Split section body text into ordered blocks.

    Args:
        body: Section body text (may be empty)

    Returns:
        Tuple of ProseBlock and CodeBlock values in source order

    Examples:
        >>> split_blocks("")
        ()
        >>> split_blocks("Hello")
        (ProseBlock(text='Hello'),)
    """
    if not body.strip():
        return ()

    lines = body.split("\n")
    blocks: list[Block] = []
    prose_lines: list[str] = []

    i = 0
    while i < len(lines):
        opened = match_fence(lines[i])
        if opened is None:
            prose_lines.append(lines[i])
            i += 1
            continue

        _flush_prose(prose_lines, blocks)

        fence, info = opened
        language = info.split()[0] if info else ""

        code_lines: list[str] = []
        i += 1
        while i < len(lines) and not closes_fence(lines[i], fence):
            code_lines.append(lines[i])
            i += 1

        # Skip the closing fence (no-op past the end for unclosed fences)
        i += 1

        blocks.append(
            CodeBlock(language=language, source="\n".join(code_lines), fence=fence)
        )

    _flush_prose(prose_lines, blocks)

    return tuple(blocks)
