"""Foldout data models.

This module exports all core entities used throughout the application:
- RawSection: Unvalidated section record from the source
- DocumentSection: Titled section with ordered blocks
- ProseBlock / CodeBlock: The two kinds of Block
- SectionIssue / ValidationReport: Validation outcome
"""

from foldout.models.report import SectionIssue, ValidationReport
from foldout.models.section import (
    Block,
    CodeBlock,
    DocumentSection,
    ProseBlock,
    RawSection,
)

__all__ = [
    "Block",
    "CodeBlock",
    "DocumentSection",
    "ProseBlock",
    "RawSection",
    "SectionIssue",
    "ValidationReport",
]
