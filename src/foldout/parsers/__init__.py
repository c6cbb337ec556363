"""Foldout parsers.

- details: <details>/<summary> record extraction
- blocks: Prose and fenced code splitting of section bodies
- sources: File loading and record normalization (Markdown, YAML)
"""

from foldout.parsers.base import MalformedSectionError
from foldout.parsers.blocks import split_blocks
from foldout.parsers.details import DetailsExtractor, extract_records
from foldout.parsers.sources import coerce_records, load_records, parse_yaml_records

__all__ = [
    "MalformedSectionError",
    "DetailsExtractor",
    "coerce_records",
    "extract_records",
    "load_records",
    "parse_yaml_records",
    "split_blocks",
]
