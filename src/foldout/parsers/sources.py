"""Source document loading.

Two input formats are supported:
- Markdown (or any text) with <details>/<summary> collapsible markup
- YAML: a list of {title, body} mappings, or a mapping with a "sections" list

The format is chosen from the file suffix.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from foldout.models.section import RawSection
from foldout.parsers.details import extract_records

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_yaml_records(text: str) -> list[RawSection]:
    """Parse section records from YAML text.

    Args:
        text: YAML document

    Returns:
        List of RawSection values in source order

    Raises:
        ValueError: If the YAML is invalid or not a list of sections
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML source: {e}") from e

    if data is None:
        return []

    if isinstance(data, dict):
        data = data.get("sections", [])

    if not isinstance(data, list):
        raise ValueError("YAML source must be a list of sections")

    return coerce_records(data)


def _coerce_record(index: int, item: Any) -> RawSection:
    """Convert one record-like value into a RawSection."""
    if isinstance(item, RawSection):
        return RawSection(index=index, title=item.title, body=item.body, line=item.line)

    if isinstance(item, Mapping):
        title = item.get("title")
        body = item.get("body")
    elif isinstance(item, (tuple, list)) and len(item) == 2:
        title, body = item
    else:
        logger.debug("Record %d is not a (title, body) pair: %r", index, item)
        return RawSection(index=index, title=None)

    if not isinstance(title, str):
        title = None
    if body is None:
        body = ""

    return RawSection(index=index, title=title, body=str(body))


def coerce_records(items: Iterable[Any]) -> list[RawSection]:
    """Normalize raw section records.

    Accepts RawSection values, (title, body) pairs, or mappings with
    "title"/"body" keys. Indexes are reassigned from enumeration order.

    Args:
        items: Record-like values in source order

    Returns:
        List of RawSection values
    """
    return [_coerce_record(index, item) for index, item in enumerate(items)]


def load_records(path: Path) -> list[RawSection]:
    """Load section records from a source file.

    Args:
        path: Source document path

    Returns:
        List of RawSection values in source order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a YAML source is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Source document not found: {path}")

    text = path.read_text(encoding="utf-8")

    if path.suffix.lower() in YAML_SUFFIXES:
        records = parse_yaml_records(text)
    else:
        records = extract_records(text)

    logger.info("Loaded %d section record(s) from %s", len(records), path)
    return records
