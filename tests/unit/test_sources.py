"""Unit tests for source loading."""

from pathlib import Path

import pytest

from foldout.models import RawSection
from foldout.parsers.sources import coerce_records, load_records, parse_yaml_records


class TestParseYamlRecords:
    """Tests for YAML section sources."""

    def test_list_of_sections(self) -> None:
        """Test a top-level list of sections."""
        records = parse_yaml_records("- title: LoD\n  body: A unit should...\n- title: SOLID\n")

        assert records == [
            RawSection(index=0, title="LoD", body="A unit should..."),
            RawSection(index=1, title="SOLID", body=""),
        ]

    def test_sections_key(self) -> None:
        """Test a mapping with a sections list."""
        records = parse_yaml_records("sections:\n  - title: LoD\n")

        assert [r.title for r in records] == ["LoD"]

    def test_empty_document(self) -> None:
        """Test that an empty YAML document has no records."""
        assert parse_yaml_records("") == []

    def test_non_string_title_is_missing(self) -> None:
        """Test that a non-string title counts as missing."""
        (record,) = parse_yaml_records("- title: [a, b]\n  body: x\n")

        assert record.title is None

    def test_scalar_document_rejected(self) -> None:
        """Test that a scalar YAML document raises ValueError."""
        with pytest.raises(ValueError, match="must be a list"):
            parse_yaml_records("just text")

    def test_invalid_yaml_rejected(self) -> None:
        """Test that YAML syntax errors raise ValueError."""
        with pytest.raises(ValueError, match="Invalid YAML"):
            parse_yaml_records("- title: [unclosed\n")


class TestCoerceRecords:
    """Tests for record normalization."""

    def test_pairs_and_mappings(self) -> None:
        """Test mixing tuples and mappings."""
        records = coerce_records([("LoD", "a"), {"title": "SOLID", "body": "b"}])

        assert records == [
            RawSection(index=0, title="LoD", body="a"),
            RawSection(index=1, title="SOLID", body="b"),
        ]

    def test_raw_sections_reindexed(self) -> None:
        """Test that RawSection indexes follow enumeration order."""
        records = coerce_records([RawSection(index=7, title="A", line=3)])

        assert records == [RawSection(index=0, title="A", line=3)]

    def test_unknown_shape(self) -> None:
        """Test that unsupported values have no title."""
        assert coerce_records(["oops"]) == [RawSection(index=0, title=None)]


class TestLoadRecords:
    """Tests for load_records."""

    def test_markdown_file(self, documents_dir: Path) -> None:
        """Test loading a Markdown document."""
        records = load_records(documents_dir / "principles.md")

        assert len(records) == 4

    def test_yaml_file(self, documents_dir: Path) -> None:
        """Test loading a YAML document."""
        records = load_records(documents_dir / "principles.yaml")

        assert [r.title for r in records] == ["LoD", "SOLID", "Abstraction"]
        assert "```python" in records[0].body

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing source raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_records(tmp_path / "missing.md")
