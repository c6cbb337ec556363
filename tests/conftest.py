"""Shared pytest fixtures for Foldout tests.

This module provides common fixtures used across unit and integration
tests. Fixtures are organized by category:
- Path fixtures: Sample documents on disk
- Configuration fixtures: Test configs for various scenarios
- Section fixtures: Pre-built sections for testing renderers
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from foldout.models import CodeBlock, DocumentSection, ProseBlock
from foldout.utils.logging import LOGGER_NAME

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def documents_dir(fixtures_dir: Path) -> Path:
    """Return the path to sample section documents."""
    return fixtures_dir / "documents"


@pytest.fixture
def principles_md(documents_dir: Path) -> str:
    """Return the valid sample Markdown document."""
    return (documents_dir / "principles.md").read_text(encoding="utf-8")


@pytest.fixture
def malformed_md(documents_dir: Path) -> str:
    """Return the sample Markdown document with malformed sections."""
    return (documents_dir / "malformed.md").read_text(encoding="utf-8")


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid Foldout configuration."""
    return {
        "output": {
            "path": "docs/principles.html",
            "format": "html",
        }
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete Foldout configuration with all options."""
    return {
        "output": {
            "path": "build/principles.md",
            "format": "markdown",
        },
        "render": {
            "strict": False,
            "title": "Principles",
            "toc": False,
        },
        "ci": {
            "fail_on_warning": True,
            "json_output": True,
        },
    }


# =============================================================================
# Section Fixtures
# =============================================================================


@pytest.fixture
def sample_sections() -> list[DocumentSection]:
    """Return sections covering prose, code and empty bodies."""
    return [
        DocumentSection(
            title="Law of Demeter",
            body=(
                ProseBlock(text="A unit should only talk to its *immediate* friends."),
                CodeBlock(
                    language="python",
                    source='if a < b and b > c:\n    print("<details>")',
                ),
            ),
        ),
        DocumentSection(
            title="SOLID & friends",
            body=(
                ProseBlock(text="Five principles."),
                CodeBlock(language="java", source="interface Shape {}", fence="~~~"),
                ProseBlock(text="- Single responsibility\n- Open/closed"),
            ),
        ),
        DocumentSection(title="Abstraction"),
    ]


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_foldout_logging() -> Iterator[None]:
    """Drop handlers attached to the foldout logger during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
