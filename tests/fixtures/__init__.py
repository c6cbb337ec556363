"""Test fixtures for Foldout.

This package provides sample section documents for integration and
end-to-end testing.

Sample Documents:
- documents/principles.md: Four valid <details> sections with code samples
- documents/malformed.md: Two valid and two malformed sections
- documents/principles.yaml: Three valid sections in YAML form
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Path to sample documents
DOCUMENTS_DIR = FIXTURES_DIR / "documents"

PRINCIPLES_MD_PATH = DOCUMENTS_DIR / "principles.md"
MALFORMED_MD_PATH = DOCUMENTS_DIR / "malformed.md"
PRINCIPLES_YAML_PATH = DOCUMENTS_DIR / "principles.yaml"


def get_document(name: str) -> Path:
    """Get path to a sample document.

    Args:
        name: File name of the sample document

    Returns:
        Path to the sample document

    Raises:
        ValueError: If the document doesn't exist
    """
    path = DOCUMENTS_DIR / name
    if not path.exists():
        raise ValueError(f"Sample document not found: {name}")
    return path
