"""Entry point for running Foldout as a module.

Usage:
    python -m foldout [command] [options]

Example:
    python -m foldout render principles.md --output docs/principles.html
    python -m foldout validate principles.md
"""

from foldout.cli import app

if __name__ == "__main__":
    app()
