"""Foldout CLI interface.

Commands:
- render: Render a section document to HTML, Markdown or a table of contents
- validate: Report malformed sections with their index
- init: Initialize Foldout configuration

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from foldout import __version__
from foldout.config import (
    FORMAT_SUFFIXES,
    OUTPUT_FORMATS,
    FoldoutConfig,
    create_default_config,
    load_config,
)
from foldout.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="foldout",
    help="Collapsible section documentation renderer",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: FoldoutConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"foldout {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Foldout - Collapsible Section Documentation Renderer.

    Parse documentation written as titled, collapsible sections and render
    it as a navigable document.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except ValueError as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


def _current_config() -> FoldoutConfig:
    """Return the loaded configuration (defaults if the callback did not run)."""
    return _config if _config is not None else FoldoutConfig()


# =============================================================================
# render command
# =============================================================================


@app.command()
def render(
    source: Annotated[
        Path,
        typer.Argument(
            help="Section document (Markdown with <details> markup, or YAML)",
            exists=True,
            dir_okay=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (overrides config)",
        ),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: html, markdown, toc",
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option(
            "--title",
            help="Document title (overrides config)",
        ),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option(
            "--lenient",
            help="Skip malformed sections instead of failing",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Preview output without writing files",
        ),
    ] = False,
) -> None:
    """Render a section document.

    Exit codes:
        0: Document rendered successfully
        1: Error during rendering (or malformed section in strict mode)
        2: Rendered with skipped sections (lenient mode)
    """
    from foldout.parsers import MalformedSectionError, load_records
    from foldout.sections import SectionRenderer
    from foldout.templates import DocumentRenderer

    config = _current_config()

    output_format = format or config.output.format
    if output_format not in OUTPUT_FORMATS:
        _logger.error(f"Invalid format: {output_format}. Use one of {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)

    if output is not None:
        output_path = output
    else:
        output_path = Path(config.output.path)
        # Keep the configured path but match the suffix to a --format override
        if format and format != config.output.format:
            output_path = output_path.with_suffix(FORMAT_SUFFIXES[output_format])
    strict = config.render.strict and not lenient

    _logger.info(f"Rendering {source} (format: {output_format}, strict: {strict})")

    try:
        records = load_records(source)
    except ValueError as e:
        _logger.error(f"Failed to read source: {e}")
        raise typer.Exit(1)

    section_renderer = SectionRenderer(strict=strict)
    try:
        result = section_renderer.build(records)
    except MalformedSectionError as e:
        _logger.error(str(e))
        typer.echo(f"❌ Malformed section {e.index}: {e.message}")
        raise typer.Exit(1)

    renderer = DocumentRenderer(config=config)

    try:
        if dry_run:
            preview = renderer.preview(
                result.sections,
                format=output_format,
                title=title,
                max_lines=100,
            )
            typer.echo("\n--- Document Preview ---\n")
            typer.echo(preview)
            typer.echo("\n--- End Preview ---")
            _logger.info("Dry run complete - no files written")
        else:
            rendered_path = renderer.render_to_file(
                result.sections,
                output_path,
                format=output_format,
                title=title,
            )
            typer.echo(f"\n📄 Document written to: {rendered_path}")
    except ValueError as e:
        _logger.error(f"Rendering failed: {e}")
        raise typer.Exit(1)

    if result.errors:
        _logger.warning(f"Skipped {len(result.errors)} malformed section(s)")
        for error in result.errors:
            _logger.warning(f"  [{error.index}] {error.message}")
        raise typer.Exit(1 if config.ci.fail_on_warning else 2)

    raise typer.Exit(0)


# =============================================================================
# validate command
# =============================================================================


@app.command()
def validate(
    source: Annotated[
        Path,
        typer.Argument(
            help="Section document to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """Validate a section document.

    Reports every malformed section with its index.

    Exit codes:
        0: All sections valid
        1: One or more sections malformed (or source unreadable)
    """
    import json as json_module

    from foldout.parsers import load_records
    from foldout.sections import SectionRenderer

    config = _current_config()

    try:
        records = load_records(source)
    except ValueError as e:
        _logger.error(f"Failed to read source: {e}")
        raise typer.Exit(1)

    report = SectionRenderer(strict=False).validate(records, source=str(source))

    for issue in report.issues:
        _logger.structured(
            logging.DEBUG,
            f"Malformed section {issue.index}: {issue.message}",
            index=issue.index,
            line=issue.line,
        )

    if json_output or config.ci.json_output:
        typer.echo(json_module.dumps(report.to_dict(), indent=2))
    else:
        typer.echo(f"\n🔍 Validation Results: {source}\n")
        typer.echo(f"  Sections: {report.section_count} ({report.valid_count} valid)")

        for issue in report.issues:
            line_str = f" (line {issue.line})" if issue.line is not None else ""
            typer.echo(f"  ❌ [{issue.index}]{line_str} {issue.message}")

        typer.echo()

        if report.passed:
            typer.echo("✅ All sections valid")
        else:
            typer.echo(f"❌ Validation FAILED ({len(report.issues)} malformed section(s))")

    raise typer.Exit(0 if report.passed else 1)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing config",
        ),
    ] = False,
) -> None:
    """Initialize Foldout configuration.

    Creates .foldout/config.yaml with default settings.
    """
    foldout_dir = Path(".foldout")
    foldout_dir.mkdir(exist_ok=True)

    config_file = foldout_dir / "config.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_file.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")

    typer.echo("\n✅ Foldout configuration initialized")
    typer.echo(f"   Config: {config_file}")
    raise typer.Exit(0)


if __name__ == "__main__":
    app()
