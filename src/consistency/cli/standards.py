"""Standards document commands."""

import sys
from pathlib import Path

import click

from ..config import dump_standards, load_standards
from ..errors import StandardsError
from ..models.standards import DEFAULT_STANDARDS


@click.group()
def standards():
    """Manage standards documents."""
    pass


@standards.command()
@click.argument("standards_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="Show the effective standards")
def validate(standards_path, verbose):
    """Validate a standards document.

    STANDARDS_PATH: Path to a .consistency.yaml (or .json) file

    Checks for:
    - Valid YAML/JSON syntax
    - Known rule sections and field names
    - Supported casing styles and severities
    - Required-file lists that would also be reported as recommended (warnings)

    Examples:

        \b
        # Validate the repository standards
        consistency standards validate .consistency.yaml
    """
    standards_file = Path(standards_path)

    try:
        model = load_standards(standards_file)
    except StandardsError as e:
        click.echo(f"❌ Standards validation failed: {standards_file}", err=True)
        click.echo(f"  {e}", err=True)
        sys.exit(1)

    warnings = []
    structure = model.structure_rules
    overlap = sorted(set(structure.required_files) & set(structure.recommended_files))
    if overlap:
        warnings.append(
            f"Files both required and recommended (required wins): {', '.join(overlap)}"
        )
    if structure.max_depth == 0:
        warnings.append("max_depth is 0: every nested entry will exceed the limit")
    if not model.style_rules.source_extensions:
        warnings.append("No source extensions configured: code style checks are disabled")

    if verbose:
        click.echo(f"Validating: {standards_file}")
        click.echo("=" * 50)
        click.echo(dump_standards(model))

    if not warnings:
        click.echo(f"✅ Standards valid: {standards_file}")
        return

    click.echo(f"⚠️  Standards valid with warnings: {standards_file}")
    click.echo("\nWarnings:")
    for warning in warnings:
        click.echo(f"  - {warning}")


@standards.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=".consistency.yaml",
    help="Output file path (default: .consistency.yaml)",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing file")
def init(output, force):
    """Write the built-in default standards to a file.

    Examples:

        \b
        # Initialize default standards
        consistency standards init

        \b
        # Overwrite existing file
        consistency standards init --force
    """
    output_path = Path(output)

    if output_path.exists() and not force:
        if not click.confirm(f"File {output_path} already exists. Overwrite?"):
            click.echo("Cancelled.")
            return

    try:
        output_path.write_text(dump_standards(DEFAULT_STANDARDS), encoding="utf-8")
    except OSError as e:
        click.echo(f"❌ Error creating standards file: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Created standards: {output_path}")
    click.echo("\nEdit this file to customize naming, structure and style rules.")
    click.echo("Run 'consistency standards validate' to check your changes.")
