"""Command line entry point for the consistency manager."""

import json
import sys
from pathlib import Path

import click

from .. import __version__
from ..config import find_standards_file, load_standards
from ..errors import PathNotFoundError, StandardsError
from ..logging_utils import configure_logging, set_verbose
from ..models.fix import RemediationOptions
from ..models.issue import ValidationResult
from ..models.standards import DEFAULT_STANDARDS, StandardsModel
from ..reporters import ReportEmitter, ScoreBadge
from ..services.formatter import SubprocessFormatCommand, default_format_commands
from ..services.remediator import Remediator
from ..services.validator import ConsistencyValidator
from .standards import standards

MAX_LISTED_ISSUES = 50

standards_option = click.option(
    "--standards",
    "standards_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Standards document (default: discovered from the project, then built-in)",
)
project_argument = click.argument("path", type=click.Path(), default=".")


def discover_standards(repo_path: Path, explicit: Path | None) -> StandardsModel:
    """Resolve the standards for a run.

    Priority:
    1. Explicit --standards path
    2. .consistency.yaml / .yml / .json in the project root
    3. ~/.config/consistency/standards.yaml
    4. Built-in defaults

    Exits with status 1 when the chosen document is missing or invalid.
    """
    try:
        standards_file = find_standards_file(repo_path, explicit)
        if standards_file is None:
            return DEFAULT_STANDARDS
        model = load_standards(standards_file)
    except StandardsError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    click.echo(f"📋 Using standards: {standards_file}", err=True)
    return model


def run_validation(path: str, standards_path: str | None) -> tuple[ValidationResult, StandardsModel]:
    repo_path = Path(path)
    model = discover_standards(repo_path, Path(standards_path) if standards_path else None)
    try:
        result = ConsistencyValidator(model).validate(repo_path)
    except PathNotFoundError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    return result, model


def parse_formatter_commands(ctx, param, value) -> tuple[SubprocessFormatCommand, ...]:
    """Turn each --formatter-cmd string into a command, rejecting unusable ones."""
    commands = []
    for command in value:
        try:
            commands.append(SubprocessFormatCommand.from_string(command))
        except ValueError as e:
            raise click.BadParameter(f"{command!r}: {e}", ctx=ctx, param=param) from e
    return tuple(commands)


def echo_result(result: ValidationResult, verbose: bool = False) -> None:
    snapshot = result.snapshot
    click.echo("\n📊 Consistency Validation Report\n")
    click.echo(f"Project: {snapshot.name}")
    click.echo(f"Type: {snapshot.project_type}")
    click.echo(f"Score: {ScoreBadge.symbol(result.score)} {result.score}/100")
    click.echo(f"Issues: {len(result.issues)}")

    if not result.issues:
        return

    click.echo("\nIssues found:")
    listed = result.issues if verbose else result.issues[:MAX_LISTED_ISSUES]
    for issue in listed:
        click.echo(f"  {issue.severity.value.upper()}: {issue.message}")
        if issue.suggestion:
            click.echo(f"    → {issue.suggestion}")
    if len(listed) < len(result.issues):
        click.echo(f"  ... and {len(result.issues) - len(listed)} more (use -v to list all)")

    if result.recommendations:
        click.echo("\n💡 Recommendations:")
        for recommendation in result.recommendations:
            click.echo(
                f"  [{recommendation.priority}] {recommendation.category.value}: "
                f"{recommendation.issue_count} issue(s)"
            )
            for action in recommendation.suggested_actions:
                click.echo(f"    - {action}")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose):
    """Check and fix project layout, naming, style and documentation consistency."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        set_verbose()


@cli.command()
@project_argument
@standards_option
@click.pass_context
def validate(ctx, path, standards_path):
    """Validate the project at PATH (default: current directory).

    Examples:

        \b
        consistency validate
        consistency validate ../my-app --standards team.yaml
    """
    result, _ = run_validation(path, standards_path)
    echo_result(result, verbose=ctx.obj.get("verbose", False))


@cli.command()
@project_argument
@standards_option
@click.option("--auto-fix", is_flag=True, help="Rename files and directories to the configured casing")
@click.option("--create-missing", is_flag=True, help="Create missing required files and directories")
@click.option("--format-code", is_flag=True, help="Run code formatters over the project")
@click.option(
    "--formatter-cmd",
    multiple=True,
    callback=parse_formatter_commands,
    help="Formatter command line (repeatable; default: npx prettier, npx eslint --fix)",
)
def fix(path, standards_path, auto_fix, create_missing, format_code, formatter_cmd):
    """Validate PATH and apply the selected fixes.

    Fixes are best effort: each one is attempted independently and a failure
    never undoes or stops the others.

    Examples:

        \b
        consistency fix --create-missing
        consistency fix --auto-fix --format-code --formatter-cmd "npx prettier --write ."
    """
    options = RemediationOptions(
        auto_rename_naming=auto_fix,
        scaffold_missing_files=create_missing,
        invoke_formatter=format_code,
    )
    result, model = run_validation(path, standards_path)
    click.echo(f"Score before fixes: {result.score}/100")

    if not options.any_enabled:
        click.echo("No fixes selected. Use --auto-fix, --create-missing or --format-code.")
        return

    if formatter_cmd:
        commands = list(formatter_cmd)
    else:
        commands = default_format_commands()

    remediator = Remediator(model, format_commands=commands)
    fixes = remediator.apply(result.snapshot, result.issues, options)

    click.echo("\n🔧 Applied fixes:")
    if not fixes:
        click.echo("  Nothing to fix.")
    for applied in fixes:
        if applied.success:
            click.echo(f"  ✅ {applied.message}")
        else:
            click.echo(f"  ❌ {applied.message}: {applied.error}")

    summary = Remediator.summarize(fixes)
    click.echo(f"\nFixes: {summary.succeeded} applied, {summary.failed} failed")

    after = ConsistencyValidator(model).validate(path)
    click.echo(f"Score after fixes: {after.score}/100")


@cli.command()
@project_argument
@standards_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file (default: print to stdout)",
)
def report(path, standards_path, output):
    """Produce a JSON consistency report for PATH.

    Examples:

        \b
        consistency report -o consistency-report.json
    """
    result, model = run_validation(path, standards_path)
    serialized = ReportEmitter(model).emit(result)

    if output is None:
        click.echo(serialized.to_json())
        return

    try:
        written = serialized.write(Path(output))
    except OSError as e:
        click.echo(f"❌ Error writing report: {e}", err=True)
        sys.exit(1)

    click.echo(serialized.summary)
    click.echo(f"\n📄 Report saved to: {written}")


@cli.command()
@project_argument
@standards_option
@click.option("--badge", is_flag=True, help="Also print a Markdown score badge")
@click.option("--json", "as_json", is_flag=True, help="Print score and counts as JSON")
def check(path, standards_path, badge, as_json):
    """Print the consistency score for PATH."""
    result, _ = run_validation(path, standards_path)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "score": result.score,
                    "status": ScoreBadge.get_status(result.score),
                    "issues": len(result.issues),
                }
            )
        )
        return

    click.echo(
        f"{ScoreBadge.symbol(result.score)} Consistency Score: "
        f"{result.score}/100 ({len(result.issues)} issues)"
    )
    if badge:
        click.echo(ScoreBadge.generate_markdown_badge(result.score))


cli.add_command(standards)


def main():
    """Console script entry point."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
