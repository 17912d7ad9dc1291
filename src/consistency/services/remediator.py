"""Best-effort automated fixes for a subset of issues.

Remediation is not transactional: every fix is attempted on its own and
its outcome recorded. A failure never rolls back earlier fixes and never
stops later ones. Callers must not run two remediations over the same
project root at the same time.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Sequence

from ..errors import FixApplicationError, FormatterInvocationError
from ..models.fix import AppliedFix, FixSummary, RemediationOptions
from ..models.issue import (
    CREATE_DIRECTORY,
    CREATE_FILE,
    RENAME_TO,
    Category,
    Issue,
    parse_suggestion,
)
from ..models.snapshot import ProjectSnapshot
from ..models.standards import DEFAULT_STANDARDS, StandardsModel
from .formatter import FormatCommand, default_format_commands
from .scaffold import ScaffoldRenderer

logger = logging.getLogger(__name__)

_SCAFFOLD_CATEGORIES = (Category.STRUCTURE, Category.DOCUMENTATION)


class Remediator:
    """Applies renames, file scaffolding and formatter runs."""

    def __init__(
        self,
        standards: StandardsModel = DEFAULT_STANDARDS,
        format_commands: Sequence[FormatCommand] | None = None,
    ):
        """Initialize remediator.

        Args:
            standards: Supplies template context (README sections)
            format_commands: Formatter collaborators; defaults to prettier
                and eslint via npx
        """
        self.standards = standards
        self.format_commands = (
            list(format_commands) if format_commands is not None else default_format_commands()
        )

    def apply(
        self,
        snapshot: ProjectSnapshot,
        issues: Iterable[Issue],
        options: RemediationOptions,
    ) -> list[AppliedFix]:
        """Apply the enabled fix families, in rename, scaffold, format order."""
        issues = list(issues)
        fixes: list[AppliedFix] = []

        if options.auto_rename_naming:
            fixes.extend(self._rename_naming_issues(snapshot, issues))
        if options.scaffold_missing_files:
            fixes.extend(self._scaffold_missing(snapshot, issues))
        if options.invoke_formatter:
            fixes.extend(self._run_formatters(snapshot))

        for fix in fixes:
            if not fix.success:
                logger.warning("Fix failed for %s: %s", fix.target, fix.error)
        return fixes

    def _rename_naming_issues(
        self, snapshot: ProjectSnapshot, issues: list[Issue]
    ) -> list[AppliedFix]:
        file_renames: list[tuple[str, str]] = []
        directory_renames: list[tuple[str, str]] = []

        for issue in issues:
            if issue.category != Category.NAMING or not issue.target_path:
                continue
            parsed = parse_suggestion(issue.suggestion)
            if not parsed or parsed[0] != RENAME_TO:
                continue
            if snapshot.has_directory(issue.target_path):
                directory_renames.append((issue.target_path, parsed[1]))
            else:
                file_renames.append((issue.target_path, parsed[1]))

        # Deepest directories first so a parent rename cannot strand a child path
        directory_renames.sort(key=lambda rename: rename[0].count("/"), reverse=True)

        return [
            self._rename(snapshot.root_path, relative_path, new_name)
            for relative_path, new_name in file_renames + directory_renames
        ]

    def _rename(self, root: Path, relative_path: str, new_name: str) -> AppliedFix:
        source = root / relative_path
        target = source.with_name(new_name)
        target_relative = target.relative_to(root).as_posix()

        try:
            if not os.path.lexists(source):
                raise FixApplicationError(f"{relative_path} no longer exists")
            if os.path.lexists(target):
                if not _is_case_only_rename(source, target):
                    raise FixApplicationError(
                        f"Cannot rename {relative_path}: {target_relative} already exists"
                    )
                # Case-insensitive filesystem: hop through a temporary name
                interim = source.with_name(f".{source.name}.renaming")
                os.rename(source, interim)
                os.rename(interim, target)
            else:
                os.rename(source, target)
        except (FixApplicationError, OSError) as e:
            return AppliedFix(
                "rename", relative_path, False, f"Did not rename {relative_path}", str(e)
            )

        return AppliedFix(
            "rename",
            relative_path,
            True,
            f"Renamed {source.name} to {target.name}",
        )

    def _scaffold_missing(
        self, snapshot: ProjectSnapshot, issues: list[Issue]
    ) -> list[AppliedFix]:
        renderer = ScaffoldRenderer(snapshot.name, self.standards)
        fixes: list[AppliedFix] = []
        seen: set[tuple[str, str]] = set()

        for issue in issues:
            if issue.category not in _SCAFFOLD_CATEGORIES:
                continue
            parsed = parse_suggestion(issue.suggestion)
            if not parsed or parsed[0] not in (CREATE_FILE, CREATE_DIRECTORY):
                continue
            if parsed in seen:
                continue
            seen.add(parsed)

            prefix, name = parsed
            if prefix == CREATE_FILE:
                fixes.append(self._create_file(renderer, snapshot.root_path, name))
            else:
                fixes.append(self._create_directory(snapshot.root_path, name))

        return fixes

    def _create_file(self, renderer: ScaffoldRenderer, root: Path, name: str) -> AppliedFix:
        try:
            renderer.create_file(root / name, name)
        except FixApplicationError as e:
            return AppliedFix("create-file", name, False, f"Did not create {name}", str(e))
        return AppliedFix("create-file", name, True, f"Created {name}")

    def _create_directory(self, root: Path, name: str) -> AppliedFix:
        try:
            (root / name).mkdir(parents=True)
        except FileExistsError:
            return AppliedFix(
                "create-directory", name, False, f"Did not create directory {name}",
                f"{name} already exists",
            )
        except OSError as e:
            return AppliedFix(
                "create-directory", name, False, f"Did not create directory {name}", str(e)
            )
        return AppliedFix("create-directory", name, True, f"Created directory {name}")

    def _run_formatters(self, snapshot: ProjectSnapshot) -> list[AppliedFix]:
        fixes = []
        for command in self.format_commands:
            try:
                outcome = command(snapshot.root_path)
                if outcome.exit_code != 0:
                    raise FormatterInvocationError(
                        command.name, f"exited with status {outcome.exit_code}"
                    )
            except FormatterInvocationError as e:
                fixes.append(
                    AppliedFix("format", command.name, False, f"Formatter {command.name} failed", str(e))
                )
                continue
            fixes.append(
                AppliedFix(
                    "format",
                    command.name,
                    True,
                    f"Formatted with {command.name} in {outcome.duration_ms}ms",
                )
            )
        return fixes

    @staticmethod
    def summarize(fixes: list[AppliedFix]) -> FixSummary:
        return FixSummary.from_fixes(fixes)


def _is_case_only_rename(source: Path, target: Path) -> bool:
    if source.name == target.name or source.name.lower() != target.name.lower():
        return False
    try:
        return os.path.samefile(source, target)
    except OSError:
        return False
