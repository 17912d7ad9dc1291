"""Code style rules: shallow, line-based checks on recognized source files.

These are textual heuristics, not a parser. Each violation type is
reported at most once per file, pointing at its first occurrence.
"""

import re
from pathlib import PurePosixPath

from ..models.issue import Category, Issue, Severity
from ..models.snapshot import ProjectSnapshot
from ..models.standards import StandardsModel, StyleRules

_LEADING_WHITESPACE = re.compile(r"^[ \t]*")
_ARRAY_CLOSE = re.compile(r"^\s*\][;,)]*\s*$")


def check_code_style(snapshot: ProjectSnapshot, standards: StandardsModel) -> list[Issue]:
    rules = standards.style_rules
    extensions = {ext.lower() for ext in rules.source_extensions}
    issues: list[Issue] = []

    for path in snapshot.files:
        if PurePosixPath(path).suffix.lower() not in extensions:
            continue
        content = snapshot.file_contents.get(path)
        if content is None:
            continue

        lines = content.splitlines()
        for check in (_check_indentation, _check_quotes, _check_trailing_commas):
            issue = check(path, content, lines, rules)
            if issue:
                issues.append(issue)

    return issues


def _check_indentation(
    path: str, content: str, lines: list[str], rules: StyleRules
) -> Issue | None:
    width = rules.indent_width
    for number, line in enumerate(lines, start=1):
        stripped = line.lstrip(" \t")
        if not stripped or stripped.startswith("*"):
            # Blank lines and block comment continuations (" * text")
            continue
        indent = _LEADING_WHITESPACE.match(line).group(0)
        if "\t" in indent:
            detail = "tab indentation"
        elif len(indent) % width:
            detail = f"{len(indent)} spaces"
        else:
            continue
        return Issue(
            category=Category.CODE_STYLE,
            severity=Severity.WARNING,
            message=f"Inconsistent indentation in {path}:{number} ({detail})",
            target_path=path,
            suggestion=f"Reindent with {width} spaces",
        )
    return None


def _check_quotes(
    path: str, content: str, lines: list[str], rules: StyleRules
) -> Issue | None:
    singles = content.count("'")
    doubles = content.count('"')
    if rules.quote_style == "single":
        wrong, right = doubles, singles
    else:
        wrong, right = singles, doubles
    if wrong <= right:
        return None
    return Issue(
        category=Category.CODE_STYLE,
        severity=Severity.WARNING,
        message=f"Use {rules.quote_style} quotes in {path}",
        target_path=path,
        suggestion=f"Use {rules.quote_style} quotes",
    )


def _check_trailing_commas(
    path: str, content: str, lines: list[str], rules: StyleRules
) -> Issue | None:
    """Flag multi-line arrays whose last element has no trailing comma."""
    if not rules.require_trailing_comma:
        return None
    previous = ""
    previous_number = 0
    for number, line in enumerate(lines, start=1):
        if _ARRAY_CLOSE.match(line) and previous and not previous.endswith((",", "[")):
            return Issue(
                category=Category.CODE_STYLE,
                severity=Severity.INFO,
                message=f"Missing trailing comma in {path}:{previous_number}",
                target_path=path,
                suggestion="Add trailing commas",
            )
        if line.strip():
            previous = line.rstrip()
            previous_number = number
    return None
