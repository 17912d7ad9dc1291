"""External formatter/linter invocation, treated as a black box."""

import logging
import shlex
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from ..errors import FormatterInvocationError

logger = logging.getLogger(__name__)

FORMATTER_TIMEOUT = 300  # seconds

DEFAULT_FORMAT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("npx", "prettier", "--write", "."),
    ("npx", "eslint", "--fix", "."),
)


@dataclass(frozen=True)
class FormatOutcome:
    """Exit status and wall time of one formatter run."""

    exit_code: int
    duration_ms: int


class FormatCommand(Protocol):
    """Anything that formats a project tree and reports an exit status."""

    name: str

    def __call__(self, root: Path) -> FormatOutcome: ...


class SubprocessFormatCommand:
    """Runs a formatter executable in the project root."""

    def __init__(self, argv: Sequence[str], timeout: int = FORMATTER_TIMEOUT):
        if not argv:
            raise ValueError("Formatter command cannot be empty")
        self.argv = list(argv)
        self.timeout = timeout

    @classmethod
    def from_string(cls, command: str, timeout: int = FORMATTER_TIMEOUT) -> "SubprocessFormatCommand":
        return cls(shlex.split(command), timeout=timeout)

    @property
    def name(self) -> str:
        return shlex.join(self.argv)

    def __call__(self, root: Path) -> FormatOutcome:
        """Run the formatter; output is captured and ignored.

        Raises:
            FormatterInvocationError: If the executable is missing or times out
        """
        started = time.monotonic()
        try:
            result = subprocess.run(
                self.argv,
                cwd=root,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FormatterInvocationError(self.name, "executable not found") from e
        except subprocess.TimeoutExpired as e:
            raise FormatterInvocationError(
                self.name, f"timed out after {self.timeout}s"
            ) from e
        except OSError as e:
            raise FormatterInvocationError(self.name, str(e)) from e

        duration_ms = int((time.monotonic() - started) * 1000)
        logger.debug("%s exited with %d in %dms", self.name, result.returncode, duration_ms)
        return FormatOutcome(exit_code=result.returncode, duration_ms=duration_ms)


def default_format_commands() -> list[FormatCommand]:
    return [SubprocessFormatCommand(argv) for argv in DEFAULT_FORMAT_COMMANDS]
