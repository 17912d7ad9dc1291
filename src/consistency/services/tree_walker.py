"""Streaming, deterministic directory traversal."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Literal

from ..errors import TraversalCancelled, UnreadableEntryError

logger = logging.getLogger(__name__)

EntryKind = Literal["file", "directory", "unreadable"]


@dataclass(frozen=True)
class WalkEntry:
    """One entry yielded by :func:`walk`.

    Attributes:
        relative_path: POSIX path relative to the walk root
        kind: "file", "directory" or "unreadable"
        size: Size in bytes (0 for directories and unreadable entries)
        depth: Number of parent directories below the root (root children are 0)
        error: Reason the entry could not be read, for unreadable entries
    """

    relative_path: str
    kind: EntryKind
    size: int = 0
    depth: int = 0
    error: str | None = None


def walk(
    root: Path,
    excluded: Iterable[str] = (),
    should_cancel: Callable[[], bool] | None = None,
) -> Iterator[WalkEntry]:
    """Walk ``root`` depth-first, yielding entries incrementally.

    Children of each directory are visited in lexical order of their names,
    so two walks over an unchanged tree yield identical sequences. Names in
    ``excluded`` are neither yielded nor entered. Directories whose canonical
    path was already visited (symlink loops) are skipped.

    Args:
        root: Directory to walk
        excluded: Directory names never to enter (e.g. ".git", "node_modules")
        should_cancel: Checked before every yield; returning True raises
            TraversalCancelled

    Raises:
        TraversalCancelled: If ``should_cancel`` asked to stop
    """
    excluded_names = frozenset(excluded)
    visited = {os.path.realpath(root)}
    yield from _walk_directory(root, "", 0, excluded_names, visited, should_cancel)


def _walk_directory(
    directory: Path,
    prefix: str,
    depth: int,
    excluded: frozenset[str],
    visited: set[str],
    should_cancel: Callable[[], bool] | None,
) -> Iterator[WalkEntry]:
    try:
        with os.scandir(directory) as scanner:
            children = sorted(scanner, key=lambda entry: entry.name)
    except OSError as e:
        error = UnreadableEntryError(prefix or ".", e.strerror or str(e))
        logger.warning("%s", error)
        _check_cancel(should_cancel)
        yield WalkEntry(prefix or ".", "unreadable", depth=depth, error=error.reason)
        return

    for child in children:
        relative_path = f"{prefix}/{child.name}" if prefix else child.name

        try:
            is_dir = child.is_dir()
            size = 0 if is_dir else child.stat().st_size
        except OSError as e:
            error = UnreadableEntryError(relative_path, e.strerror or str(e))
            logger.warning("%s", error)
            _check_cancel(should_cancel)
            yield WalkEntry(relative_path, "unreadable", depth=depth, error=error.reason)
            continue

        if not is_dir:
            _check_cancel(should_cancel)
            yield WalkEntry(relative_path, "file", size=size, depth=depth)
            continue

        if child.name in excluded:
            continue

        canonical = os.path.realpath(child.path)
        if canonical in visited:
            logger.debug("Skipping already visited directory %s", relative_path)
            continue
        visited.add(canonical)

        _check_cancel(should_cancel)
        yield WalkEntry(relative_path, "directory", depth=depth)
        yield from _walk_directory(
            Path(child.path), relative_path, depth + 1, excluded, visited, should_cancel
        )


def _check_cancel(should_cancel: Callable[[], bool] | None) -> None:
    if should_cancel is not None and should_cancel():
        raise TraversalCancelled("Directory walk cancelled")
