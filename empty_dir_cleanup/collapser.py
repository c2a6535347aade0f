#!/usr/bin/env python3
"""
Empty directory collapse: second cleanup phase.
"""

from __future__ import annotations

# Standard Library
import logging
from pathlib import Path

# local repo modules
from .console import tag
from .errors import CleanupError, ErrorKind, wrap_os_error
from .scanner import DIR, entry_kind, list_entries

logger = logging.getLogger(__name__)

#============================================


def _subdirs(directory: Path) -> list[Path]:
	"""
	Collect the subdirectories of a directory.

	A directory that vanished since it was checked has none.
	"""
	try:
		entries = list_entries(directory)
	except CleanupError as err:
		if err.kind is ErrorKind.CONCURRENT_DISAPPEARANCE:
			return []
		raise
	return [path for path in entries if entry_kind(path) == DIR]


#============================================


def _remove_if_empty(directory: Path, dry_run: bool, removed: set[Path]) -> bool:
	"""
	Delete a directory when it has no entries left.

	Args:
		directory: Directory whose subdirectories are already resolved.
		dry_run: When True, only report.
		removed: Paths already deleted or planned for deletion.

	Returns:
		True when the directory is gone afterwards.
	"""
	try:
		entries = list_entries(directory)
	except CleanupError as err:
		if err.kind is ErrorKind.CONCURRENT_DISAPPEARANCE:
			logger.info("Directory already gone: %s", directory)
			return True
		raise
	remaining = [path for path in entries if path not in removed]
	if remaining:
		return False
	print(f"{tag('RMDIR', '31')} {directory}")
	if not dry_run:
		try:
			directory.rmdir()
		except FileNotFoundError:
			logger.info("Directory already gone: %s", directory)
		except OSError as exc:
			raise wrap_os_error(exc, directory) from exc
	removed.add(directory)
	return True


#============================================


def remove_empty_dirs(
	directory: Path,
	dry_run: bool = False,
	removed: set[Path] | None = None,
) -> bool:
	"""
	Delete a directory and its descendants that end up empty, bottom-up.

	Every subdirectory is resolved before its parent is judged, so a
	chain of nested empty directories disappears in one call.

	Args:
		directory: Directory to collapse.
		dry_run: When True, only report. Entries found in removed are
			treated as already deleted.
		removed: Optional set collecting deleted paths.

	Returns:
		True when this directory itself was deleted. Missing paths and
		non-directories return False.

	Raises:
		CleanupError: A directory could not be listed, inspected or deleted
			for a reason other than having disappeared.
	"""
	if removed is None:
		removed = set()
	if entry_kind(directory, follow_symlinks=True) != DIR:
		return False
	collapsed = False
	frames = [(directory, iter(_subdirs(directory)))]
	while frames:
		current, children = frames[-1]
		child = next(children, None)
		if child is not None:
			if entry_kind(child) == DIR:
				frames.append((child, iter(_subdirs(child))))
			continue
		frames.pop()
		collapsed = _remove_if_empty(current, dry_run, removed)
	return collapsed
