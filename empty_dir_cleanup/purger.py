#!/usr/bin/env python3
"""
Junk file purge: first cleanup phase.
"""

from __future__ import annotations

# Standard Library
import logging
from pathlib import Path

# local repo modules
from .console import tag
from .errors import wrap_os_error
from .scanner import DIR, FILE, entry_kind, is_text_name, list_entries

logger = logging.getLogger(__name__)

# exact, case-sensitive base names
JUNK_FILES: tuple[str, ...] = ("thumbs.db", ".DS_Store")
_JUNK_NAMES: frozenset[str] = frozenset(JUNK_FILES)

#============================================


def is_junk_name(name: str) -> bool:
	"""
	Check a base name against the junk denylist.

	Args:
		name: File base name.

	Returns:
		True for an exact denylist match.
	"""
	if not is_text_name(name):
		return False
	return name in _JUNK_NAMES


#============================================


def remove_junk_files(
	directory: Path,
	dry_run: bool = False,
	removed: set[Path] | None = None,
) -> int:
	"""
	Delete every junk file under a directory, depth-first.

	Subdirectories are descended into as they are met, before later
	siblings. Symlinked directories are not followed.

	Args:
		directory: Existing directory to purge.
		dry_run: When True, only report matches.
		removed: Optional set collecting deleted file paths.

	Returns:
		Number of junk files deleted across the subtree.

	Raises:
		CleanupError: A directory could not be listed or a junk file could
			not be deleted. Nothing after the failure is visited.
	"""
	if removed is None:
		removed = set()
	deleted_count = 0
	pending = [iter(list_entries(directory))]
	while pending:
		path = next(pending[-1], None)
		if path is None:
			pending.pop()
			continue
		kind = entry_kind(path)
		if kind == FILE:
			if not is_junk_name(path.name):
				continue
			print(f"{tag('DELETE', '31')} {path}")
			if not dry_run:
				try:
					path.unlink()
				except OSError as exc:
					raise wrap_os_error(exc, path) from exc
			removed.add(path)
			deleted_count += 1
		elif kind == DIR:
			pending.append(iter(list_entries(path)))
	logger.info("Purged %d junk files under %s", deleted_count, directory)
	return deleted_count
