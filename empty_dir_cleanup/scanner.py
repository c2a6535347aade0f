#!/usr/bin/env python3
"""
One-level directory enumeration shared by both cleanup phases.
"""

from __future__ import annotations

# Standard Library
import stat
from pathlib import Path

# local repo modules
from .errors import ErrorKind, wrap_os_error

MISSING = "missing"
FILE = "file"
DIR = "dir"
OTHER = "other"

#============================================


def list_entries(directory: Path) -> list[Path]:
	"""
	Materialize the direct entries of a directory.

	Args:
		directory: Directory to enumerate.

	Returns:
		Sorted list of entry paths.

	Raises:
		CleanupError: When the directory cannot be read.
	"""
	try:
		return sorted(directory.iterdir())
	except OSError as exc:
		raise wrap_os_error(exc, directory) from exc


#============================================


def entry_kind(path: Path, follow_symlinks: bool = False) -> str:
	"""
	Classify a path as MISSING, FILE, DIR or OTHER.

	Without follow_symlinks, a symlink to a file is a FILE and a symlink
	to a directory is OTHER, so linked directories are never descended
	into. A path that is gone, including a dangling symlink, is MISSING.

	Args:
		path: Path to inspect.
		follow_symlinks: Classify a symlink by its target, as for roots.

	Returns:
		One of the module kind constants.

	Raises:
		CleanupError: The path could not be inspected, for example
			permission denied on a parent directory.
	"""
	try:
		info = path.stat() if follow_symlinks else path.lstat()
		if stat.S_ISLNK(info.st_mode):
			target = path.stat()
			return FILE if stat.S_ISREG(target.st_mode) else OTHER
	except OSError as exc:
		err = wrap_os_error(exc, path)
		if err.kind is ErrorKind.CONCURRENT_DISAPPEARANCE:
			return MISSING
		raise err from exc
	if stat.S_ISDIR(info.st_mode):
		return DIR
	if stat.S_ISREG(info.st_mode):
		return FILE
	return OTHER


#============================================


def is_text_name(name: str) -> bool:
	"""
	Check that a file name decodes to valid text.

	Undecodable bytes come back from the OS as lone surrogates, which
	cannot be encoded as UTF-8.

	Args:
		name: Base name as returned by pathlib.

	Returns:
		True when the name is valid text.
	"""
	try:
		name.encode("utf-8")
	except UnicodeEncodeError:
		return False
	return True
