#!/usr/bin/env python3
"""
Error kinds raised while cleaning a root.
"""

from __future__ import annotations

# Standard Library
import enum
from pathlib import Path

#============================================


class ErrorKind(enum.Enum):
	"""
	Tagged reason attached to every cleanup failure or skip.
	"""

	SKIP_CONDITION = "skip_condition"
	CONCURRENT_DISAPPEARANCE = "concurrent_disappearance"
	IO_FAILURE = "io_failure"


#============================================


class CleanupError(RuntimeError):
	"""
	Filesystem failure tied to the path that caused it.

	Attributes:
		kind: Error classification.
		path: Path being enumerated or deleted.
	"""

	def __init__(self, kind: ErrorKind, path: Path, message: str = "") -> None:
		self.kind = kind
		self.path = path
		text = message or kind.value
		super().__init__(f"{path}: {text}")


#============================================


def classify_os_error(exc: OSError) -> ErrorKind:
	"""
	Map an OSError onto an ErrorKind.

	Args:
		exc: Error raised by a filesystem call.

	Returns:
		CONCURRENT_DISAPPEARANCE when the path is gone, IO_FAILURE otherwise.
	"""
	if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
		return ErrorKind.CONCURRENT_DISAPPEARANCE
	return ErrorKind.IO_FAILURE


#============================================


def wrap_os_error(exc: OSError, path: Path) -> CleanupError:
	"""
	Build a CleanupError for a failed filesystem call.
	"""
	message = exc.strerror or str(exc)
	return CleanupError(classify_os_error(exc), path, message)
