#!/usr/bin/env python3
"""
Core cleaner: validate root -> purge junk files -> collapse empty directories.
"""

from __future__ import annotations

# Standard Library
import enum
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

# PIP3 modules
import yaml

# local repo modules
from .collapser import remove_empty_dirs
from .config import AppConfig
from .console import tag
from .errors import CleanupError, ErrorKind
from .purger import remove_junk_files
from .scanner import DIR, MISSING, entry_kind

logger = logging.getLogger(__name__)

#============================================


class RootStatus(enum.Enum):
	DONE = "done"
	SKIPPED = "skipped"
	FAILED = "failed"


#============================================


@dataclass(slots=True)
class RootResult:
	"""
	Final state of one cleaned root.
	"""

	root: Path
	status: RootStatus
	kind: ErrorKind | None = None
	message: str = ""
	junk_files: list[Path] = field(default_factory=list)
	removed_dirs: list[Path] = field(default_factory=list)

	#============================================
	def to_dict(self) -> dict:
		return {
			"root": str(self.root),
			"status": self.status.value,
			"kind": self.kind.value if self.kind else None,
			"message": self.message,
			"junk_files": [str(path) for path in self.junk_files],
			"removed_dirs": [str(path) for path in self.removed_dirs],
		}


#============================================


@dataclass(slots=True)
class BatchReport:
	"""
	Outcome of cleaning several roots in order.
	"""

	results: list[RootResult] = field(default_factory=list)
	dry_run: bool = False

	#============================================
	@property
	def succeeded(self) -> int:
		return sum(1 for result in self.results if result.status is not RootStatus.FAILED)

	#============================================
	@property
	def failed(self) -> int:
		return sum(1 for result in self.results if result.status is RootStatus.FAILED)

	#============================================
	@property
	def exit_code(self) -> int:
		return 1 if self.failed else 0

	#============================================
	def to_dict(self) -> dict:
		return {
			"dry_run": self.dry_run,
			"succeeded": self.succeeded,
			"failed": self.failed,
			"roots": [result.to_dict() for result in self.results],
		}


#============================================


def write_report(report: BatchReport, report_path: Path) -> Path:
	"""
	Write a batch report as yaml or json, chosen by suffix.

	Args:
		report: Batch outcome.
		report_path: Destination file.

	Returns:
		The written path.
	"""
	report_path.parent.mkdir(parents=True, exist_ok=True)
	payload = report.to_dict()
	with report_path.open("w", encoding="utf-8") as handle:
		if report_path.suffix.lower() in {".yml", ".yaml"}:
			yaml.safe_dump(payload, handle, sort_keys=False)
		else:
			json.dump(payload, handle, indent=2)
	return report_path


#============================================


class DirectoryCleaner:
	"""
	Runs both cleanup phases over each root.
	"""

	#============================================
	def __init__(self, config: AppConfig | None = None) -> None:
		self.config = config or AppConfig()

	#============================================
	def clean(self, root: Path) -> RootResult:
		"""
		Clean one root.

		Args:
			root: Directory to clean.

		Returns:
			DONE result with what was removed, or SKIPPED when the root is
			missing or not a directory.

		Raises:
			CleanupError: The root could not be inspected or either phase
				failed. The collapse phase does not run after a failed purge.
		"""
		kind = entry_kind(root, follow_symlinks=True)
		if kind == MISSING:
			logger.warning("Directory does not exist, skipping: %s", root)
			return RootResult(root=root, status=RootStatus.SKIPPED,
				kind=ErrorKind.SKIP_CONDITION, message="does not exist")
		if kind != DIR:
			logger.warning("Path is not a directory, skipping: %s", root)
			return RootResult(root=root, status=RootStatus.SKIPPED,
				kind=ErrorKind.SKIP_CONDITION, message="not a directory")
		logger.debug("%s: validated", root)
		dry_run = self.config.dry_run
		print(f"{tag('INFO', '34')} Cleaning directory: {root}")

		removed: set[Path] = set()
		print(f"{tag('INFO', '34')} Removing junk files...")
		count = remove_junk_files(root, dry_run=dry_run, removed=removed)
		junk_files = sorted(removed)
		print(f"{tag('INFO', '34')} Removed {count} junk files")
		logger.debug("%s: junk purged", root)

		print(f"{tag('INFO', '34')} Removing empty directories...")
		remove_empty_dirs(root, dry_run=dry_run, removed=removed)
		removed_dirs = sorted(removed.difference(junk_files))
		print(f"{tag('INFO', '34')} Removed {len(removed_dirs)} empty directories")
		logger.debug("%s: collapsed", root)

		print(f"{tag('DONE', '32')} Finished cleaning: {root}")
		return RootResult(
			root=root,
			status=RootStatus.DONE,
			junk_files=junk_files,
			removed_dirs=removed_dirs,
		)

	#============================================
	def run(self, roots: list[Path] | None = None) -> BatchReport:
		"""
		Clean roots one after another.

		A failure is recorded against its root and the batch moves on.

		Args:
			roots: Roots to clean, defaults to the configured roots.

		Returns:
			BatchReport with one result per root.
		"""
		targets = roots if roots is not None else self.config.normalized_roots()
		report = BatchReport(dry_run=self.config.dry_run)
		total = len(targets)
		for index, root in enumerate(targets, start=1):
			if total > 1:
				print("=" * 40)
				print(f"{tag('INFO', '34')} Directory {index}/{total}: {root}")
				print("=" * 40)
			try:
				result = self.clean(root)
			except CleanupError as err:
				logger.error("Failed to clean %s: %s", root, err)
				result = RootResult(
					root=root,
					status=RootStatus.FAILED,
					kind=err.kind,
					message=str(err),
				)
			report.results.append(result)
		return report
