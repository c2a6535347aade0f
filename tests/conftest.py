"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


def deny_unlink(monkeypatch, blocked_dir_name: str) -> None:
	"""
	Make Path.unlink fail with PermissionError inside a named directory.
	"""
	real_unlink = Path.unlink

	def fake_unlink(self, *args, **kwargs):
		if self.parent.name == blocked_dir_name:
			raise PermissionError(13, "Permission denied", str(self))
		return real_unlink(self, *args, **kwargs)

	monkeypatch.setattr(Path, "unlink", fake_unlink)


def deny_stat(monkeypatch, blocked_dir_name: str) -> None:
	"""
	Make Path.stat and Path.lstat fail with PermissionError for entries
	inside a named directory.
	"""
	real_stat = Path.stat

	def fake_stat(self, *args, **kwargs):
		if self.parent.name == blocked_dir_name:
			raise PermissionError(13, "Permission denied", str(self))
		return real_stat(self, *args, **kwargs)

	monkeypatch.setattr(Path, "stat", fake_stat)
	monkeypatch.setattr(Path, "lstat", lambda self: fake_stat(self, follow_symlinks=False))
