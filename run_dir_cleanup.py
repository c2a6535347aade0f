#!/usr/bin/env python3
"""
Repo-root runner for empty_dir_cleanup.

Examples:
	python run_dir_cleanup.py
	python run_dir_cleanup.py ~/Pictures ~/Downloads --dry-run
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from empty_dir_cleanup.cli import main as cli_main

	return cli_main()


if __name__ == "__main__":
	sys.exit(main())
