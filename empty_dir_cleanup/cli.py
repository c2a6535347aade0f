#!/usr/bin/env python3
"""
Command line interface for empty-dir-cleanup.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# local repo modules
from .cleaner import BatchReport, DirectoryCleaner, write_report
from .config import AppConfig, apply_user_config, load_user_config
from .console import tag

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Delete junk files (thumbs.db, .DS_Store) and empty directories."
	)
	parser.add_argument(
		"paths",
		nargs="*",
		help="Directories to clean (default: current directory).",
	)
	parser.add_argument(
		"-d",
		"--dry-run",
		dest="dry_run",
		action="store_true",
		help="Only print what would be deleted.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Optional JSON or YAML config file.",
	)
	parser.add_argument(
		"-o",
		"--report",
		dest="report_path",
		help="Write a YAML (.yml/.yaml) or JSON report of every root.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> AppConfig:
	"""
	Build runtime config from args and file.
	"""
	config = AppConfig()
	if args.config_path:
		config_path = Path(args.config_path).expanduser()
		apply_user_config(config, load_user_config(config_path))
	if args.paths:
		config.roots = [Path(p).expanduser() for p in args.paths]
	if args.dry_run:
		config.dry_run = True
	if args.report_path:
		config.report_path = Path(args.report_path).expanduser()
	if args.verbose:
		config.verbose = True
	return config


#============================================


def print_summary(report: BatchReport) -> None:
	print()
	print("=" * 40)
	label = "Dry run complete" if report.dry_run else "Cleanup complete"
	print(f"{tag('DONE', '32')} {label}")
	print(f"Succeeded: {report.succeeded} directories")
	if report.failed:
		print(f"Failed: {report.failed} directories")
	print("=" * 40)


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.

	Returns:
		Process exit code, 1 when any root failed.
	"""
	args = parse_args(argv)
	config = build_config(args)
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	roots = config.normalized_roots()
	noun = "directory" if len(roots) == 1 else "directories"
	print(f"{tag('INFO', '34')} Cleaning {len(roots)} {noun}...")
	cleaner = DirectoryCleaner(config)
	report = cleaner.run(roots)
	print_summary(report)
	if config.report_path:
		written = write_report(report, config.report_path)
		print(f"{tag('INFO', '34')} Report written to {written}")
	return report.exit_code


#============================================


if __name__ == "__main__":
	sys.exit(main())
