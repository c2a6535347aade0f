#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path
import json

# PIP3 modules
import yaml

#============================================


def _default_roots() -> list[Path]:
	return []


#============================================


@dataclass(slots=True)
class AppConfig:
	"""
	Runtime configuration settings.

	Attributes:
		roots: Directories to clean, in order.
		dry_run: Only print planned deletions.
		verbose: Verbose logging.
		report_path: Optional YAML or JSON report destination.
	"""
	roots: list[Path] = field(default_factory=_default_roots)
	dry_run: bool = False
	verbose: bool = False
	report_path: Path | None = None

	#============================================
	def normalized_roots(self) -> list[Path]:
		"""
		Normalize user root paths, falling back to the working directory.

		Returns:
			List of absolute Path objects.
		"""
		if not self.roots:
			return [Path.cwd()]
		paths: list[Path] = [root.expanduser().absolute() for root in self.roots]
		return paths


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	if config_path.suffix.lower() in {".yml", ".yaml"}:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = yaml.safe_load(handle)
			return loaded or {}
	with config_path.open("r", encoding="utf-8") as handle:
		return json.load(handle)


#============================================


def apply_user_config(config: AppConfig, user_cfg: dict) -> AppConfig:
	"""
	Copy recognized keys from a user config onto the runtime config.

	Args:
		config: Configuration to update.
		user_cfg: Values loaded by load_user_config.

	Returns:
		The updated configuration.
	"""
	roots = user_cfg.get("roots")
	if isinstance(roots, str):
		roots = [roots]
	if roots:
		config.roots = [Path(str(root)).expanduser() for root in roots]
	if "dry_run" in user_cfg:
		config.dry_run = bool(user_cfg.get("dry_run"))
	if "verbose" in user_cfg:
		config.verbose = bool(user_cfg.get("verbose"))
	if user_cfg.get("report_path"):
		config.report_path = Path(str(user_cfg["report_path"])).expanduser()
	return config
