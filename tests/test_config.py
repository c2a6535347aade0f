#!/usr/bin/env python3
"""
Tests for config loading.
"""

import json
from pathlib import Path

from empty_dir_cleanup.config import AppConfig, apply_user_config, load_user_config


def test_yaml_config(tmp_path: Path):
	cfg_path = tmp_path / "config.yaml"
	cfg_path.write_text("roots:\n  - /data/photos\ndry_run: true\n", encoding="utf-8")
	config = apply_user_config(AppConfig(), load_user_config(cfg_path))
	assert config.roots == [Path("/data/photos")]
	assert config.dry_run is True


def test_json_config(tmp_path: Path):
	cfg_path = tmp_path / "config.json"
	cfg_path.write_text(json.dumps({"roots": "/data", "report_path": "out.json"}), encoding="utf-8")
	config = apply_user_config(AppConfig(), load_user_config(cfg_path))
	assert config.roots == [Path("/data")]
	assert config.report_path == Path("out.json")


def test_missing_config_is_empty(tmp_path: Path):
	assert load_user_config(tmp_path / "nope.yaml") == {}
	assert load_user_config(None) == {}


def test_empty_yaml_is_empty(tmp_path: Path):
	cfg_path = tmp_path / "config.yml"
	cfg_path.write_text("", encoding="utf-8")
	assert load_user_config(cfg_path) == {}


def test_default_root_is_cwd(tmp_path: Path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	assert AppConfig().normalized_roots() == [Path.cwd()]
