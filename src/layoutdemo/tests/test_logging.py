# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for layoutdemo.core.logging and AppConfig.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Root handlers are saved/restored so pytest's own capture survives.
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from layoutdemo.core.config import AppConfig, DEFAULT_OPTIONS
from layoutdemo.core.logging import get_app_logger, init_logging


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
	root = logging.getLogger()
	saved_handlers = list(root.handlers)
	saved_level = root.level
	try:
		yield root
	finally:
		for h in list(root.handlers):
			root.removeHandler(h)
			if h not in saved_handlers:
				h.close()
		for h in saved_handlers:
			root.addHandler(h)
		root.setLevel(saved_level)


def test_get_app_logger_names():
	assert get_app_logger().name == "layoutdemo.app"
	assert get_app_logger("render").name == "layoutdemo.app.render"


def test_init_logging_sets_level_from_flat_key(root_logger):
	init_logging({"log_level": "debug"})
	assert root_logger.level == logging.DEBUG


def test_init_logging_prefers_dotted_key(root_logger):
	init_logging({"logging.level": "WARNING", "log_level": "DEBUG"})
	assert root_logger.level == logging.WARNING


def test_init_logging_is_idempotent(root_logger):
	cfg = {"log_level": "INFO"}
	init_logging(cfg)
	handlers = list(root_logger.handlers)

	init_logging(cfg)

	assert root_logger.handlers == handlers


def test_init_logging_writes_file(root_logger, tmp_path: Path):
	log_file = tmp_path / "logs" / "app.log"
	init_logging({"log_console": False, "log_file": str(log_file)})

	get_app_logger("test").warning("hello file")
	for h in root_logger.handlers:
		h.flush()

	assert log_file.exists()
	assert "hello file" in log_file.read_text(encoding="utf-8")


def test_init_logging_accepts_app_config(root_logger):
	init_logging(AppConfig({"log_level": 30}))
	assert root_logger.level == logging.WARNING


def test_app_config_falls_back_to_defaults():
	cfg = AppConfig({"width": 320})
	assert cfg.get("width") == 320
	assert cfg.get("height") == DEFAULT_OPTIONS["height"]
	assert cfg.get("missing", "x") == "x"
	assert AppConfig().get("ttk_theme") == "arc"


def test_init_logging_reads_date_format(root_logger, tmp_path: Path):
	init_logging({"log_console": False, "log_file": str(tmp_path / "app.log"), "log_datefmt": "%Y"})

	(handler,) = root_logger.handlers
	assert handler.formatter.datefmt == "%Y"


def test_init_logging_reconfigures_when_date_format_changes(root_logger):
	init_logging({"logging.datefmt": "%H:%M"})
	before = list(root_logger.handlers)

	init_logging({"logging.datefmt": "%d.%m.%Y"})

	assert root_logger.handlers != before
	assert {h.formatter.datefmt for h in root_logger.handlers} == {"%d.%m.%Y"}
