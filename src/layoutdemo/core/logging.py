# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for layoutdemo (stdlib logging).
#
# Notes:
#	- Safe to call before any window exists (no Tk dependencies).
#	- Idempotent initialization: repeated calls with the same settings
#	  leave the root logger untouched.
#
#	Supported cfg keys (dotted key wins over the flat one):
#	- "logging.level"   / "log_level"    (default: "INFO")
#	- "logging.console" / "log_console"  (default: True)
#	- "logging.file"    / "log_file"     (default: None)
#	- "logging.format"  / "log_format"   (default: DEFAULT_FORMAT)
#	- "logging.datefmt" / "log_datefmt"  (default: DEFAULT_DATEFMT)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# 10/18/2026	layoutdemo maintainers		Date format read from cfg
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_BASE = "layoutdemo.app"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_SIGNATURE: tuple[Any, ...] | None = None


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()          -> layoutdemo.app
		get_app_logger("render")  -> layoutdemo.app.render
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_BASE}.{component}")
	return logging.getLogger(APP_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the root logger from cfg.

	cfg is anything exposing get(key, default) (AppConfig, dict) or None.
	"""
	global _SIGNATURE

	level = _coerce_level(_lookup(cfg, "level", "INFO"))
	console = bool(_lookup(cfg, "console", True))
	log_file = _lookup(cfg, "file", None)
	fmt = str(_lookup(cfg, "format", DEFAULT_FORMAT))
	datefmt = str(_lookup(cfg, "datefmt", DEFAULT_DATEFMT))

	signature = (level, console, str(log_file) if log_file else None, fmt, datefmt)
	if _SIGNATURE == signature:
		return

	root = logging.getLogger()
	root.setLevel(level)

	for h in list(root.handlers):
		root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(str(log_file)))
		os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(str(log_file), mode="a", encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)

	_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _lookup(cfg: Any | None, key: str, default: Any) -> Any:
	if cfg is None:
		return default

	value = cfg.get(f"logging.{key}", None)
	if value is None:
		value = cfg.get(f"log_{key}", default)
	return value


def _coerce_level(level: Any) -> int:
	"""
	Accept ints, digit strings and level names ("debug", "WARNING").
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		return getattr(logging, val, logging.INFO)

	return logging.INFO


def _reset_logging_for_tests() -> None:
	global _SIGNATURE
	_SIGNATURE = None
