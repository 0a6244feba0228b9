# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for layoutdemo (logging, config).
#
# Notes:
#	Keep this lightweight. No Tk imports here.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import AppConfig, DEFAULT_OPTIONS
from .logging import init_logging, get_app_logger

__all__ = [
	"AppConfig",
	"DEFAULT_OPTIONS",
	"get_app_logger",
	"init_logging",
]
