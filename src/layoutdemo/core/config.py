# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Light config wrapper shared by the App shell, logging and theming.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


DEFAULT_OPTIONS: dict[str, Any] = {
	"width": 600,
	"height": 900,
	"ttk_theme": "arc",
	"primary_color": "#2196F3",
	"asset_root": None,
	"log_level": "INFO",
}


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Read-only view over an options dict, falling back to DEFAULT_OPTIONS.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is not None and key in self.options:
			return self.options[key]
		return DEFAULT_OPTIONS.get(key, default)
