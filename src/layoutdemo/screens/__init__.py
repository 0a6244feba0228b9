from __future__ import annotations

from .lake import APP_TITLE, LayoutDemoApp
from .minimal import MinimalApp, PlainTitle

__all__ = [
	"APP_TITLE",
	"LayoutDemoApp",
	"MinimalApp",
	"PlainTitle",
]
