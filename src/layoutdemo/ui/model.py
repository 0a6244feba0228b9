# ---------------------------------------------------------------------------
# File: model.py
# ---------------------------------------------------------------------------
# Description:
#	Content value types handed from parent to child at construction time.
#
# Notes:
#	- All frozen; they compare by value and are safe as dataclass defaults.
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
from typing import Optional

from .style import BoxFit, Color, Icons


@dataclass(frozen=True, slots=True)
class ScreenConfig:
	app_title: str


@dataclass(frozen=True, slots=True)
class TitleData:
	name: str
	location: str
	rating: str = "41"


@dataclass(frozen=True, slots=True)
class ButtonSpec:
	"""
	One action button. color None means "use the theme's primary color".
	"""
	icon: Icons
	label: str
	color: Optional[Color] = None

	def with_color(self, color: Color) -> "ButtonSpec":
		return ButtonSpec(self.icon, self.label, color)


@dataclass(frozen=True, slots=True)
class TextBlock:
	description: str


@dataclass(frozen=True, slots=True)
class ImageRef:
	asset_path: str
	width: float = 600
	height: float = 240
	fit: BoxFit = BoxFit.cover
