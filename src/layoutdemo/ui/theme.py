# ---------------------------------------------------------------------------
# File: theme.py
# ---------------------------------------------------------------------------
# Description:
#	Ambient styling (Theme) and the read-only BuildContext that threads it
#	through every build call.
#
# Notes:
#	- There is no global theme. Whoever starts a render pass creates the
#	  context and passes it down.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .style import Color, Colors


@dataclass(frozen=True, slots=True)
class Theme:
	primary_color: Color = Colors.blue
	on_primary_color: Color = Colors.white
	background_color: Color = Colors.white
	text_color: Color = Color(0xDD000000)
	font_family: str = "Helvetica"

	# ttk theme name handed to ttkthemes
	ttk_theme: str = "arc"


@dataclass(frozen=True, slots=True)
class BuildContext:
	theme: Theme = field(default_factory=Theme)


def theme_from_config(cfg: Any | None) -> Theme:
	"""
	Build a Theme from anything exposing get(key, default).
	"""
	if cfg is None:
		return Theme()

	primary = cfg.get("primary_color", None)
	ttk_theme = cfg.get("ttk_theme", None)
	font_family = cfg.get("font_family", None)

	base = Theme()
	return Theme(
		primary_color=Color.from_hex(primary) if isinstance(primary, str) else (primary or base.primary_color),
		on_primary_color=base.on_primary_color,
		background_color=base.background_color,
		text_color=base.text_color,
		font_family=font_family or base.font_family,
		ttk_theme=ttk_theme or base.ttk_theme,
	)
