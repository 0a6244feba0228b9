# ---------------------------------------------------------------------------
# File: render/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Host-side rendering: Node tree -> Tk widgets, plus Pillow image fitting.
# ---------------------------------------------------------------------------

from __future__ import annotations

from .images import fit_image, load_asset, resolve_asset
from .tk_renderer import TkRenderer, plan_main_axis

__all__ = [
	"TkRenderer",
	"fit_image",
	"load_asset",
	"plan_main_axis",
	"resolve_asset",
]
