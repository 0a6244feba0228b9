# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for layoutdemo.
#
# Notes:
#   - Uses lazy exports (PEP 562) so importing the package stays cheap.
#   - Do NOT import from layoutdemo.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Tree + composition
	"Node",
	"Component",
	"render",
	"BuildContext",
	"Theme",

	# Sections
	"ButtonWithText",
	"TitleSection",
	"ButtonSection",
	"TextSection",
	"ImageSection",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"Node": ("layoutdemo.ui.node", "Node"),
	"Component": ("layoutdemo.ui.component", "Component"),
	"render": ("layoutdemo.ui.component", "render"),
	"BuildContext": ("layoutdemo.ui.theme", "BuildContext"),
	"Theme": ("layoutdemo.ui.theme", "Theme"),

	"ButtonWithText": ("layoutdemo.ui.sections", "ButtonWithText"),
	"TitleSection": ("layoutdemo.ui.sections", "TitleSection"),
	"ButtonSection": ("layoutdemo.ui.sections", "ButtonSection"),
	"TextSection": ("layoutdemo.ui.sections", "TextSection"),
	"ImageSection": ("layoutdemo.ui.sections", "ImageSection"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from layoutdemo.ui.node import Node
	from layoutdemo.ui.component import Component, render
	from layoutdemo.ui.theme import BuildContext, Theme
	from layoutdemo.ui.sections import (
		ButtonWithText,
		TitleSection,
		ButtonSection,
		TextSection,
		ImageSection,
	)
