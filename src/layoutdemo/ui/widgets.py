# ---------------------------------------------------------------------------
# File: widgets.py
# ---------------------------------------------------------------------------
# Description:
#	Primitive node factories (the composition vocabulary).
#
# Notes:
#	- Pure functions: inputs in, Node out. Nothing is validated; odd input
#	  renders however the renderer chooses.
#	- Node kinds produced here are the full set TkRenderer understands.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterable, Optional

from .node import Node, make_props
from .style import (
	BoxFit,
	Color,
	CrossAxisAlignment,
	EdgeInsets,
	Icons,
	MainAxisAlignment,
	MainAxisSize,
	TextStyle,
)


NODE_KINDS = (
	"text",
	"icon",
	"row",
	"column",
	"padding",
	"expanded",
	"sized_box",
	"center",
	"image",
	"scroll_view",
	"app_bar",
	"scaffold",
	"app",
)


def text(
	data: str,
	*,
	style: Optional[TextStyle] = None,
	soft_wrap: bool = True,
	max_lines: Optional[int] = None,
) -> Node:
	return Node("text", make_props(data=data, style=style or TextStyle(), soft_wrap=soft_wrap, max_lines=max_lines))


def icon(glyph: Icons, *, color: Optional[Color] = None, size: float = 24) -> Node:
	return Node("icon", make_props(icon=glyph, color=color, size=size))


def _flex(
	kind: str,
	children: Iterable[Node],
	main_axis_alignment: MainAxisAlignment,
	cross_axis_alignment: CrossAxisAlignment,
	main_axis_size: MainAxisSize,
) -> Node:
	return Node(
		kind,
		make_props(
			main_axis_alignment=main_axis_alignment,
			cross_axis_alignment=cross_axis_alignment,
			main_axis_size=main_axis_size,
		),
		tuple(children),
	)


def row(
	children: Iterable[Node],
	*,
	main_axis_alignment: MainAxisAlignment = MainAxisAlignment.start,
	cross_axis_alignment: CrossAxisAlignment = CrossAxisAlignment.center,
	main_axis_size: MainAxisSize = MainAxisSize.max,
) -> Node:
	return _flex("row", children, main_axis_alignment, cross_axis_alignment, main_axis_size)


def column(
	children: Iterable[Node],
	*,
	main_axis_alignment: MainAxisAlignment = MainAxisAlignment.start,
	cross_axis_alignment: CrossAxisAlignment = CrossAxisAlignment.center,
	main_axis_size: MainAxisSize = MainAxisSize.max,
) -> Node:
	return _flex("column", children, main_axis_alignment, cross_axis_alignment, main_axis_size)


def padding(child: Node, insets: EdgeInsets) -> Node:
	return Node("padding", make_props(padding=insets), (child,))


def expanded(child: Node, *, flex: int = 1) -> Node:
	return Node("expanded", make_props(flex=flex), (child,))


def sized_box(
	child: Optional[Node] = None,
	*,
	width: Optional[float] = None,
	height: Optional[float] = None,
) -> Node:
	return Node("sized_box", make_props(width=width, height=height), (child,) if child is not None else ())


def center(child: Node) -> Node:
	return Node("center", (), (child,))


def image_asset(
	asset_path: str,
	*,
	width: Optional[float] = None,
	height: Optional[float] = None,
	fit: Optional[BoxFit] = None,
) -> Node:
	return Node("image", make_props(asset=asset_path, width=width, height=height, fit=fit))


def scroll_view(child: Node) -> Node:
	"""
	Vertically scrollable container.
	"""
	return Node("scroll_view", (), (child,))


def app_bar(title: Node) -> Node:
	return Node("app_bar", (), (title,))


def scaffold(*, body: Node, bar: Optional[Node] = None) -> Node:
	"""
	Page shell. children is (bar, body) when a bar is given, else (body,).
	"""
	children = (bar, body) if bar is not None else (body,)
	return Node("scaffold", make_props(has_app_bar=bar is not None), children)


def app_root(*, title: str, home: Node) -> Node:
	"""
	Outermost node; title becomes the window title.
	"""
	return Node("app", make_props(title=title), (home,))
