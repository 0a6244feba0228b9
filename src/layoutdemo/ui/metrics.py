# ---------------------------------------------------------------------------
# File: metrics.py
# ---------------------------------------------------------------------------
# Description:
#	Headless text measurement and word wrapping for node trees.
#
# Notes:
#	- Glyph widths come from Pillow's bundled default font, so results do
#	  not depend on a display or installed system fonts.
#	- Only widths are modelled. Heights are line counts.
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
from functools import lru_cache
from typing import Optional

from PIL import ImageFont

from .node import Node
from .style import DEFAULT_FONT_SIZE, TextStyle


@dataclass(frozen=True, slots=True)
class TextLayout:
	data: str
	lines: tuple[str, ...]
	max_width: Optional[float]

	@property
	def line_count(self) -> int:
		return len(self.lines)


@lru_cache(maxsize=16)
def _font(size: float):
	return ImageFont.load_default(size=size)


def text_width(text: str, font_size: float = DEFAULT_FONT_SIZE) -> float:
	return float(_font(font_size).getlength(text))


def wrap_text(text: str, font_size: float = DEFAULT_FONT_SIZE, max_width: Optional[float] = None) -> list[str]:
	"""
	Greedy word wrap. A word wider than max_width gets a line of its own.
	Explicit newlines always break.
	"""
	if max_width is None or max_width <= 0:
		return text.split("\n")

	lines: list[str] = []
	for paragraph in text.split("\n"):
		current = ""
		for word in paragraph.split():
			candidate = f"{current} {word}" if current else word
			if current and text_width(candidate, font_size) > max_width:
				lines.append(current)
				current = word
			else:
				current = candidate
		lines.append(current)
	return lines


def layout_lines(node: Node, viewport_width: float) -> list[TextLayout]:
	"""
	Wrap every text node in the tree as it would lay out at viewport_width.
	"""
	out: list[TextLayout] = []
	_layout(node, float(viewport_width), out)
	return out


def _layout(node: Node, width: float, out: list[TextLayout]) -> None:
	if node.kind == "text":
		style: TextStyle = node.get("style") or TextStyle()
		size = style.font_size or DEFAULT_FONT_SIZE
		data = node.get("data", "")
		if node.get("soft_wrap", True):
			lines = wrap_text(data, size, width)
		else:
			lines = data.split("\n")
		max_lines = node.get("max_lines")
		if max_lines:
			lines = lines[:max_lines]
		out.append(TextLayout(data, tuple(lines), width))
		return

	if node.kind == "padding":
		insets = node.get("padding")
		width = max(0.0, width - insets.horizontal)

	elif node.kind == "sized_box" and node.get("width") is not None:
		width = float(node.get("width"))

	elif node.kind == "row":
		_layout_row(node, width, out)
		return

	for c in node.children:
		_layout(c, width, out)


def _layout_row(node: Node, width: float, out: list[TextLayout]) -> None:
	"""
	Non-expanded children take their natural width; expanded children share
	what is left by flex.
	"""
	flexes = [flex_of(c) for c in node.children]
	total_flex = sum(flexes)
	fixed = sum(_natural_width(c) for c, f in zip(node.children, flexes) if f == 0)

	remaining = max(0.0, width - fixed)
	for c, f in zip(node.children, flexes):
		if f > 0:
			share = remaining * f / total_flex
			_layout(c, share, out)
		else:
			_layout(c, _natural_width(c), out)


def flex_of(node: Node) -> int:
	"""
	Flex factor of a row child; 0 for non-expanded (and flex=0) children.
	"""
	if node.kind != "expanded":
		return 0
	return max(0, int(node.get("flex", 1)))


def _natural_width(node: Node) -> float:
	if node.kind == "text":
		style: TextStyle = node.get("style") or TextStyle()
		size = style.font_size or DEFAULT_FONT_SIZE
		return max((text_width(line, size) for line in node.get("data", "").split("\n")), default=0.0)
	if node.kind == "icon":
		return float(node.get("size", 24))
	if node.kind in ("image", "sized_box") and node.get("width") is not None:
		return float(node.get("width"))
	if node.kind == "padding":
		return node.get("padding").horizontal + sum(_natural_width(c) for c in node.children)
	if node.kind == "row":
		return sum(_natural_width(c) for c in node.children)
	return max((_natural_width(c) for c in node.children), default=0.0)
