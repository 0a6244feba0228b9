# ---------------------------------------------------------------------------
# File: tk_renderer.py
# ---------------------------------------------------------------------------
# Description:
#	Realizes a Node tree as Tk/ttk widgets.
#
# Notes:
#	- One builder per node kind. Builders create widgets but never place
#	  themselves; the parent builder decides geometry (pack/grid).
#	- row/column use grid. Main-axis free space goes to weighted gap
#	  cells (see plan_main_axis); expanded children take it instead.
#	- Soft-wrapped text tracks its container width via <Configure>.
#	- A missing asset is logged and drawn as a same-size placeholder.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# 10/18/2026	layoutdemo maintainers		Scroll view lifted from App scrollable root
# 10/18/2026	layoutdemo maintainers		Wrap tracking uses the parent's own inset; reset per mount
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal, Optional

import tkinter as tk
from tkinter import ttk

from PIL import ImageTk, UnidentifiedImageError

from layoutdemo.core.logging import get_app_logger
from layoutdemo.ui.metrics import flex_of
from layoutdemo.ui.node import Node
from layoutdemo.ui.style import (
	CrossAxisAlignment,
	DEFAULT_FONT_SIZE,
	FontWeight,
	MainAxisAlignment,
	MainAxisSize,
	TextStyle,
)
from layoutdemo.ui.theme import Theme

from .images import fit_image, load_asset


log = get_app_logger("render")

APP_BAR_HEIGHT = 56
APP_BAR_FONT_SIZE = 20
PLACEHOLDER_BG = "#BDBDBD"


# ---------------------------------------------------------------------------
# Main-axis planning (pure)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Slot:
	"""
	One grid cell along a flex main axis.

	kind:	"child" (index = child index) or "gap" (index = None)
	weight:	grid weight; 0 means natural size
	"""
	kind: Literal["child", "gap"]
	weight: int
	index: Optional[int] = None


def plan_main_axis(
	flexes: list[int],
	alignment: MainAxisAlignment,
	size: MainAxisSize = MainAxisSize.max,
) -> list[Slot]:
	"""
	Lay children and gap cells along the main axis.

	flexes[i] > 0 marks an expanded child. When any child is expanded, or
	the axis is min-sized, there is no free space and gaps are omitted.
	"""
	n = len(flexes)
	children = [Slot("child", f, i) for i, f in enumerate(flexes)]

	if n == 0 or size is MainAxisSize.min or any(f > 0 for f in flexes):
		return children

	if alignment is MainAxisAlignment.start:
		return children + [Slot("gap", 1)]
	if alignment is MainAxisAlignment.end:
		return [Slot("gap", 1)] + children
	if alignment is MainAxisAlignment.center:
		return [Slot("gap", 1)] + children + [Slot("gap", 1)]

	if alignment is MainAxisAlignment.space_between:
		edge, between = 0, 1
	elif alignment is MainAxisAlignment.space_around:
		edge, between = 1, 2
	else:
		edge, between = 1, 1

	slots: list[Slot] = []
	if edge:
		slots.append(Slot("gap", edge))
	for i, c in enumerate(children):
		if i:
			slots.append(Slot("gap", between))
		slots.append(c)
	if edge:
		slots.append(Slot("gap", edge))
	return slots


def cross_axis_sticky(horizontal: bool, alignment: CrossAxisAlignment) -> str:
	"""
	grid sticky value for a child's cross axis.
	"""
	if horizontal:
		return {
			CrossAxisAlignment.start: "n",
			CrossAxisAlignment.end: "s",
			CrossAxisAlignment.center: "",
			CrossAxisAlignment.stretch: "ns",
		}[alignment]
	return {
		CrossAxisAlignment.start: "w",
		CrossAxisAlignment.end: "e",
		CrossAxisAlignment.center: "",
		CrossAxisAlignment.stretch: "ew",
	}[alignment]


def wants_full_width(node: Node) -> bool:
	"""
	True when the node stretches across its parent's width (full-size rows
	and wrapping paragraphs), looking through single-child wrappers.
	"""
	if node.kind == "row":
		return node.get("main_axis_size", MainAxisSize.max) is MainAxisSize.max
	if node.kind == "text":
		return bool(node.get("soft_wrap", True))
	if node.kind in ("scroll_view", "scaffold", "app_bar"):
		return True
	if node.kind == "sized_box" and node.get("width") is not None:
		return False
	if node.kind in ("padding", "expanded", "sized_box", "center") and node.child is not None:
		return wants_full_width(node.child)
	return False


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class TkRenderer:
	"""
	TkRenderer

	Turns a Node tree into widgets under a Tk parent.
	"""

	def __init__(
		self,
		theme: Theme | None = None,
		*,
		asset_root: Path | str | None = None,
		viewport_width: int = 600,
	) -> None:
		self.theme = theme or Theme()
		self.asset_root = asset_root
		self.viewport_width = int(viewport_width)

		# per padding frame: its own horizontal padding (for <Configure>
		# widths) and the total from the viewport down (initial estimate)
		self._own_insets: dict[str, int] = {}
		self._total_insets: dict[str, int] = {}

		self._builders: dict[str, Callable[[Node, tk.Misc], tk.Widget]] = {
			"text": self._build_text,
			"icon": self._build_icon,
			"row": self._build_flex,
			"column": self._build_flex,
			"padding": self._build_padding,
			"expanded": self._build_expanded,
			"sized_box": self._build_sized_box,
			"center": self._build_center,
			"image": self._build_image,
			"scroll_view": self._build_scroll_view,
			"app_bar": self._build_app_bar,
			"scaffold": self._build_scaffold,
			"app": self._build_app,
		}

	def mount(self, node: Node, parent: tk.Misc) -> tk.Widget:
		"""
		Build the tree and pack its root to fill parent.
		"""
		self._own_insets.clear()
		self._total_insets.clear()

		widget = self.build(node, parent)
		widget.pack(fill="both", expand=True)
		return widget

	def build(self, node: Node, parent: tk.Misc) -> tk.Widget:
		builder = self._builders.get(node.kind)
		if builder is None:
			raise ValueError(f"Unknown node kind: {node.kind!r}")
		return builder(node, parent)

	# -----------------------------------------------------------------------
	# Leaves
	# -----------------------------------------------------------------------

	def _font(self, style: TextStyle) -> tuple[str, int, str]:
		size = style.font_size or DEFAULT_FONT_SIZE
		weight = (style.font_weight or FontWeight.normal).value
		# negative size = pixels
		return (self.theme.font_family, -int(round(size)), weight)

	def _build_text(self, node: Node, parent: tk.Misc) -> tk.Widget:
		style: TextStyle = node.get("style") or TextStyle()
		color = style.color or self.theme.text_color

		label = ttk.Label(
			parent,
			text=node.get("data", ""),
			font=self._font(style),
			foreground=color.hex,
			justify="left",
		)

		if node.get("soft_wrap", True):
			total = self._total_insets.get(str(parent), 0)
			inset = self._own_insets.get(str(parent), 0)
			label.configure(wraplength=max(1, self.viewport_width - total))

			def _track(event: tk.Event, w: ttk.Label = label, inset: int = inset) -> None:
				w.configure(wraplength=max(1, event.width - inset))

			parent.bind("<Configure>", _track, add="+")

		return label

	def _build_icon(self, node: Node, parent: tk.Misc) -> tk.Widget:
		color = node.get("color") or self.theme.text_color
		size = node.get("size", 24)
		return ttk.Label(
			parent,
			text=node.get("icon").value,
			font=(self.theme.font_family, -int(size)),
			foreground=color.hex,
		)

	def _build_image(self, node: Node, parent: tk.Misc) -> tk.Widget:
		asset = node.get("asset")
		width = int(node.get("width") or 0)
		height = int(node.get("height") or 0)

		try:
			source = load_asset(self.asset_root, asset)
		except (OSError, UnidentifiedImageError) as ex:
			log.error("Unable to load asset %r: %s", asset, ex)
			return self._placeholder(parent, width or 100, height or 100, asset)

		box = (width or source.width, height or source.height)
		fitted = fit_image(source, box, node.get("fit"))

		photo = ImageTk.PhotoImage(fitted, master=parent)
		label = ttk.Label(parent, image=photo)
		label.image = photo  # type: ignore[attr-defined]  # keep a reference or Tk drops it
		return label

	def _placeholder(self, parent: tk.Misc, width: int, height: int, asset: str) -> tk.Widget:
		frame = tk.Frame(parent, width=width, height=height, bg=PLACEHOLDER_BG)
		frame.pack_propagate(False)
		tk.Label(frame, text=f"missing asset\n{asset}", bg=PLACEHOLDER_BG).pack(expand=True)
		return frame

	# -----------------------------------------------------------------------
	# Flex
	# -----------------------------------------------------------------------

	def _build_flex(self, node: Node, parent: tk.Misc) -> tk.Widget:
		horizontal = node.kind == "row"
		frame = ttk.Frame(parent)

		flexes = [flex_of(c) for c in node.children]
		slots = plan_main_axis(
			flexes,
			node.get("main_axis_alignment", MainAxisAlignment.start),
			node.get("main_axis_size", MainAxisSize.max),
		)
		sticky = cross_axis_sticky(horizontal, node.get("cross_axis_alignment", CrossAxisAlignment.center))

		for pos, slot in enumerate(slots):
			if horizontal:
				frame.columnconfigure(pos, weight=slot.weight)
			else:
				frame.rowconfigure(pos, weight=slot.weight)

			if slot.kind == "gap":
				continue

			child = node.children[slot.index]
			widget = self.build(child, frame)

			cell_sticky = sticky
			if horizontal:
				if slot.weight:
					cell_sticky += "ew"
				widget.grid(row=0, column=pos, sticky=cell_sticky)
			else:
				if slot.weight:
					cell_sticky += "ns"
				if wants_full_width(child) and "ew" not in cell_sticky:
					cell_sticky = cell_sticky.replace("w", "").replace("e", "") + "ew"
				widget.grid(row=pos, column=0, sticky=cell_sticky)

		if horizontal:
			frame.rowconfigure(0, weight=1)
		else:
			frame.columnconfigure(0, weight=1)

		return frame

	def _build_expanded(self, node: Node, parent: tk.Misc) -> tk.Widget:
		# flex is read by the enclosing row/column
		return self.build(node.child, parent)

	# -----------------------------------------------------------------------
	# Single-child wrappers
	# -----------------------------------------------------------------------

	def _build_padding(self, node: Node, parent: tk.Misc) -> tk.Widget:
		insets = node.get("padding")
		pad = (int(insets.left), int(insets.top), int(insets.right), int(insets.bottom))

		frame = ttk.Frame(parent, padding=pad)
		self._own_insets[str(frame)] = int(insets.horizontal)
		self._total_insets[str(frame)] = self._total_insets.get(str(parent), 0) + int(insets.horizontal)

		child = self.build(node.child, frame)
		child.pack(fill="x" if wants_full_width(node.child) else "none", expand=True)
		return frame

	def _build_sized_box(self, node: Node, parent: tk.Misc) -> tk.Widget:
		width = node.get("width")
		height = node.get("height")

		frame = ttk.Frame(parent)
		if width is not None:
			frame.configure(width=int(width))
		if height is not None:
			frame.configure(height=int(height))
		if width is not None or height is not None:
			frame.pack_propagate(False)

		if node.child is not None:
			self.build(node.child, frame).pack(fill="both", expand=True)
		return frame

	def _build_center(self, node: Node, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent)
		self.build(node.child, frame).pack(expand=True)
		return frame

	def _build_scroll_view(self, node: Node, parent: tk.Misc) -> tk.Widget:
		"""
		Canvas + inner Frame + Scrollbar, inner frame kept at canvas width.
		"""
		container = ttk.Frame(parent)

		canvas = tk.Canvas(container, highlightthickness=0, bg=self.theme.background_color.hex)
		v_scroll = ttk.Scrollbar(container, orient="vertical", command=canvas.yview)

		inner = ttk.Frame(canvas)
		window_id = canvas.create_window((0, 0), window=inner, anchor="nw")

		def _on_inner_configure(_event: tk.Event) -> None:
			canvas.configure(scrollregion=canvas.bbox("all"))

		def _on_canvas_configure(event: tk.Event) -> None:
			canvas.itemconfigure(window_id, width=event.width)

		inner.bind("<Configure>", _on_inner_configure)
		canvas.bind("<Configure>", _on_canvas_configure)
		canvas.configure(yscrollcommand=v_scroll.set)

		canvas.pack(side="left", fill="both", expand=True)
		v_scroll.pack(side="right", fill="y")

		def _on_mousewheel(event: tk.Event) -> None:
			delta = getattr(event, "delta", 0)
			if delta:
				canvas.yview_scroll(int(-1 * (delta / 120)), "units")

		canvas.bind_all("<MouseWheel>", _on_mousewheel)

		self.build(node.child, inner).pack(fill="x", expand=True)
		return container

	# -----------------------------------------------------------------------
	# Page shell
	# -----------------------------------------------------------------------

	def _build_app_bar(self, node: Node, parent: tk.Misc) -> tk.Widget:
		bg = self.theme.primary_color.hex
		bar = tk.Frame(parent, height=APP_BAR_HEIGHT, bg=bg)
		bar.pack_propagate(False)

		title = node.child.get("data", "") if node.child is not None else ""
		tk.Label(
			bar,
			text=title,
			bg=bg,
			fg=self.theme.on_primary_color.hex,
			font=(self.theme.font_family, -APP_BAR_FONT_SIZE),
			anchor="w",
		).pack(side="left", fill="both", expand=True, padx=(16, 16))
		return bar

	def _build_scaffold(self, node: Node, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent)

		children = list(node.children)
		if node.get("has_app_bar", False):
			bar, body = children
			self.build(bar, frame).pack(side="top", fill="x")
		else:
			(body,) = children

		self.build(body, frame).pack(side="top", fill="both", expand=True)
		return frame

	def _build_app(self, node: Node, parent: tk.Misc) -> tk.Widget:
		# title is applied by the window owner (App.show)
		return self.build(node.child, parent)
