# ---------------------------------------------------------------------------
# File: test_tk_renderer.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for TkRenderer.
#
# Notes:
#	- Main-axis planning and fill decisions are pure and always run.
#	- Mounting tests need a display and use the tk_root fixture (skips
#	  headless).
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PIL import Image
from tkinter import ttk

from layoutdemo.render.tk_renderer import (
	Slot,
	TkRenderer,
	cross_axis_sticky,
	plan_main_axis,
	wants_full_width,
)
from layoutdemo.screens import LayoutDemoApp, MinimalApp
from layoutdemo.screens.lake import LAKE_DESCRIPTION
from layoutdemo.ui.component import render
from layoutdemo.ui.node import Node
from layoutdemo.ui.sections import ImageSection, SECTION_PADDING, TextSection
from layoutdemo.ui.style import CrossAxisAlignment, EdgeInsets, MainAxisAlignment, MainAxisSize
from layoutdemo.ui.widgets import column, padding, row, text


# ---------------------------------------------------------------------------
# Pure planning
# ---------------------------------------------------------------------------

def test_space_evenly_puts_equal_gaps_at_edges_and_between():
	slots = plan_main_axis([0, 0, 0], MainAxisAlignment.space_evenly)

	assert [s.kind for s in slots] == ["gap", "child", "gap", "child", "gap", "child", "gap"]
	assert {s.weight for s in slots if s.kind == "gap"} == {1}
	assert [s.index for s in slots if s.kind == "child"] == [0, 1, 2]


def test_space_around_doubles_inner_gaps():
	slots = plan_main_axis([0, 0], MainAxisAlignment.space_around)
	assert [s.weight for s in slots] == [1, 0, 2, 0, 1]


def test_space_between_has_no_edge_gaps():
	slots = plan_main_axis([0, 0], MainAxisAlignment.space_between)
	assert [s.kind for s in slots] == ["child", "gap", "child"]


def test_start_end_center_gap_placement():
	assert plan_main_axis([0], MainAxisAlignment.start) == [Slot("child", 0, 0), Slot("gap", 1)]
	assert plan_main_axis([0], MainAxisAlignment.end) == [Slot("gap", 1), Slot("child", 0, 0)]
	assert [s.kind for s in plan_main_axis([0], MainAxisAlignment.center)] == ["gap", "child", "gap"]


def test_expanded_child_absorbs_free_space():
	slots = plan_main_axis([1, 0, 0], MainAxisAlignment.space_evenly)
	assert slots == [Slot("child", 1, 0), Slot("child", 0, 1), Slot("child", 0, 2)]


def test_min_size_axis_has_no_gaps():
	slots = plan_main_axis([0, 0], MainAxisAlignment.center, MainAxisSize.min)
	assert all(s.kind == "child" for s in slots)


def test_cross_axis_sticky():
	assert cross_axis_sticky(False, CrossAxisAlignment.start) == "w"
	assert cross_axis_sticky(True, CrossAxisAlignment.stretch) == "ns"
	assert cross_axis_sticky(True, CrossAxisAlignment.center) == ""


def test_wants_full_width_looks_through_padding():
	assert wants_full_width(padding(row([text("a")]), EdgeInsets.all(4)))
	assert wants_full_width(padding(text("para"), EdgeInsets.all(32)))
	assert not wants_full_width(column([text("a")]))
	assert not wants_full_width(row([text("a")], main_axis_size=MainAxisSize.min))


# ---------------------------------------------------------------------------
# Mounting (needs a display)
# ---------------------------------------------------------------------------

def _labels(widget) -> list[ttk.Label]:
	out = []
	for child in widget.winfo_children():
		if isinstance(child, ttk.Label):
			out.append(child)
		out.extend(_labels(child))
	return out


def test_mount_unknown_kind_raises(tk_root):
	with pytest.raises(ValueError):
		TkRenderer().mount(Node("marquee"), tk_root)


def test_mount_minimal_screen_shows_greeting(tk_root, ctx):
	widget = TkRenderer(ctx.theme).mount(render(MinimalApp(), ctx), tk_root)
	assert "テストです" in [str(lbl.cget("text")) for lbl in _labels(widget)]


def test_mount_lake_screen_builds_all_labels(tk_root, ctx, tmp_path: Path):
	(tmp_path / "images").mkdir()
	Image.new("RGB", (1200, 900), (10, 120, 200)).save(tmp_path / "images" / "lake.jpg")

	renderer = TkRenderer(ctx.theme, asset_root=tmp_path, viewport_width=600)
	widget = renderer.mount(render(LayoutDemoApp(), ctx), tk_root)

	texts = [str(lbl.cget("text")) for lbl in _labels(widget)]
	for expected in ("Oeschinen Lake Campground", "Kandersteg, Switzerland", "41", "CALL", "ROUTE", "SHARE"):
		assert expected in texts

	photos = [lbl for lbl in _labels(widget) if getattr(lbl, "image", None) is not None]
	assert len(photos) == 1
	assert (photos[0].image.width(), photos[0].image.height()) == (600, 240)


def test_missing_asset_logs_and_draws_placeholder(tk_root, ctx, tmp_path: Path, caplog):
	renderer = TkRenderer(ctx.theme, asset_root=tmp_path)

	with caplog.at_level(logging.ERROR, logger="layoutdemo.app.render"):
		widget = renderer.build(ImageSection("images/lake.jpg").render(ctx), tk_root)

	assert int(widget.cget("width")) == 600
	assert int(widget.cget("height")) == 240
	assert any("images/lake.jpg" in r.getMessage() for r in caplog.records)


def _wraplength(label: ttk.Label) -> int:
	return int(str(label.cget("wraplength")))


def test_text_section_wraps_inside_its_padding(tk_root, ctx):
	renderer = TkRenderer(ctx.theme, viewport_width=600)
	widget = renderer.mount(TextSection(LAKE_DESCRIPTION).render(ctx), tk_root)

	(label,) = _labels(widget)
	assert _wraplength(label) == 600 - 2 * SECTION_PADDING


def test_nested_padding_subtracts_every_level_once(tk_root, ctx):
	node = padding(padding(text("a b c"), EdgeInsets.all(10)), EdgeInsets.all(5))
	widget = TkRenderer(ctx.theme, viewport_width=600).mount(node, tk_root)

	(label,) = _labels(widget)
	assert _wraplength(label) == 600 - 20 - 10


def test_remounting_does_not_accumulate_insets(tk_root, ctx):
	renderer = TkRenderer(ctx.theme, viewport_width=600)
	node = TextSection(LAKE_DESCRIPTION).render(ctx)

	first = renderer.mount(node, tk_root)
	first.destroy()
	second = renderer.mount(node, tk_root)

	(label,) = _labels(second)
	assert _wraplength(label) == 600 - 2 * SECTION_PADDING
	assert len(renderer._own_insets) == 1
