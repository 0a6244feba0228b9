# ---------------------------------------------------------------------------
# File: test_node.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the immutable Node tree and primitive factories.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
# ---------------------------------------------------------------------------

from __future__ import annotations

import dataclasses

import pytest

from layoutdemo.ui.node import Node, make_props
from layoutdemo.ui.style import EdgeInsets, Icons, MainAxisAlignment
from layoutdemo.ui.widgets import (
	app_bar,
	app_root,
	center,
	column,
	icon,
	padding,
	row,
	scaffold,
	text,
)


def test_make_props_drops_none_and_sorts_keys():
	props = make_props(b=2, a=1, c=None)
	assert props == (("a", 1), ("b", 2))


def test_node_get_returns_default_for_missing_key():
	n = text("hello")
	assert n.get("data") == "hello"
	assert n.get("nope", 42) == 42


def test_node_is_frozen():
	n = text("hello")
	with pytest.raises(dataclasses.FrozenInstanceError):
		n.kind = "icon"  # type: ignore[misc]


def test_equal_inputs_build_equal_trees():
	a = row([text("x"), icon(Icons.star)], main_axis_alignment=MainAxisAlignment.center)
	b = row([text("x"), icon(Icons.star)], main_axis_alignment=MainAxisAlignment.center)
	assert a == b
	assert hash(a) == hash(b)


def test_walk_is_preorder_and_texts_follow_it():
	tree = column([padding(text("one"), EdgeInsets.all(4)), row([text("two"), text("three")])])

	kinds = [n.kind for n in tree.walk()]
	assert kinds == ["column", "padding", "text", "row", "text", "text"]
	assert tree.texts() == ["one", "two", "three"]


def test_find_all_and_child():
	tree = center(padding(text("a"), EdgeInsets.all(1)))
	assert tree.child is not None
	assert tree.child.kind == "padding"
	assert len(tree.find_all("text")) == 1
	assert text("leaf").child is None


def test_find_source_returns_first_tagged_node():
	tagged = dataclasses.replace(text("a"), source="Thing")
	tree = column([text("b"), tagged])
	assert tree.find_source("Thing") is tagged
	assert tree.find_source("Other") is None


def test_scaffold_children_order_with_and_without_bar():
	body = text("body")
	with_bar = scaffold(bar=app_bar(text("T")), body=body)
	without_bar = scaffold(body=body)

	assert [c.kind for c in with_bar.children] == ["app_bar", "text"]
	assert with_bar.get("has_app_bar") is True
	assert without_bar.children == (body,)
	assert without_bar.get("has_app_bar") is False


def test_app_root_carries_title():
	root = app_root(title="T", home=text("x"))
	assert root.kind == "app"
	assert root.get("title") == "T"
	assert isinstance(root.child, Node)
