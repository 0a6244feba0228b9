# ---------------------------------------------------------------------------
# File: node.py
# ---------------------------------------------------------------------------
# Description:
#	Immutable description tree produced by components.
#
# Notes:
#	- A Node is a value: kind + props + children. Two builds from the same
#	  inputs compare equal.
#	- props is a tuple of (key, value) pairs sorted by key so ordering of
#	  keyword arguments never changes equality.
#	- source records which component produced the node (debugging/tests).
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
from typing import Any, Iterator, Optional


Props = tuple[tuple[str, Any], ...]


def make_props(**kwargs: Any) -> Props:
	"""
	Freeze keyword props, dropping None values.
	"""
	return tuple(sorted((k, v) for k, v in kwargs.items() if v is not None))


@dataclass(frozen=True, slots=True)
class Node:
	kind: str
	props: Props = ()
	children: tuple["Node", ...] = ()
	source: Optional[str] = None

	def get(self, key: str, default: Any = None) -> Any:
		for k, v in self.props:
			if k == key:
				return v
		return default

	@property
	def child(self) -> Optional["Node"]:
		"""
		The single child of a wrapper node (padding, center, ...), if any.
		"""
		return self.children[0] if self.children else None

	def walk(self) -> Iterator["Node"]:
		"""
		Pre-order traversal, self first.
		"""
		yield self
		for c in self.children:
			yield from c.walk()

	def find_all(self, kind: str) -> list["Node"]:
		return [n for n in self.walk() if n.kind == kind]

	def find_source(self, name: str) -> Optional["Node"]:
		"""
		First node built by the named component.
		"""
		for n in self.walk():
			if n.source == name:
				return n
		return None

	def texts(self) -> list[str]:
		return [n.get("data") for n in self.walk() if n.kind == "text"]

	def __repr__(self) -> str:
		src = f" source={self.source!r}" if self.source else ""
		return f"<Node {self.kind}{src} children={len(self.children)}>"
