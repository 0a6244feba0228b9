# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base declarative Component for layoutdemo.
#
# Notes:
#	- A Component is a frozen bundle of parameters plus a build() that
#	  turns them into a Node tree. Composite pattern: build() renders child
#	  components inline.
#	- Components never touch Tk. TkRenderer realizes the tree.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from layoutdemo.core.logging import get_app_logger

from .node import Node
from .theme import BuildContext


log = get_app_logger("render")


@dataclass(frozen=True)
class Component:
	"""
	Base component.

	- key:	Optional identifier recorded on the built root node
			(defaults to class name).
	- build(ctx) must be pure: same parameters + same context => equal tree.
	"""
	key: Optional[str] = dataclasses.field(default=None, kw_only=True)

	@property
	def display_name(self) -> str:
		return self.key or self.__class__.__name__

	def build(self, ctx: BuildContext) -> Node:
		raise NotImplementedError(f"{self.__class__.__name__}.build() is not implemented")

	def render(self, ctx: BuildContext) -> Node:
		"""
		Build this component and tag the resulting root with its label.
		"""
		node = self.build(ctx)
		return dataclasses.replace(node, source=self.display_name)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} name={self.display_name!r}>"


def render(component: Component, ctx: Optional[BuildContext] = None) -> Node:
	"""
	Run one render pass over a component tree.
	"""
	ctx = ctx or BuildContext()
	tree = component.render(ctx)
	log.debug("render pass: %s -> %d nodes", component.display_name, sum(1 for _ in tree.walk()))
	return tree
