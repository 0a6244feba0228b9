# ---------------------------------------------------------------------------
# File: minimal.py
# ---------------------------------------------------------------------------
# Description:
#	Smallest possible screen: a title-barred page with one centered text.
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

from layoutdemo.ui.component import Component
from layoutdemo.ui.model import ScreenConfig
from layoutdemo.ui.node import Node
from layoutdemo.ui.theme import BuildContext
from layoutdemo.ui.widgets import app_bar, app_root, center, scaffold, text

from .lake import SCREEN


@dataclass(frozen=True)
class PlainTitle(Component):
	name: str

	def build(self, ctx: BuildContext) -> Node:
		return text(self.name)


@dataclass(frozen=True)
class MinimalApp(Component):
	config: ScreenConfig = SCREEN
	greeting: str = "テストです"

	def build(self, ctx: BuildContext) -> Node:
		title = self.config.app_title
		return app_root(
			title=title,
			home=scaffold(
				bar=app_bar(text(title)),
				body=center(PlainTitle(self.greeting).render(ctx)),
			),
		)


def main() -> None:
	from layoutdemo.__main__ import launch

	launch(MinimalApp())


if __name__ == "__main__":
	main()
