# ---------------------------------------------------------------------------
# File: lake.py
# ---------------------------------------------------------------------------
# Description:
#	The layout demo screen: lake image, title block, action buttons and
#	description, stacked in a scrollable page with a title bar.
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
from layoutdemo.ui.model import ImageRef, ScreenConfig, TextBlock, TitleData
from layoutdemo.ui.node import Node
from layoutdemo.ui.sections import (
	ButtonSection,
	ImageSection,
	TextSection,
	TitleSection,
)
from layoutdemo.ui.theme import BuildContext
from layoutdemo.ui.widgets import app_bar, app_root, column, scaffold, scroll_view, text


APP_TITLE = "Flutter layout demo"

LAKE_IMAGE = "images/lake.jpg"
LAKE_NAME = "Oeschinen Lake Campground"
LAKE_LOCATION = "Kandersteg, Switzerland"
LAKE_DESCRIPTION = (
	"Lake Oeschinen lies at the foot of the Blüemlisalp in the Bernese "
	"Alps. Situated 1,578 meters above sea level, it is one of the "
	"larger Alpine Lakes. A gondola ride from Kandersteg, followed by a "
	"half-hour walk through pastures and pine forest, leads you to the "
	"lake, which warms to 20 degrees Celsius in the summer. Activities "
	"enjoyed here include rowing, and riding the summer toboggan run."
)

SCREEN = ScreenConfig(APP_TITLE)
LAKE_TITLE = TitleData(LAKE_NAME, LAKE_LOCATION)
LAKE_TEXT = TextBlock(LAKE_DESCRIPTION)
LAKE_PHOTO = ImageRef(LAKE_IMAGE)


@dataclass(frozen=True)
class LayoutDemoApp(Component):
	config: ScreenConfig = SCREEN

	def build(self, ctx: BuildContext) -> Node:
		body = scroll_view(
			column(
				[
					ImageSection(LAKE_PHOTO.asset_path).render(ctx),
					TitleSection.from_data(LAKE_TITLE).render(ctx),
					ButtonSection().render(ctx),
					TextSection.from_block(LAKE_TEXT).render(ctx),
				]
			)
		)
		title = self.config.app_title
		return app_root(
			title=title,
			home=scaffold(bar=app_bar(text(title)), body=body),
		)
