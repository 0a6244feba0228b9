# ---------------------------------------------------------------------------
# File: sections.py
# ---------------------------------------------------------------------------
# Description:
#	The building blocks of the lake screen: image, title block, action
#	buttons and description paragraph.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# 10/18/2026	layoutdemo maintainers		Promote rating + star color to parameters
# 10/18/2026	layoutdemo maintainers		Carry content as model values (TitleData, ButtonSpec, ...)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass

from .component import Component
from .model import ButtonSpec, ImageRef, TextBlock, TitleData
from .node import Node
from .style import (
	Color,
	Colors,
	CrossAxisAlignment,
	EdgeInsets,
	FontWeight,
	Icons,
	MainAxisAlignment,
	MainAxisSize,
	TextStyle,
)
from .theme import BuildContext
from .widgets import column, expanded, icon, image_asset, padding, row, text


SECTION_PADDING = 32


@dataclass(frozen=True)
class ButtonWithText(Component):
	"""
	Icon stacked above a small label, both in the same color.
	"""
	color: Color
	icon: Icons
	label: str

	@classmethod
	def from_spec(cls, spec: ButtonSpec) -> "ButtonWithText":
		return cls(spec.color or Colors.black, spec.icon, spec.label)

	def build(self, ctx: BuildContext) -> Node:
		return column(
			[
				icon(self.icon, color=self.color),
				padding(
					text(
						self.label,
						style=TextStyle(font_size=12, font_weight=FontWeight.normal, color=self.color),
					),
					EdgeInsets.only(top=8),
				),
			],
			main_axis_size=MainAxisSize.min,
			main_axis_alignment=MainAxisAlignment.center,
		)


@dataclass(frozen=True)
class TitleSection(Component):
	"""
	Bold name over a grey location line, with a star + rating on the right.
	"""
	name: str
	location: str
	rating: str = "41"
	star_color: Color = Colors.red

	@classmethod
	def from_data(cls, data: TitleData, *, star_color: Color = Colors.red) -> "TitleSection":
		return cls(data.name, data.location, data.rating, star_color)

	@property
	def data(self) -> TitleData:
		return TitleData(self.name, self.location, self.rating)

	def build(self, ctx: BuildContext) -> Node:
		return padding(
			row(
				[
					expanded(
						column(
							[
								padding(
									text(self.name, style=TextStyle(font_weight=FontWeight.bold)),
									EdgeInsets.only(bottom=8),
								),
								text(self.location, style=TextStyle(color=Colors.grey)),
							],
							cross_axis_alignment=CrossAxisAlignment.start,
						)
					),
					icon(Icons.star, color=self.star_color),
					text(self.rating),
				]
			),
			EdgeInsets.all(SECTION_PADDING),
		)


BUTTONS: tuple[ButtonSpec, ...] = (
	ButtonSpec(Icons.call, "CALL"),
	ButtonSpec(Icons.near_me, "ROUTE"),
	ButtonSpec(Icons.share, "SHARE"),
)


@dataclass(frozen=True)
class ButtonSection(Component):
	buttons: tuple[ButtonSpec, ...] = BUTTONS

	def build(self, ctx: BuildContext) -> Node:
		color = ctx.theme.primary_color
		return row(
			[ButtonWithText.from_spec(spec.with_color(color)).render(ctx) for spec in self.buttons],
			main_axis_alignment=MainAxisAlignment.space_evenly,
		)


@dataclass(frozen=True)
class TextSection(Component):
	description: str

	@classmethod
	def from_block(cls, block: TextBlock) -> "TextSection":
		return cls(block.description)

	@property
	def block(self) -> TextBlock:
		return TextBlock(self.description)

	def build(self, ctx: BuildContext) -> Node:
		return padding(
			text(self.description, soft_wrap=True),
			EdgeInsets.all(SECTION_PADDING),
		)


@dataclass(frozen=True)
class ImageSection(Component):
	"""
	Fixed 600x240 box, source scaled to cover and cropped.
	"""
	image: str

	@property
	def ref(self) -> ImageRef:
		return ImageRef(self.image)

	def build(self, ctx: BuildContext) -> Node:
		ref = self.ref
		return image_asset(
			ref.asset_path,
			width=ref.width,
			height=ref.height,
			fit=ref.fit,
		)
