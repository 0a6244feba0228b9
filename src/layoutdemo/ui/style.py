# ---------------------------------------------------------------------------
# File: style.py
# ---------------------------------------------------------------------------
# Description:
#	Value types used to describe visual structure: colors, insets,
#	text styles, alignment enums and icon ids.
#
# Notes:
#	- Everything here is immutable and compares by value.
#	- No Tk imports; the renderer translates these into Tk options.
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
from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Color:
	"""
	32-bit ARGB color (0xAARRGGBB).
	"""
	value: int

	@classmethod
	def from_hex(cls, text: str) -> "Color":
		"""
		Parse "#RRGGBB" or "#AARRGGBB" (leading '#' optional).
		"""
		raw = text.strip().lstrip("#")
		if len(raw) == 6:
			raw = "FF" + raw
		if len(raw) != 8:
			raise ValueError(f"Invalid color literal: {text!r}")
		return cls(int(raw, 16))

	@classmethod
	def from_argb(cls, a: int, r: int, g: int, b: int) -> "Color":
		return cls(((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))

	@property
	def alpha(self) -> int:
		return (self.value >> 24) & 0xFF

	@property
	def red(self) -> int:
		return (self.value >> 16) & 0xFF

	@property
	def green(self) -> int:
		return (self.value >> 8) & 0xFF

	@property
	def blue(self) -> int:
		return self.value & 0xFF

	@property
	def hex(self) -> str:
		# Tk has no alpha channel.
		return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

	def __str__(self) -> str:
		return f"Color(0x{self.value:08X})"


class Colors:
	"""
	Material palette entries used by the demo screens (shade 500).
	"""
	red = Color(0xFFF44336)
	grey = Color(0xFF9E9E9E)
	blue = Color(0xFF2196F3)
	white = Color(0xFFFFFFFF)
	black = Color(0xFF000000)


# ---------------------------------------------------------------------------
# Insets
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EdgeInsets:
	left: float = 0
	top: float = 0
	right: float = 0
	bottom: float = 0

	@classmethod
	def all(cls, value: float) -> "EdgeInsets":
		return cls(value, value, value, value)

	@classmethod
	def only(
		cls,
		*,
		left: float = 0,
		top: float = 0,
		right: float = 0,
		bottom: float = 0,
	) -> "EdgeInsets":
		return cls(left, top, right, bottom)

	@classmethod
	def symmetric(cls, *, horizontal: float = 0, vertical: float = 0) -> "EdgeInsets":
		return cls(horizontal, vertical, horizontal, vertical)

	@property
	def horizontal(self) -> float:
		return self.left + self.right

	@property
	def vertical(self) -> float:
		return self.top + self.bottom


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

class FontWeight(Enum):
	normal = "normal"
	bold = "bold"


@dataclass(frozen=True, slots=True)
class TextStyle:
	"""
	Partial text style; None fields inherit the renderer's defaults.
	"""
	font_size: Optional[float] = None
	font_weight: Optional[FontWeight] = None
	color: Optional[Color] = None


DEFAULT_FONT_SIZE = 14.0


# ---------------------------------------------------------------------------
# Layout enums
# ---------------------------------------------------------------------------

class MainAxisAlignment(Enum):
	start = "start"
	end = "end"
	center = "center"
	space_between = "space_between"
	space_around = "space_around"
	space_evenly = "space_evenly"


class CrossAxisAlignment(Enum):
	start = "start"
	end = "end"
	center = "center"
	stretch = "stretch"


class MainAxisSize(Enum):
	min = "min"
	max = "max"


class BoxFit(Enum):
	fill = "fill"
	contain = "contain"
	cover = "cover"
	none = "none"


# ---------------------------------------------------------------------------
# Icons
# ---------------------------------------------------------------------------

class Icons(Enum):
	"""
	Icon ids. The value is the glyph the Tk renderer draws.
	"""
	call = "☎"
	near_me = "➤"
	share = "⤴"
	star = "★"
