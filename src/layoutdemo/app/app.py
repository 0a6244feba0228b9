# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   Window shell for layoutdemo: owns the Tk root, runs render passes and
#   mounts the resulting tree.
#
# Notes:
#   - The ambient Theme is built once from config and handed to every
#     render pass through BuildContext.
#   - rebuild() never patches live widgets; it renders a fresh tree and
#     remounts it.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# 10/18/2026	layoutdemo maintainers		Apply ttk theme via ttkthemes.ThemedTk
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedTk

from layoutdemo.core.config import AppConfig
from layoutdemo.core.logging import get_app_logger
from layoutdemo.render.tk_renderer import TkRenderer
from layoutdemo.ui.component import Component, render
from layoutdemo.ui.node import Node
from layoutdemo.ui.theme import BuildContext, theme_from_config


log = get_app_logger()

DEFAULT_TITLE = "layoutdemo"


class App(ThemedTk):
	"""
	App

	Root window. Shows exactly one root component at a time.
	"""

	def __init__(self, cfg: dict[str, Any] | None = None) -> None:
		self.cfg = AppConfig(cfg)
		self.theme_data = theme_from_config(self.cfg)

		super().__init__(theme=self.theme_data.ttk_theme)

		self.title_text = DEFAULT_TITLE
		self.title(self.title_text)

		self.context = BuildContext(theme=self.theme_data)
		self.renderer = TkRenderer(
			self.theme_data,
			asset_root=self.cfg.get("asset_root"),
			viewport_width=int(self.cfg.get("width")),
		)

		self.component: Optional[Component] = None
		self.tree: Optional[Node] = None
		self.root_widget: Optional[tk.Widget] = None

		# Ensure Tk has computed screen dimensions
		self.update_idletasks()
		self._apply_geometry(self.cfg.get("width"), self.cfg.get("height"))

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

	# -----------------------------------------------------------------------
	# Render passes
	# -----------------------------------------------------------------------

	def show(self, component: Component) -> Node:
		"""
		Make component the root and run a render pass.
		"""
		self.component = component
		return self.rebuild()

	def rebuild(self) -> Node:
		"""
		Render the root component again and remount the result.
		"""
		if self.component is None:
			raise RuntimeError("No root component; call show() first")

		tree = render(self.component, self.context)

		if self.root_widget is not None:
			self.root_widget.destroy()
			self.root_widget = None

		title = tree.get("title") if tree.kind == "app" else None
		if title:
			self.title_text = str(title)
			self.title(self.title_text)

		self.root_widget = self.renderer.mount(tree, self.root_frame)
		self.tree = tree

		log.info("mounted %s (%s)", self.component.display_name, self.title_text)
		return tree

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		req_w = int(width) if width is not None else screen_w
		req_h = int(height) if height is not None else screen_h

		win_w = max(1, min(req_w, screen_w))
		win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Run the Tk event loop.
		"""
		self.mainloop()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
