from __future__ import annotations

from typing import Any

from layoutdemo.app import App
from layoutdemo.core import init_logging
from layoutdemo.core.config import AppConfig
from layoutdemo.screens import LayoutDemoApp
from layoutdemo.ui import Component


def launch(component: Component, cfg: dict[str, Any] | None = None) -> None:
	"""
	Hand one root component to a window and run the event loop.
	"""
	init_logging(AppConfig(cfg))
	app = App(cfg)
	app.show(component)
	app.run()


def main() -> None:
	launch(LayoutDemoApp())


if __name__ == "__main__":
	main()
