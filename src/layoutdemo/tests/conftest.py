# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared fixtures for layoutdemo tests.
#
# Notes:
#	- Tk-backed tests skip when no display is available (headless CI).
#	- Logging state is reset around every test.
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk
from typing import Iterator

import pytest

from layoutdemo.core.logging import _reset_logging_for_tests
from layoutdemo.ui.theme import BuildContext, Theme


@pytest.fixture
def ctx() -> BuildContext:
	return BuildContext(theme=Theme())


@pytest.fixture
def tk_root() -> Iterator[tk.Tk]:
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk unavailable: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()


@pytest.fixture(autouse=True)
def _fresh_logging() -> Iterator[None]:
	_reset_logging_for_tests()
	yield
	_reset_logging_for_tests()
