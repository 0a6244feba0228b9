# ---------------------------------------------------------------------------
# File: images.py
# ---------------------------------------------------------------------------
# Description:
#	Asset resolution and box fitting for image nodes (Pillow).
#
# Notes:
#	- No Tk here; TkRenderer wraps the result in ImageTk.PhotoImage.
#	- Asset failures propagate (FileNotFoundError / PIL.UnidentifiedImageError).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/18/2026	layoutdemo maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageOps

from layoutdemo.ui.style import BoxFit


def resolve_asset(asset_root: Path | str | None, asset_path: str) -> Path:
	"""
	Resolve a bundle-relative asset path. Relative roots are taken from cwd.
	"""
	root = Path(asset_root) if asset_root else Path.cwd()
	return (root / asset_path).resolve()


def load_asset(asset_root: Path | str | None, asset_path: str) -> Image.Image:
	path = resolve_asset(asset_root, asset_path)
	with Image.open(path) as img:
		img.load()
		return img.convert("RGB")


def fit_image(image: Image.Image, size: tuple[int, int], fit: BoxFit | None) -> Image.Image:
	"""
	Return an image exactly `size` pixels, following the box fit rule.

	- cover:	scale to fill the box, center-crop overflow (no distortion)
	- contain:	scale to fit inside the box, pad the rest
	- fill:		stretch to the box
	- none:		no scaling, center-crop or pad
	"""
	w, h = size
	fit = fit or BoxFit.contain

	if fit is BoxFit.cover:
		return ImageOps.fit(image, (w, h), method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))

	if fit is BoxFit.contain:
		return ImageOps.pad(image, (w, h), method=Image.Resampling.LANCZOS, color=(0, 0, 0))

	if fit is BoxFit.fill:
		return image.resize((w, h), Image.Resampling.LANCZOS)

	canvas = Image.new(image.mode, (w, h))
	x = (w - image.width) // 2
	y = (h - image.height) // 2
	canvas.paste(image, (x, y))
	return canvas
