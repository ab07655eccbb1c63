"""
Render every wallpaper variant into an output folder for a quick visual check.

Usage: python scripts/render_sample.py [out_dir] [--theme KEY] [--svg]
"""
import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv


def main() -> None:
	repo_root = Path(__file__).resolve().parents[1]
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	load_dotenv(encoding="utf-8-sig")
	from lifegrid.params import MONTH_STYLES, RenderParams
	from lifegrid.render import FORMAT_PNG, FORMAT_SVG, MODE_MONTH, MODE_YEAR, render_image

	parser = argparse.ArgumentParser(description="Render sample wallpapers")
	parser.add_argument("out_dir", nargs="?", default="samples")
	parser.add_argument("--theme", default="")
	parser.add_argument("--caption", default="Make today count")
	parser.add_argument("--svg", action="store_true", help="write SVG instead of PNG")
	args = parser.parse_args()

	out_dir = Path(args.out_dir)
	out_dir.mkdir(parents=True, exist_ok=True)
	fmt = FORMAT_SVG if args.svg else FORMAT_PNG

	params = RenderParams(show_caption=bool(args.caption), caption=args.caption)
	if args.theme:
		params = params.with_theme(args.theme)

	jobs = [(MODE_YEAR, None, "year")] + [(MODE_MONTH, key, f"month-{key}") for key in MONTH_STYLES]
	for mode, style, stem in jobs:
		path = out_dir / f"{stem}.{fmt}"
		path.write_bytes(render_image(mode, params, style, fmt=fmt))
		print(f"wrote {path}")


if __name__ == "__main__":
	main()
