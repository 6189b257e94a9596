"""Command-line entry point."""

import argparse
import sys
from pathlib import Path

from . import __version__
from .build import generate_site
from .config import SiteConfig
from .errors import SiteError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exifsite",
        description="Generate make/model photo pages from an XML works export",
    )
    parser.add_argument("input", type=Path, help="XML file of works")
    parser.add_argument("output", type=Path, help="Existing directory to write the site into")
    parser.add_argument(
        "-m", "--mirror-thumbs",
        action="store_true",
        help="Download thumbnails into the output directory instead of hotlinking",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Output more status messages while processing",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    input_path = args.input.resolve()
    output_dir = args.output.resolve()
    if not input_path.is_file():
        print(f"Error: {input_path} is not a file", file=sys.stderr)
        return 1
    if not output_dir.is_dir():
        print(f"Error: {output_dir} is not a directory", file=sys.stderr)
        return 1

    config = SiteConfig(
        input_path=input_path,
        output_dir=output_dir,
        mirror_thumbs=args.mirror_thumbs,
        verbose=args.verbose,
    )
    try:
        generate_site(config)
    except SiteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
