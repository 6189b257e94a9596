"""Constants and run settings."""

from dataclasses import dataclass
from pathlib import Path

UNKNOWN_MAKE = "Unknown Make"
UNKNOWN_MODEL = "Unknown Model"

URL_SIZES = ("small", "medium", "large")

INDEX_FILENAME = "index.html"
INDEX_TITLE = "Index"
THUMBNAIL_LIMIT = 10    # per make page and on the index

ASSETS_DIR = "assets"
THUMBS_DIR = "thumbs"
THUMB_SIZE = 270    # square crop (2x for 135px grid cells)


@dataclass
class SiteConfig:
    """Settings for one generation run."""

    input_path: Path
    output_dir: Path
    mirror_thumbs: bool = False
    verbose: bool = False
