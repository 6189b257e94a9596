"""exifsite - static make/model photo pages from an XML works export.

Package structure:
    exifsite/
    ├── cli.py        # Command-line interface
    ├── build.py      # Build steps and page output
    ├── source.py     # XML export -> raw work dicts
    ├── images.py     # ImageRecord, UrlSet, ImageIndex
    ├── units.py      # Page units (index, make, model) and links
    ├── registry.py   # Make/model unit registry
    ├── site.py       # Per-run aggregate
    ├── render.py     # Jinja2 page template
    ├── thumbs.py     # Optional local thumbnail mirror
    ├── config.py     # Constants and run settings
    └── errors.py     # Exceptions
"""

__version__ = "0.1"

from .errors import (
    FilenameCollisionError,
    FrozenError,
    MakeNotFoundError,
    MalformedRecordError,
    MissingUrlError,
    SiteError,
    SourceError,
    ThumbnailError,
)
from .images import ImageIndex, ImageRecord, UrlSet
from .units import IndexUnit, Link, MakeUnit, ModelUnit, generate_filename
from .registry import UnitRegistry
from .site import Site
from .build import generate_site

__all__ = [
    "__version__",
    # Errors
    "SiteError",
    "SourceError",
    "MalformedRecordError",
    "MissingUrlError",
    "MakeNotFoundError",
    "FilenameCollisionError",
    "FrozenError",
    "ThumbnailError",
    # Model
    "ImageRecord",
    "UrlSet",
    "ImageIndex",
    "Link",
    "IndexUnit",
    "MakeUnit",
    "ModelUnit",
    "generate_filename",
    "UnitRegistry",
    "Site",
    # Build
    "generate_site",
]
