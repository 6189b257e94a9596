"""
Page units: everything one output page needs (title, filename, navigation
links and thumbnails), derived from the site aggregate at render time.
"""

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config import INDEX_FILENAME, INDEX_TITLE, THUMBNAIL_LIMIT

if TYPE_CHECKING:
    from .images import ImageRecord
    from .site import Site

FILENAME_STRIP = re.compile(r"[^a-z0-9_.]")


def generate_filename(base: str) -> str:
    """Turn `base` into a safe ``.html`` filename.

    Lower-cases, turns spaces into underscores, then drops anything outside
    ``[a-z0-9_.]``.  No transliteration: accented letters are dropped too.
    """
    name = f"{base}.html".lower().replace(" ", "_")
    return FILENAME_STRIP.sub("", name)


@dataclass(frozen=True)
class Link:
    title: str
    filename: str


@dataclass(frozen=True)
class IndexUnit:
    site: "Site" = field(compare=False, repr=False)

    @property
    def title(self) -> str:
        return INDEX_TITLE

    @property
    def filename(self) -> str:
        return INDEX_FILENAME

    @property
    def link(self) -> Link:
        return Link(self.title, self.filename)

    @property
    def navigation(self) -> list[Link]:
        return self.site.registry.make_links()

    @property
    def thumbnails(self) -> list["ImageRecord"]:
        return self.site.images.top(THUMBNAIL_LIMIT)


@dataclass(frozen=True)
class MakeUnit:
    site: "Site" = field(compare=False, repr=False)
    make: str

    @property
    def title(self) -> str:
        return self.make

    @property
    def filename(self) -> str:
        return generate_filename(f"make_{self.make}")

    @property
    def link(self) -> Link:
        return Link(self.title, self.filename)

    @property
    def navigation(self) -> list[Link]:
        """The index, then one link per model of this make."""
        return [self.site.index.link] + self.site.registry.links_by_make(self.make)

    @property
    def thumbnails(self) -> list["ImageRecord"]:
        return self.site.images.by_make_top(self.make, THUMBNAIL_LIMIT)

    @property
    def models(self) -> list["ModelUnit"]:
        return self.site.registry.models_by_make(self.make)


@dataclass(frozen=True)
class ModelUnit:
    site: "Site" = field(compare=False, repr=False)
    make: str
    model: str

    @property
    def title(self) -> str:
        return f"{self.make} | {self.model}"

    @property
    def filename(self) -> str:
        return generate_filename(f"model_{self.make}_{self.model}")

    @property
    def link(self) -> Link:
        return Link(self.title, self.filename)

    @property
    def navigation(self) -> list[Link]:
        """The index, then the parent make.  Raises MakeNotFoundError if the make isn't registered."""
        return [self.site.index.link, self.site.registry.link_by_make(self.make)]

    @property
    def thumbnails(self) -> list["ImageRecord"]:
        return self.site.images.by_make_model(self.make, self.model)
