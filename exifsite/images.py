"""Image records and the ordered index they live in."""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property

from .config import UNKNOWN_MAKE, UNKNOWN_MODEL, URL_SIZES
from .errors import FrozenError, MalformedRecordError, MissingUrlError


class UrlSet:
    """The small/medium/large URLs of one work.

    Entries look like ``{"type": "small", "value": "http://..."}``. A missing
    size is only reported when that size is asked for.
    """

    def __init__(self, entries):
        if not isinstance(entries, list):
            raise MalformedRecordError(
                f"urls should be a list of entries, got {type(entries).__name__}"
            )
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise MalformedRecordError("every urls entry should be a mapping")
        self.entries = entries

    def get(self, size: str) -> str:
        if size not in URL_SIZES:
            raise ValueError(f"unknown URL size {size!r}, expected one of {URL_SIZES}")
        for entry in self.entries:
            if entry.get("type") == size:
                value = entry.get("value")
                if not value:
                    raise MalformedRecordError(f"{size} URL entry has no value")
                return value
        raise MissingUrlError(f"no {size} URL in record")

    @property
    def small(self) -> str:
        return self.get("small")

    @property
    def medium(self) -> str:
        return self.get("medium")

    @property
    def large(self) -> str:
        return self.get("large")


@dataclass(frozen=True, eq=False)
class ImageRecord:
    """Read-only view of one raw work dict (see ``source.load_works``)."""

    work: dict

    def _field(self, key: str) -> str:
        try:
            return self.work[key]
        except KeyError:
            raise MalformedRecordError(f"work record has no {key!r}") from None

    @cached_property
    def filename(self) -> str:
        return self._field("filename")

    @cached_property
    def width(self) -> str:
        return self._field("image_width")

    @cached_property
    def height(self) -> str:
        return self._field("image_height")

    @cached_property
    def make(self) -> str:
        return self._exif_text("make") or UNKNOWN_MAKE

    @cached_property
    def model(self) -> str:
        return self._exif_text("model") or UNKNOWN_MODEL

    @cached_property
    def urls(self) -> UrlSet:
        return UrlSet(self._field("urls"))

    def url(self, size: str) -> str:
        return self.urls.get(size)

    def _exif_text(self, key: str) -> str:
        # Blank values count as missing, but non-blank ones are returned untouched
        exif = self.work.get("exif")
        if not isinstance(exif, Mapping):
            return ""
        text = exif.get(key)
        if not isinstance(text, str) or not text.strip():
            return ""
        return text


class ImageIndex:
    """
    All image records of a run, in document order.  Filled once, then frozen
    before any page is rendered.
    """

    def __init__(self, images=None):
        self.images: list[ImageRecord] = list(images) if images else []
        self.frozen = False

    def __len__(self):
        return len(self.images)

    def __iter__(self):
        return iter(self.images)

    def append(self, image: ImageRecord):
        if self.frozen:
            raise FrozenError("image index is frozen")
        self.images.append(image)

    def freeze(self):
        self.frozen = True

    def top(self, number: int) -> list[ImageRecord]:
        if number <= 0:
            return []
        return self.images[:number]

    def by_make(self, make: str) -> list[ImageRecord]:
        return [image for image in self.images if image.make == make]

    def by_make_top(self, make: str, number: int) -> list[ImageRecord]:
        if number <= 0:
            return []
        return self.by_make(make)[:number]

    def by_make_model(self, make: str, model: str) -> list[ImageRecord]:
        return [image for image in self.by_make(make) if image.model == model]

    def all_makes(self) -> list[str]:
        """One make per image; callers de-duplicate."""
        return [image.make for image in self.images]

    def all_models_by_make(self, make: str) -> list[str]:
        return [image.model for image in self.by_make(make)]
