"""Exceptions raised while building a site."""


class SiteError(Exception):
    """Base class for every error that aborts a build."""


class SourceError(SiteError):
    """The works document could not be parsed."""


class MalformedRecordError(SiteError):
    """A work record is missing a structural field."""


class MissingUrlError(SiteError):
    """A work record has no URL for the requested size."""


class MakeNotFoundError(SiteError):
    """No make page is registered for a make that navigation refers to."""


class FilenameCollisionError(SiteError):
    """Two different pages would be written to the same file."""


class FrozenError(SiteError):
    """The collection was changed after the build froze it."""


class ThumbnailError(SiteError):
    """A thumbnail could not be downloaded or decoded."""
