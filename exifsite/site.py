"""The per-run aggregate: image index plus page registry."""

from dataclasses import dataclass, field

from .errors import FilenameCollisionError
from .images import ImageIndex, ImageRecord
from .registry import UnitRegistry
from .units import IndexUnit, MakeUnit, ModelUnit


@dataclass
class Site:
    """
    Everything a run knows about its images and pages.  Units keep a
    reference to this and compute their navigation and thumbnails from it
    when asked.
    """

    images: ImageIndex = field(default_factory=ImageIndex)
    registry: UnitRegistry = field(default_factory=UnitRegistry)

    @classmethod
    def from_works(cls, works) -> "Site":
        """Build, check and freeze a site from raw work dicts."""
        site = cls()
        site.add_works(works)
        site.register_units()
        site.check_filenames()
        site.freeze()
        return site

    @property
    def index(self) -> IndexUnit:
        return IndexUnit(self)

    @property
    def units(self) -> list:
        """Every page in write order: models, makes, then the index."""
        return self.registry.units + [self.index]

    def add_works(self, works):
        for work in works:
            self.images.append(ImageRecord(work))

    def register_units(self):
        """
        One model unit per distinct (make, model) and one make unit per
        distinct make, both in first-seen order.  A make's models are
        registered before the make itself.
        """
        for make in dict.fromkeys(self.images.all_makes()):
            for model in dict.fromkeys(self.images.all_models_by_make(make)):
                self.registry.register_model(ModelUnit(self, make, model))
            self.registry.register_make(MakeUnit(self, make))

    def check_filenames(self):
        seen = {}
        for unit in self.units:
            other = seen.setdefault(unit.filename, unit)
            if other != unit:
                raise FilenameCollisionError(
                    f"{other.title!r} and {unit.title!r} would both be written to {unit.filename}"
                )

    def freeze(self):
        self.images.freeze()
        self.registry.freeze()
