"""Registry of the make and model pages of a run."""

from .errors import FrozenError, MakeNotFoundError
from .units import Link, MakeUnit, ModelUnit


def unique_links(units) -> list[Link]:
    """Links of `units` with duplicates dropped, first one wins."""
    return list(dict.fromkeys(unit.link for unit in units))


class UnitRegistry:
    """
    Make and model units in registration order.  Registration doesn't check
    for duplicates; the link queries de-duplicate instead.
    """

    def __init__(self):
        self.makes: list[MakeUnit] = []
        self.models: list[ModelUnit] = []
        self.frozen = False

    @property
    def units(self) -> list:
        """Models first, then makes: the order pages get written in."""
        return self.models + self.makes

    def register_make(self, unit: MakeUnit):
        self._check_open()
        self.makes.append(unit)

    def register_model(self, unit: ModelUnit):
        self._check_open()
        self.models.append(unit)

    def freeze(self):
        self.frozen = True

    def _check_open(self):
        if self.frozen:
            raise FrozenError("unit registry is frozen")

    def models_by_make(self, make: str) -> list[ModelUnit]:
        return [unit for unit in self.models if unit.make == make]

    def links_by_make(self, make: str) -> list[Link]:
        return unique_links(self.models_by_make(make))

    def make_links(self) -> list[Link]:
        return unique_links(self.makes)

    def link_by_make(self, make: str) -> Link:
        for unit in self.makes:
            if unit.make == make:
                return unit.link
        raise MakeNotFoundError(f"no make page registered for {make!r}")
