from typing import Iterable

from .base import EntryFilter
from ..utils.common import is_string




class NameFilterSet(EntryFilter):
    """Requested entry names, each with a found flag.

    Names keep the order the caller gave them in, repeats included: every
    requested name is its own slot. An archive entry selects the first
    still-unmarked slot with its exact name, so a name requested twice
    selects up to two entries. With no names at all, every entry is
    selected and no flags are tracked.
    """

    def __init__(self, names: Iterable[str] = ()):
        if is_string(names):
            names = [names]
        self._slots = [[name, False] for name in names]

    def __len__(self):
        return len(self._slots)

    def __contains__(self, name):
        return any(slot_name == name for slot_name, _ in self._slots)

    def __iter__(self):
        return (tuple(slot) for slot in self._slots)

    def __call__(self, name):
        if self.is_selecting_all():
            return True
        return self.matches_and_mark(name)

    def is_selecting_all(self):
        return not self._slots

    def matches_and_mark(self, name):
        for slot in self._slots:
            if slot[0] == name and not slot[1]:
                slot[1] = True
                return True
        return False

    def is_found(self, name) -> bool:
        return any(found for slot_name, found in self._slots if slot_name == name)

    def unmatched(self):
        return tuple(name for name, found in self._slots if not found)
