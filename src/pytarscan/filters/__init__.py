from .base import EntryFilter
from .name_filters import NameFilterSet
