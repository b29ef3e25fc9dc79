from abc import ABC, abstractmethod




class EntryFilter(ABC):
    """Decides, entry by entry, whether an archive member is selected."""

    @abstractmethod
    def __call__(self, name: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_selecting_all(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def unmatched(self) -> tuple:
        raise NotImplementedError
