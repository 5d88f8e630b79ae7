import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .utils import normalize

class GameBrowserError(Exception):
    pass

class LoadError(GameBrowserError):
    """The catalog source could not be read or parsed."""

class LaunchError(GameBrowserError):
    pass

class NotFound(LaunchError):
    pass

class EmptyCommand(LaunchError):
    pass

class SpawnError(LaunchError):
    def __init__(self, message: str, os_error: Optional[Exception] = None):
        super().__init__(message)
        self.os_error = os_error

@dataclass
class Entry:
    box_art: str = ""
    platform: str = ""
    category: str = ""              # overwritten by the builder
    title: str = ""
    command: str = ""
    launch_id: Optional[int] = None

@dataclass
class Category:
    icon: str
    name: str

@dataclass(eq=False)
class Catalog:
    categories: List[Category] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __eq__(self, other):
        if not isinstance(other, Catalog):
            return NotImplemented
        return self.categories == other.categories and self.entries == other.entries

    def __len__(self) -> int:
        return len(self.entries)

    def _resort(self) -> None:
        # Stable, and entries are already in this order after a build, so ids and
        # categories keep lining up.
        self.entries.sort(key=lambda e: normalize(e.title))

    def resort(self) -> None:
        with self._lock:
            self._resort()

    def view(self) -> Tuple[Tuple[Category, ...], Tuple[Entry, ...]]:
        """Re-sort and snapshot categories and entries under the guard."""
        with self._lock:
            self._resort()
            return tuple(self.categories), tuple(self.entries)

    def get(self, launch_id: int) -> Entry:
        # list.sort() empties the list while it runs, so lookups share the guard
        with self._lock:
            if launch_id < 0 or launch_id >= len(self.entries):
                raise NotFound(f"No game with launch ID {launch_id}.")
            # ids are dense and resort is stable, so the index is the id
            return self.entries[launch_id]
