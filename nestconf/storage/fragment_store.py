import locale
from dataclasses import dataclass


@dataclass(frozen=True)
class Fragment:
    """One loaded config file: its namespace and parsed contents."""
    name: str
    data: dict
    source: str = ''


class FragmentStore:
    """Fragments kept in namespace order. Sorting is deferred until the next read."""

    def __init__(self):
        self._fragments = []
        self._sorted = True

    def add(self, fragment: Fragment) -> None:
        self._fragments.append(fragment)
        self._sorted = False

    def ensure_sorted(self) -> None:
        if self._sorted:
            return
        self._fragments.sort(key=lambda fragment: locale.strxfrm(fragment.name))
        self._sorted = True

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    def clear(self) -> None:
        self._fragments.clear()
        self._sorted = True

    def __iter__(self):
        self.ensure_sorted()
        return iter(list(self._fragments))

    def __len__(self):
        return len(self._fragments)
