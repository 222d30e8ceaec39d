"""Case-insensitive key/value storage for argkit."""

from collections.abc import Mapping, MutableMapping


def normalize_key(key: str) -> str:
    """Return the form of *key* used for comparisons."""
    return key.lower()


class CaseInsensitiveDict(MutableMapping):
    """Dictionary of string keys that compares keys without regard to case.

    The spelling used at the most recent assignment is kept for iteration
    and display; lookups, membership and equality use the lower-cased key.
    """

    def __init__(self, data=None):
        self._store: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)

    def __setitem__(self, key: str, value: str) -> None:
        self._store[normalize_key(key)] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._store[normalize_key(key)][1]

    def __delitem__(self, key: str) -> None:
        del self._store[normalize_key(key)]

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._store

    def __iter__(self):
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        # Keys are always strings here, so any other key type cannot match.
        if not all(isinstance(key, str) for key in other):
            return False
        other = CaseInsensitiveDict(other)
        return self.lower_items() == other.lower_items()

    def __repr__(self):
        return f"{type(self).__name__}({dict(self.items())!r})"

    def lower_items(self) -> dict[str, str]:
        """Return a plain dict keyed by the normalized keys."""
        return {folded: value for folded, (_, value) in self._store.items()}

    def copy(self) -> "CaseInsensitiveDict":
        return CaseInsensitiveDict(self._store.values())
