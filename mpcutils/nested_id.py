"""Hierarchical identifiers made of string and counter segments."""

from __future__ import annotations


class NestedId:
    """A nested identifier such as ``foo/bar/0``.

    Each segment is either a string or a counter, and refers to the segment
    before it as its root. Identifiers order by their string form.
    """

    __slots__ = ("_value", "_counter", "_root")

    def __init__(self, id: str) -> None:
        self._value: str | int = id
        self._counter = False
        self._root: NestedId | None = None

    @classmethod
    def _make(cls, value: str | int, counter: bool, root: NestedId | None) -> NestedId:
        new = cls.__new__(cls)
        new._value = value
        new._counter = counter
        new._root = root
        return new

    def _copy(self) -> NestedId:
        # Roots are never mutated, so sharing them is safe.
        return NestedId._make(self._value, self._counter, self._root)

    def root(self) -> NestedId | None:
        """Return the parent of this identifier, or None at the top."""
        return self._root

    def is_counter(self) -> bool:
        """Return True if the last segment is a counter."""
        return self._counter

    def is_string(self) -> bool:
        """Return True if the last segment is a string."""
        return not self._counter

    def append_string(self, id: str) -> NestedId:
        """Return a new identifier with a string segment below this one."""
        return NestedId._make(id, False, self._copy())

    def append_counter(self) -> NestedId:
        """Return a new identifier with a counter segment, starting at 0, below this one."""
        return NestedId._make(0, True, self._copy())

    def increment(self) -> NestedId:
        """Return a copy with the counter incremented.

        Raises ValueError if the last segment is not a counter.
        """
        new = self._copy()
        new.increment_in_place()
        return new

    def increment_in_place(self) -> NestedId:
        """Increment the counter and return the identifier as it was before.

        Raises ValueError if the last segment is not a counter.
        """
        if not self._counter:
            raise ValueError("cannot increment a string ID")
        previous = self._copy()
        self._value = int(self._value) + 1
        return previous

    def __str__(self) -> str:
        if self._root is None:
            return str(self._value)
        return f"{self._root}/{self._value}"

    def __repr__(self) -> str:
        return f"NestedId({str(self)!r})"

    def _key(self) -> tuple:
        return (self._counter, self._value, self._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NestedId):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NestedId):
            return NotImplemented
        return str(self) < str(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NestedId):
            return NotImplemented
        return str(self) <= str(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NestedId):
            return NotImplemented
        return str(self) > str(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NestedId):
            return NotImplemented
        return str(self) >= str(other)