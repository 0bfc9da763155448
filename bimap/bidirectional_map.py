import logging
from typing import (
    Dict,
    Generic,
    Hashable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
    ValuesView,
)

from bimap.utility.absent import ABSENT
from bimap.utility.exceptions import AbsentMarkerError

KeyT = TypeVar("KeyT", bound=Hashable)
ValueT = TypeVar("ValueT", bound=Hashable)

PairsT = Union[Mapping[KeyT, ValueT], Iterable[Tuple[KeyT, ValueT]]]


class BidirectionalMap(Generic[KeyT, ValueT]):
    """A one-to-one mapping that can be looked up by key and by value.

    Keys and values are both unique:
    - setting an existing key replaces its value
    - setting an existing value replaces its key

    A single ``set`` can evict two existing entries, e.g. after ``set("a", 1)`` and ``set("b", 2)``, ``set("a", 2)``
    leaves only ``"a" -> 2``.

    Not thread safe, callers sharing a map across threads have to serialize access themselves.
    """

    def __init__(self, pairs: Optional[PairsT] = None):
        self._forward: Dict[KeyT, ValueT] = dict()
        self._reverse: Dict[ValueT, KeyT] = dict()

        if pairs is not None:
            self.update(pairs)

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, key) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Tuple[KeyT, ValueT]]:
        return iter(self._forward.items())

    def __eq__(self, other) -> bool:
        if not isinstance(other, BidirectionalMap):
            return NotImplemented

        return self._forward == other._forward

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._forward!r})"

    @property
    def size(self) -> int:
        return len(self._forward)

    def keys(self) -> KeysView[KeyT]:
        return self._forward.keys()

    def values(self) -> ValuesView[ValueT]:
        return self._forward.values()

    def items(self) -> ItemsView[KeyT, ValueT]:
        return self._forward.items()

    def get(self, key: KeyT, default=ABSENT):
        """returns the value mapped from ``key``, or ``default`` (``ABSENT`` unless given) if there is none"""
        return self._forward.get(key, default)

    def get_reverse(self, value: ValueT, default=ABSENT):
        """returns the key that maps to ``value``, or ``default`` (``ABSENT`` unless given) if there is none"""
        return self._reverse.get(value, default)

    def has(self, key: KeyT) -> bool:
        return key in self._forward

    def has_reverse(self, value: ValueT) -> bool:
        return value in self._reverse

    def set(self, key: KeyT, value: ValueT) -> "BidirectionalMap[KeyT, ValueT]":
        if key is ABSENT or value is ABSENT:
            raise AbsentMarkerError(f"{ABSENT!r} cannot be stored in {self.__class__.__name__}: {key=}, {value=}")

        old_value = self._forward.get(key, ABSENT)
        old_key = self._reverse.get(value, ABSENT)

        if old_value is not ABSENT and old_value is not value and old_value != value:
            self._reverse.pop(old_value)
            logging.debug(f"{self.__class__.__name__}: {key=} moved from value={old_value!r} to {value=}")

        # an existing key keeps its position in the forward dict, only a different old key is dropped; identity is
        # checked first as dict lookups do, so a nan key or value still matches itself
        if old_key is not ABSENT and old_key is not key and old_key != key:
            self._forward.pop(old_key)
            logging.debug(f"{self.__class__.__name__}: evicted key={old_key!r} for {value=}")

        self._forward[key] = value
        self._reverse[value] = key
        return self

    def update(self, pairs: PairsT):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        for key, value in pairs:
            self.set(key, value)

    def delete(self, key: KeyT) -> bool:
        value = self._forward.pop(key, ABSENT)
        if value is ABSENT:
            return False

        self._reverse.pop(value)
        return True

    def delete_reverse(self, value: ValueT) -> bool:
        key = self._reverse.pop(value, ABSENT)
        if key is ABSENT:
            return False

        self._forward.pop(key)
        return True

    def clear(self):
        self._forward.clear()
        self._reverse.clear()
