"""Resizable array with index-addressed insertion and removal.

Elements live in a backing list whose length is the capacity; only the
first ``size()`` slots are part of the sequence. When an operation needs
more room the capacity grows to ``round(size * 1.5)``, never less than what
the operation requires. Capacity never shrinks.
"""

import logging
import math
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

from sorting import Comparator, merge_sort

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 1.5

Sorter = Callable[[Any, Comparator], None]


class DynamicArray(Generic[T]):
    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, sorter: Optional[Sorter] = None) -> None:
        if not isinstance(capacity, int) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        if capacity == 0:
            capacity = DEFAULT_CAPACITY
        self._data: List[Optional[T]] = [None] * capacity
        self._size: int = 0
        self._sorter: Sorter = sorter if sorter is not None else merge_sort

    @classmethod
    def with_capacity(cls, capacity: int, *, sorter: Optional[Sorter] = None) -> 'DynamicArray[T]':
        return cls(capacity, sorter=sorter)

    @classmethod
    def with_default_capacity(cls, *, sorter: Optional[Sorter] = None) -> 'DynamicArray[T]':
        return cls(DEFAULT_CAPACITY, sorter=sorter)

    @classmethod
    def from_array(cls, array: Optional[Sequence[T]], *, sorter: Optional[Sorter] = None) -> 'DynamicArray[T]':
        """Build an array seeded with the elements of ``array``, in order.

        The elements are copied, so later changes to ``array`` do not affect
        the result. The seed is grown once right away, leaving free slots
        even though nothing has been inserted yet.
        """
        if array is None:
            raise TypeError("DynamicArray.from_array: initial array is None")
        arr: DynamicArray[T] = cls(sorter=sorter)
        arr._data = list(array)
        arr._size = len(arr._data)
        arr._grow()
        return arr

    def _grow(self, required: int = 1) -> None:
        old_cap = len(self._data)
        new_cap = max(math.floor(self._size * GROWTH_FACTOR + 0.5), old_cap + required)
        self._data.extend([None] * (new_cap - old_cap))
        logger.debug("DynamicArray grown from %d to %d slots (size=%d)", old_cap, new_cap, self._size)

    def _check_element_index(self, index: int, op: str) -> None:
        if not isinstance(index, int):
            raise TypeError(f"DynamicArray.{op}: index must be an integer")
        if index < 0 or index >= self._size:
            raise IndexError(f"DynamicArray.{op}: index out of range")

    def _check_position_index(self, index: int, op: str) -> None:
        # insertion also accepts index == size (append)
        if not isinstance(index, int):
            raise TypeError(f"DynamicArray.{op}: index must be an integer")
        if index < 0 or index > self._size:
            raise IndexError(f"DynamicArray.{op}: index out of range")

    def get(self, index: int) -> T:
        self._check_element_index(index, "get")
        return self._data[index]

    def set(self, index: int, element: T) -> T:
        self._check_element_index(index, "set")
        old = self._data[index]
        self._data[index] = element
        return old

    def add_at(self, index: int, element: T) -> None:
        self._check_position_index(index, "add_at")
        if self._size == len(self._data):
            self._grow()
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = element
        self._size += 1

    def add(self, element: T) -> bool:
        self.add_at(self._size, element)
        return True

    def add_all(self, elements: Iterable[T]) -> bool:
        batch = list(elements)
        count = len(batch)
        if count == 0:
            return False
        while count > len(self._data) - self._size:
            self._grow(count - (len(self._data) - self._size))
        self._data[self._size:self._size + count] = batch
        self._size += count
        return True

    def remove_at(self, index: int) -> T:
        self._check_element_index(index, "remove_at")
        removed = self._data[index]
        self._size -= 1
        for i in range(index, self._size):
            self._data[i] = self._data[i + 1]
        self._data[self._size] = None
        return removed

    def remove(self, value: Any) -> bool:
        """Remove the first element equal to ``value``; report whether one was found."""
        index = self.index_of(value)
        if index >= 0:
            self.remove_at(index)
            return True
        return False

    def index_of(self, value: Any) -> int:
        for i in range(self._size):
            if self._data[i] == value:
                return i
        return -1

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def sort(self, comparator: Comparator) -> None:
        """Sort in place. Elements the comparator ranks equal keep their order."""
        self._sorter(self, comparator)

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self._size == 0

    def reserve(self, new_cap: int) -> None:
        if new_cap <= len(self._data):
            return
        self._data.extend([None] * (new_cap - len(self._data)))

    def copy(self) -> 'DynamicArray[T]':
        clone: DynamicArray[T] = DynamicArray(len(self._data), sorter=self._sorter)
        for i in range(self._size):
            clone._data[i] = self._data[i]
        clone._size = self._size
        return clone

    def to_list(self) -> List[T]:
        return self._data[:self._size]

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __contains__(self, value: Any) -> bool:
        return self.index_of(value) >= 0

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        if self._size != other._size:
            return False
        for i in range(self._size):
            if self._data[i] != other._data[i]:
                return False
        return True

    def __hash__(self) -> int:
        result = hash((type(self).__name__, self._size))
        return 31 * result + hash(tuple(self._data[:self._size]))

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[i]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"DynamicArray({self.to_list()})"

    def __str__(self) -> str:
        return f"DynamicArray(size={self._size}, capacity={len(self._data)})"
