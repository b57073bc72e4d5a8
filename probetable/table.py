from dataclasses import dataclass, field
import enum
from typing import Iterator

from .shared import printf_err


_debug_trace_probing = False


def set_debug_trace_probing(b: bool):
    global _debug_trace_probing
    _debug_trace_probing = b


class Method(enum.Enum):
    LINEAR_PROBING = "Linear Probing"
    DOUBLE_HASHING = "Double Hashing"


TABLE_FULL = 0

_HASH_MASK = 0xFFFFFFFF


@dataclass
class Entry:
    key: str | None
    frequency: int

    @classmethod
    def empty(cls):
        return Entry(None, 0)


@dataclass
class ProbingTable:
    """
    Fixed capacity open addressing table of word frequencies.

    `insertion_collisions[k]` holds the number of collisions the k-th distinct
    key met before it was placed. It is indexed by insertion order, not by
    slot position.
    """

    capacity: int
    method: Method
    entries: tuple[Entry, ...] = field(init=False, repr=False)
    insertion_collisions: list[int] = field(init=False, repr=False)
    num_keys: int = field(init=False, default=0)

    def __post_init__(self):
        if not isinstance(self.method, Method):
            raise ValueError(f"Unknown probing method: {self.method!r}")
        if self.capacity < 1:
            raise ValueError(f"Capacity should be positive, got {self.capacity}")

        self.entries = tuple(Entry.empty() for _ in range(self.capacity))
        self.insertion_collisions = [0] * self.capacity

    def home_index(self, key: str) -> int:
        return hash_string(key) % self.capacity

    def step(self, key_hash: int) -> int:
        if self.method == Method.LINEAR_PROBING or self.capacity == 1:
            return 1
        return 1 + key_hash % (self.capacity - 1)

    def probe_sequence(self, key: str) -> Iterator[int]:
        """Yield the slots to try for `key`: the home slot, then one slot per collision."""
        key_hash = hash_string(key)
        step = self.step(key_hash)
        index = key_hash % self.capacity

        for _ in range(self.capacity):
            yield index
            index = (index + step) % self.capacity

    def insert(self, key: str) -> int:
        """
        Add one occurrence of `key`.

        Returns the frequency of `key` after the insert, or TABLE_FULL if it
        is a new key and no empty slot is left.
        """
        for collisions, index in enumerate(self.probe_sequence(key)):
            entry = self.entries[index]
            if _debug_trace_probing:
                printf_err("insert {0!r} probe {1:d} slot {2:d}\n", key, collisions, index)

            if entry.key is None:
                entry.key = key
                entry.frequency = 1
                self.insertion_collisions[self.num_keys] = collisions
                self.num_keys += 1
                return 1
            elif entry.key == key:
                entry.frequency += 1
                return entry.frequency

        return TABLE_FULL

    def search(self, key: str) -> int:
        for collisions, index in enumerate(self.probe_sequence(key)):
            entry = self.entries[index]
            if _debug_trace_probing:
                printf_err("search {0!r} probe {1:d} slot {2:d}\n", key, collisions, index)

            if entry.key is None:
                return 0
            elif entry.key == key:
                return entry.frequency

        return 0

    def load_factor(self) -> float:
        return self.num_keys / self.capacity

    def is_full(self) -> bool:
        return self.num_keys == self.capacity


def hash_string(key: str) -> int:
    hash = 0
    for i in range(len(key)):
        hash = (ord(key[i]) + 31 * hash) & _HASH_MASK
    return hash
