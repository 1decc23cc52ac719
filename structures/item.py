"""
item.py — Array Item
====================
One bar in the sorting / searching visualizers.

Design decisions:
  - Item is frozen.  Algorithms "mutate" a working list by replacing
    slots with `with_status()` copies, so every frame handed to the
    renderer is a fresh tuple that later steps can never touch.
  - `key` is the insertion index at generation time.  It plays no part
    in comparisons; it only lets tests (and curious users) watch
    whether equal values kept their relative order.
"""

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Sequence


# ---------------------------------------------------------------------------
# Status Enum — maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class Status(Enum):
    DEFAULT   = "default"     # neutral
    COMPARING = "comparing"   # the pair under comparison
    SWAPPING  = "swapping"    # about to trade places
    SORTED    = "sorted"      # settled in its final slot (or "checked" for search)
    PIVOT     = "pivot"       # quick-sort pivot / heapify root
    TARGET    = "target"      # search hit


TERMINAL_STATUSES = frozenset({Status.SORTED, Status.TARGET})


@dataclass(frozen=True)
class Item:
    value:  int
    status: Status = Status.DEFAULT
    key:    int    = 0

    def with_status(self, status: Status) -> "Item":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {"value": self.value, "status": self.status.value, "key": self.key}

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        value = data["value"]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Item value must be an integer, got {value!r}")
        return cls(
            value=value,
            status=Status(data.get("status", "default")),
            key=data.get("key", 0),
        )


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
def make_items(values: Iterable[int]) -> List[Item]:
    """Wrap raw values, stamping each with its insertion index."""
    return [Item(value=v, key=i) for i, v in enumerate(values)]


def random_items(
    size: int = 40,
    low: int = 5,
    high: int = 100,
    seed: Optional[int] = None,
) -> List[Item]:
    rng = random.Random(seed)
    return make_items(rng.randint(low, high) for _ in range(size))


def fresh_copy(items: Sequence[Item]) -> List[Item]:
    """Working copy for an algorithm run: caller's list untouched, statuses cleared."""
    return [item.with_status(Status.DEFAULT) for item in items]


def values_of(items: Sequence[Item]) -> List[int]:
    return [item.value for item in items]
