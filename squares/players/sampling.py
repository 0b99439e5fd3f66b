"""Random move sampling used to cap the search branching factor."""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def random_subset(items: Sequence[T], size: int, rng: Optional[random.Random] = None) -> List[T]:
    """Return ``min(size, len(items))`` distinct items in random order.

    Equivalent to a Fisher-Yates shuffle followed by truncation, without
    shuffling the tail that would be dropped. ``items`` is left untouched.
    """
    rng = rng or random.Random()
    return rng.sample(list(items), max(0, min(size, len(items))))


def random_choice(items: Sequence[T], rng: Optional[random.Random] = None) -> Optional[T]:
    if not items:
        return None
    rng = rng or random.Random()
    return items[rng.randrange(len(items))]
