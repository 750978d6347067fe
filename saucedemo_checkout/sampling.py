import random
from typing import List, Optional


def random_indices(total: int, count: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Pick `count` distinct indices from range(total), uniformly at random.
    The order of the returned list is not meaningful.
    """
    if total < 0 or count < 0:
        raise ValueError(f"total and count must be non-negative (got total={total}, count={count})")
    if count > total:
        raise ValueError(f"Cannot pick {count} distinct indices out of {total}")

    rng = rng or random
    indices = set()
    while len(indices) < count:
        indices.add(rng.randrange(total))
    return list(indices)
