# Selector — deterministic pick from a candidate pool
# Order: interest match first, then rating (desc). Python's sort is
# stable, so equal keys keep catalog order.

from typing import Iterable, List, Optional, Set

from models.schemas import Business, Category


def rank(candidates: List[Business], interests: Iterable[Category] = ()) -> List[Business]:
    wanted = set(interests)
    return sorted(candidates, key=lambda b: (b.category not in wanted, -b.rating))


def select_business(
    candidates: List[Business],
    used:       Set[str],
    interests:  Iterable[Category] = ()
) -> Optional[Business]:
    """
    Pick the best candidate and commit its name into `used`.
    Returns None when nothing is left to pick.
    """
    available = [b for b in candidates if b.name not in used]
    if not available:
        return None

    selected = rank(available, interests)[0]
    used.add(selected.name)
    return selected
