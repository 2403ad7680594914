# Availability Filter — candidate pool for one slot
# A business qualifies when its cluster and category are requested,
# its name is not yet used, and its hours admit the time slot.
# Businesses without hours are available at every slot.

from typing import Iterable, List, Optional, Set

from data.catalog import CLUSTER_INDEX, index_by_cluster
from models.schemas import Business, Category, Cluster, TimeSlot


def _ordered(values: Iterable) -> list:
    out = []
    for v in values:
        if v not in out:
            out.append(v)
    return out


def filter_businesses(
    categories: Iterable[Category],
    clusters:   Iterable[Cluster],
    used:       Set[str],
    slot:       TimeSlot,
    catalog:    Optional[List[Business]] = None
) -> List[Business]:
    """
    Return every catalog business that can fill `slot`.
    Walks clusters in the order given, then categories in the order
    given, then catalog order; an empty list means "skip this slot".
    Raises ValueError when no categories or no clusters are given.
    """
    categories = _ordered(categories)
    clusters   = _ordered(clusters)
    if not categories:
        raise ValueError("At least one category is required")
    if not clusters:
        raise ValueError("At least one cluster is required")

    index = CLUSTER_INDEX if catalog is None else index_by_cluster(catalog)

    available = []
    for cluster in clusters:
        by_category = index.get(cluster, {})
        for category in categories:
            available.extend(
                b for b in by_category.get(category, [])
                if b.name not in used and b.serves(slot)
            )
    return available
