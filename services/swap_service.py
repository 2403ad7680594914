# Swap Service — alternatives for one placed activity + the swap itself
# Alternatives reuse the availability filter with the activity's own
# category; a swap trades one name in the used-set for another.

import logging
from typing import List, Set, Tuple

from models.schemas import Business, Cluster, Itinerary, ScheduledActivity, SlotType
from services.availability import filter_businesses
from services.errors import InvalidSwapError
from services.planner import SLOT_WINDOWS
from services.selector import rank

logger = logging.getLogger(__name__)


def alternative_clusters(cluster_focus: Cluster) -> List[Cluster]:
    if cluster_focus == Cluster.COASTAL:
        return [Cluster.COASTAL]
    clusters = [cluster_focus]
    for c in (Cluster.TOWN_CENTER, Cluster.LODGE):
        if c not in clusters:
            clusters.append(c)
    return clusters


def find_alternatives(
    current:       Business,
    slot_type:     SlotType,
    cluster_focus: Cluster,
    used:          Set[str]
) -> List[Business]:
    """
    Unused businesses that could stand in for `current` in the same slot.
    Ordered by rating (catalog order on ties). Signature slots have none.
    """
    window = SLOT_WINDOWS.get(slot_type)
    if window is None:
        return []

    candidates = filter_businesses([current.category], alternative_clusters(cluster_focus), used, window)
    return rank([b for b in candidates if b.name != current.name])


def alternatives_for(itinerary: Itinerary, day_index: int, activity_index: int, used: Set[str]) -> List[Business]:
    day, scheduled = _locate(itinerary, day_index, activity_index)
    return find_alternatives(scheduled.activity, scheduled.type, day.cluster_focus, used)


def swap_activity(
    itinerary:      Itinerary,
    day_index:      int,
    activity_index: int,
    chosen:         Business,
    used:           Set[str]
) -> Tuple[Itinerary, Set[str]]:
    """
    Replace one placed business with `chosen`, which must be one of its
    current alternatives.
    Returns new (itinerary, used) for the caller to commit together;
    the inputs are not modified. Indices are 0-based.
    """
    day, scheduled = _locate(itinerary, day_index, activity_index)
    old = scheduled.activity

    if scheduled.type == SlotType.SIGNATURE:
        raise InvalidSwapError("Signature experiences cannot be swapped")
    if chosen.name in used:
        raise InvalidSwapError(f"'{chosen.name}' is already in the itinerary")
    allowed = find_alternatives(old, scheduled.type, day.cluster_focus, used)
    if chosen.name not in {b.name for b in allowed}:
        raise InvalidSwapError(f"'{chosen.name}' cannot replace '{old.name}' in the {scheduled.type.value} slot")

    new_used = set(used)
    new_used.discard(old.name)
    new_used.add(chosen.name)

    new_itinerary = itinerary.model_copy(deep=True)
    new_itinerary.days[day_index].activities[activity_index] = ScheduledActivity(
        time=scheduled.time,
        activity=chosen,
        type=scheduled.type
    )

    logger.info(f"Swapped '{old.name}' → '{chosen.name}' on day {day_index + 1}")
    return new_itinerary, new_used


def _locate(itinerary: Itinerary, day_index: int, activity_index: int):
    if not 0 <= day_index < len(itinerary.days):
        raise InvalidSwapError(f"Day index {day_index} is out of range")
    day = itinerary.days[day_index]
    if not 0 <= activity_index < len(day.activities):
        raise InvalidSwapError(f"Activity index {activity_index} is out of range for day {day.day}")
    return day, day.activities[activity_index]
