# Planner — main orchestrator
# Coordinates: cluster focus per day → slot-by-slot filtering → selection
# A single used-set threads through every day so no business repeats.

import logging
from datetime import date, timedelta
from typing import List, Optional, Set

from config import (
    CLUSTER_LABELS, FALLBACK_CLUSTERS, SIGNATURE_DAY, SLOT_TIMES, TRAVEL_STYLES
)
from data.catalog import get_signature_experience, signature_as_business
from models.schemas import (
    Category, Cluster, DayPlan, Itinerary, Preferences, ScheduledActivity,
    SlotType, TimeSlot, TravelStyle
)
from services.availability import filter_businesses
from services.errors import InvalidPreferencesError
from services.selector import select_business

logger = logging.getLogger(__name__)

# Time-of-day window each catalog slot is filtered against
SLOT_WINDOWS = {
    SlotType.MORNING: TimeSlot.MORNING,
    SlotType.MAIN:    TimeSlot.AFTERNOON,
    SlotType.LUNCH:   TimeSlot.LUNCH,
    SlotType.EVENING: TimeSlot.EVENING,
}


def allowed_clusters(travel_style: TravelStyle) -> List[Cluster]:
    style = TRAVEL_STYLES.get(travel_style.value)
    names = style["clusters"] if style else FALLBACK_CLUSTERS
    return [Cluster(c) for c in names]


def cluster_focus_for_day(day: int, travel_style: TravelStyle, allowed: List[Cluster]) -> Cluster:
    # stay_local keeps every day in town
    if day == 1 or travel_style == TravelStyle.STAY_LOCAL:
        return Cluster.TOWN_CENTER
    if day == 2 and Cluster.WINE_REGION in allowed:
        return Cluster.WINE_REGION
    if day == 3 and Cluster.COASTAL in allowed:
        return Cluster.COASTAL
    return allowed[day % len(allowed)]


def slot_categories(slot: SlotType, interests: List[Category]) -> List[Category]:
    if slot == SlotType.MORNING:
        return [Category.COFFEE, Category.FOOD]
    if slot == SlotType.MAIN:
        return [i for i in interests if i != Category.COFFEE]
    if slot in (SlotType.LUNCH, SlotType.EVENING):
        return [Category.FOOD]
    raise ValueError(f"Slot '{slot.value}' is not filled from the catalog")


def slot_clusters(slot: SlotType, focus: Cluster) -> List[Cluster]:
    """Clusters searched for a slot, in search order (earlier wins rating ties)."""
    if slot == SlotType.MORNING:
        # lodge and town are always in reach so mornings never go empty
        return _unique([focus, Cluster.LODGE, Cluster.TOWN_CENTER])
    if slot == SlotType.MAIN:
        return [focus]
    if slot == SlotType.LUNCH:
        return _unique([focus, Cluster.TOWN_CENTER])
    if slot == SlotType.EVENING:
        if focus == Cluster.COASTAL:
            return [Cluster.COASTAL]
        return _unique([focus, Cluster.TOWN_CENTER, Cluster.LODGE])
    raise ValueError(f"Slot '{slot.value}' is not filled from the catalog")


def _unique(clusters: List[Cluster]) -> List[Cluster]:
    out = []
    for c in clusters:
        if c not in out:
            out.append(c)
    return out


def _fill_slot(
    slot:      SlotType,
    time:      str,
    focus:     Cluster,
    interests: List[Category],
    used:      Set[str]
) -> Optional[ScheduledActivity]:
    categories = slot_categories(slot, interests)
    if not categories:
        logger.debug(f"No categories for {slot.value} slot, skipping")
        return None

    candidates = filter_businesses(categories, slot_clusters(slot, focus), used, SLOT_WINDOWS[slot])
    chosen     = select_business(candidates, used, interests)
    if chosen is None:
        logger.debug(f"No candidate for {slot.value} slot in {focus.value}, skipping")
        return None
    return ScheduledActivity(time=time, activity=chosen, type=slot)


def plan_day(
    day:           int,
    preferences:   Preferences,
    cluster_focus: Cluster,
    used:          Set[str],
    start_date:    Optional[date] = None
) -> DayPlan:
    """
    Build one day: morning → signature (day 2 only) → main → lunch → evening.
    Slots with no candidate are left out; `used` is updated in place.
    """
    interests  = list(preferences.interests)
    activities = []

    morning = _fill_slot(SlotType.MORNING, SLOT_TIMES["morning"], cluster_focus, interests, used)
    if morning:
        activities.append(morning)

    signature_placed = False
    if day == SIGNATURE_DAY:
        experience = get_signature_experience(preferences.signature_experience)
        if experience:
            activities.append(ScheduledActivity(
                time=SLOT_TIMES["signature"],
                activity=signature_as_business(experience),
                type=SlotType.SIGNATURE
            ))
            signature_placed = True
        elif preferences.signature_experience:
            logger.warning(f"Unknown signature experience '{preferences.signature_experience}', skipping")

    main_time = SLOT_TIMES["main_late"] if signature_placed else SLOT_TIMES["main"]
    for slot, time in (
        (SlotType.MAIN,    main_time),
        (SlotType.LUNCH,   SLOT_TIMES["lunch"]),
        (SlotType.EVENING, SLOT_TIMES["evening"]),
    ):
        scheduled = _fill_slot(slot, time, cluster_focus, interests, used)
        if scheduled:
            activities.append(scheduled)

    start    = start_date or preferences.start_date or date.today()
    day_date = start + timedelta(days=day - 1)

    return DayPlan(
        day=day,
        date=day_date,
        date_label=f"{day_date:%A}, {day_date:%B} {day_date.day}",
        cluster_focus=cluster_focus,
        cluster_label=CLUSTER_LABELS[cluster_focus.value],
        activities=activities
    )


def assemble_itinerary(preferences: Preferences, used: Optional[Set[str]] = None) -> Itinerary:
    """
    Full pipeline:
      1. Resolve travel style → reachable clusters
      2. For each day: pick the cluster focus, then plan the day
      3. Thread one used-set across all days
    Pass `used` to have the caller's set filled in place.
    """
    if not preferences.interests:
        raise InvalidPreferencesError("Select at least one interest to generate an itinerary")

    used    = set() if used is None else used
    allowed = allowed_clusters(preferences.travel_style)
    start   = preferences.start_date or date.today()

    logger.info(
        f"Generating {preferences.trip_duration}-day itinerary for "
        f"'{preferences.guest_name}' ({preferences.travel_style.value})"
    )

    days = []
    for day in range(1, preferences.trip_duration + 1):
        focus = cluster_focus_for_day(day, preferences.travel_style, allowed)
        days.append(plan_day(day, preferences, focus, used, start_date=start))

    return Itinerary(
        guest_name=preferences.guest_name,
        travel_style=preferences.travel_style,
        days=days
    )
