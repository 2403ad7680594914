from collections import Counter
from datetime import date

import pytest

from models.schemas import Cluster, Preferences, SlotType, TravelStyle
from services.errors import InvalidPreferencesError
from services.planner import (
    SLOT_WINDOWS, allowed_clusters, assemble_itinerary, cluster_focus_for_day,
    plan_day, slot_clusters
)


def _names(day):
    return [a.activity.name for a in day.activities]


def test_moderate_wine_two_days(make_prefs):
    used      = set()
    itinerary = assemble_itinerary(make_prefs(), used)

    day1, day2 = itinerary.days
    assert day1.cluster_focus == Cluster.TOWN_CENTER
    assert day2.cluster_focus == Cluster.WINE_REGION
    assert _names(day1) == ["Graze at Rio Nido Lodge", "Boon Eat + Drink", "Saucy Mama's Pizza"]
    assert _names(day2) == ["Big Bottom Market", "Furthermore Wines"]

    main = day2.activities[1]
    assert main.type == SlotType.MAIN
    assert main.time == "11:00 AM"
    assert main.activity.cluster == Cluster.WINE_REGION
    assert used == set(itinerary.business_names())


def test_generation_is_reproducible(make_prefs):
    prefs = make_prefs(travel_style="day_trip", interests=["nature", "food"], trip_duration=5)
    first = assemble_itinerary(prefs)
    again = assemble_itinerary(prefs)
    assert first == again


def test_dates_and_labels(make_prefs):
    itinerary = assemble_itinerary(make_prefs(trip_duration=3))
    assert [d.date for d in itinerary.days] == [date(2026, 10, 19), date(2026, 10, 20), date(2026, 10, 21)]
    assert itinerary.days[1].date_label == "Tuesday, October 20"
    assert itinerary.days[0].cluster_label == "Guerneville"
    assert itinerary.days[1].cluster_label == "Wineries"


def test_signature_lands_on_day_two_and_pushes_main(make_prefs):
    used      = set()
    itinerary = assemble_itinerary(make_prefs(signature_experience="river_adventure"), used)
    day2      = itinerary.days[1]

    assert [a.type for a in day2.activities] == [SlotType.MORNING, SlotType.SIGNATURE, SlotType.MAIN]
    signature = day2.activities[1]
    assert signature.time == "10:00 AM"
    assert signature.activity.rating == 5.0
    assert signature.activity.signature_id == "river_adventure"
    assert signature.activity.name not in used
    assert day2.activities[2].time == "2:00 PM"
    assert all(a.type != SlotType.SIGNATURE for a in itinerary.days[0].activities)


def test_unknown_signature_is_ignored(make_prefs):
    itinerary = assemble_itinerary(make_prefs(signature_experience="hot_air_balloon"))
    day2      = itinerary.days[1]
    assert SlotType.SIGNATURE not in [a.type for a in day2.activities]
    assert day2.activities[1].time == "11:00 AM"


def test_day_trip_reaches_the_coast(make_prefs):
    itinerary = assemble_itinerary(make_prefs(travel_style="day_trip", interests=["nature", "food"], trip_duration=3))
    day1, day2, day3 = itinerary.days

    assert _names(day1) == ["Graze at Rio Nido Lodge", "Russian River Beach", "Boon Eat + Drink", "Saucy Mama's Pizza"]
    assert _names(day2) == ["Big Bottom Market"]
    assert day3.cluster_focus == Cluster.COASTAL
    assert _names(day3) == ["Jilly's Roadhouse", "Goat Rock Beach", "The Blue Heron"]


def test_empty_slots_are_omitted(make_prefs):
    itinerary = assemble_itinerary(make_prefs(interests=["arts"], trip_duration=1))
    day = itinerary.days[0]
    assert SlotType.MAIN not in [a.type for a in day.activities]
    assert all(a is not None for a in day.activities)


def test_coffee_only_interest_skips_main(make_prefs):
    itinerary = assemble_itinerary(make_prefs(interests=["coffee"], trip_duration=1))
    assert [a.type for a in itinerary.days[0].activities] == [SlotType.MORNING, SlotType.LUNCH, SlotType.EVENING]
    # coffee interest pulls the roastery ahead of the higher-rated lodge restaurant
    assert itinerary.days[0].activities[0].activity.name == "Coffee Bazaar"


def test_stay_local_keeps_every_day_in_town(make_prefs):
    itinerary = assemble_itinerary(make_prefs(travel_style="stay_local", interests=["food"], trip_duration=4))
    assert {d.cluster_focus for d in itinerary.days} == {Cluster.TOWN_CENTER}


@pytest.mark.parametrize("style,day,expected", [
    ("relaxed",  2, Cluster.LODGE),
    ("relaxed",  3, Cluster.TOWN_CENTER),
    ("moderate", 3, Cluster.LODGE),
    ("moderate", 4, Cluster.TOWN_CENTER),
    ("moderate", 5, Cluster.WINE_REGION),
    ("day_trip", 4, Cluster.LODGE),
    ("day_trip", 5, Cluster.TOWN_CENTER),
])
def test_cluster_focus_round_robin(style, day, expected):
    style = TravelStyle(style)
    assert cluster_focus_for_day(day, style, allowed_clusters(style)) == expected


def test_no_interests_is_rejected():
    prefs = Preferences.model_construct(
        guest_name="Sam", interests=[], travel_style=TravelStyle.MODERATE,
        trip_duration=2, group_size=2, signature_experience=None, start_date=None
    )
    with pytest.raises(InvalidPreferencesError):
        assemble_itinerary(prefs)


def test_plan_day_threads_used_set(make_prefs):
    used  = {"Graze at Rio Nido Lodge", "Big Bottom Market", "Coffee Bazaar"}
    day   = plan_day(1, make_prefs(interests=["food"]), Cluster.TOWN_CENTER, used)
    assert SlotType.MORNING not in [a.type for a in day.activities]
    assert "Boon Eat + Drink" in used


INTEREST_SETS = [["wine"], ["food"], ["nature", "food"], ["coffee", "dessert", "wine"], ["arts", "music"]]


@pytest.mark.parametrize("style", [s.value for s in TravelStyle])
@pytest.mark.parametrize("interests", INTEREST_SETS)
def test_itinerary_properties(make_prefs, style, interests):
    prefs     = make_prefs(travel_style=style, interests=interests, trip_duration=5, signature_experience="foraging_tour")
    used      = set()
    itinerary = assemble_itinerary(prefs, used)

    names = itinerary.business_names()
    assert max(Counter(names).values()) == 1
    assert len(itinerary.days) == 5

    for day in itinerary.days:
        for scheduled in day.activities:
            if scheduled.type == SlotType.SIGNATURE:
                continue
            business = scheduled.activity
            assert business.serves(SLOT_WINDOWS[scheduled.type])
            assert business.cluster in slot_clusters(scheduled.type, day.cluster_focus)
            assert business.name in used


def test_rating_tie_goes_to_the_focus_cluster(make_prefs):
    # Jilly's (coastal) and Big Bottom (town) are both 4.6 and neither matches wine
    used = {"Graze at Rio Nido Lodge", "Coffee Bazaar"}
    day  = plan_day(3, make_prefs(travel_style="day_trip"), Cluster.COASTAL, used)
    assert day.activities[0].type == SlotType.MORNING
    assert day.activities[0].activity.name == "Jilly's Roadhouse"
    assert "Big Bottom Market" not in used
