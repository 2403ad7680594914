import pytest

from data.catalog import BUSINESSES
from models.schemas import Business, Category, Cluster, TimeSlot
from services.availability import filter_businesses


def _names(businesses):
    return [b.name for b in businesses]


def test_filters_by_cluster_category_and_slot():
    result = filter_businesses([Category.FOOD], [Cluster.TOWN_CENTER], set(), TimeSlot.LUNCH)
    assert _names(result) == ["Boon Eat + Drink", "Saucy Mama's Pizza", "Big Bottom Market"]


def test_excludes_used_names():
    used   = {"Boon Eat + Drink"}
    result = filter_businesses([Category.FOOD], [Cluster.TOWN_CENTER], used, TimeSlot.EVENING)
    assert _names(result) == ["Saucy Mama's Pizza"]


def test_results_follow_cluster_then_category_order():
    result = filter_businesses(
        [Category.COFFEE, Category.FOOD],
        [Cluster.TOWN_CENTER, Cluster.LODGE],
        set(),
        TimeSlot.MORNING
    )
    assert _names(result) == ["Coffee Bazaar", "Big Bottom Market", "Graze at Rio Nido Lodge"]


def test_coastal_morning_lists_the_coast_first():
    used   = {"Graze at Rio Nido Lodge", "Coffee Bazaar"}
    result = filter_businesses(
        [Category.COFFEE, Category.FOOD],
        [Cluster.COASTAL, Cluster.LODGE, Cluster.TOWN_CENTER, Cluster.COASTAL],
        used,
        TimeSlot.MORNING
    )
    assert _names(result) == [
        "Jilly's Roadhouse", "Cafe Aquatica", "Duncan Mills General Store & Cafe", "Big Bottom Market"
    ]


def test_every_result_serves_the_slot():
    for slot in TimeSlot:
        for b in filter_businesses(list(Category), list(Cluster), set(), slot):
            assert slot in b.hours.time_appropriate


def test_business_without_hours_is_always_available():
    anytime = Business(
        name="Pop-up Stand", type="Stand", description="", rating=4.0,
        price_range="$", category="food", cluster="lodge"
    )
    catalog = BUSINESSES + [anytime]
    for slot in TimeSlot:
        result = filter_businesses([Category.FOOD], [Cluster.LODGE], set(), slot, catalog=catalog)
        assert "Pop-up Stand" in _names(result)


def test_empty_result_is_not_an_error():
    assert filter_businesses([Category.WINE], [Cluster.COASTAL], set(), TimeSlot.AFTERNOON) == []


def test_requires_categories_and_clusters():
    with pytest.raises(ValueError):
        filter_businesses([], [Cluster.LODGE], set(), TimeSlot.LUNCH)
    with pytest.raises(ValueError):
        filter_businesses([Category.FOOD], [], set(), TimeSlot.LUNCH)
