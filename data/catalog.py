# Hand-curated catalog for the Russian River Valley around the lodge.
# Businesses are grouped by geographic cluster, then by category.
# Within a cluster and category, listing order is the catalog order
# used to break selection ties.

from typing import Dict, List, Optional

from models.schemas import Business, Category, Cluster, SignatureExperience

_CLUSTERS = {
    "lodge": {
        "food": [
            {
                "name": "Graze at Rio Nido Lodge",
                "type": "Lodge Restaurant",
                "description": "Farm-to-table dining at your lodge with Russian River wines",
                "rating": 4.8,
                "price_range": "$$",
                "local_insight": "Ask about the seasonal tasting menu featuring local Guerneville farms",
                "drive_time": "0 min - at your lodge",
                "hours": {"open": 7, "close": 22, "time_appropriate": ["morning", "lunch", "evening"]}
            }
        ]
    },

    "town_center": {
        "food": [
            {
                "name": "Boon Eat + Drink",
                "type": "Farm-to-Table Restaurant",
                "description": "Celebrity Chef Crista Luedtke's flagship with Russian River wine pairings",
                "rating": 4.7,
                "price_range": "$$",
                "local_insight": "Ask about their seasonal tasting menu - changes monthly based on local farm harvests",
                "drive_time": "8 min drive",
                "hours": {"open": 11, "close": 22, "time_appropriate": ["lunch", "evening"]}
            },
            {
                "name": "Saucy Mama's Pizza",
                "type": "Artisan Pizza",
                "description": "Wood-fired pizza with local ingredients and craft beer selection",
                "rating": 4.5,
                "price_range": "$",
                "local_insight": "Tuesday night is locals' night with special pizza deals",
                "drive_time": "7 min drive",
                "hours": {"open": 11, "close": 21, "time_appropriate": ["lunch", "evening"]}
            },
            {
                "name": "Big Bottom Market",
                "type": "Gourmet Deli & Market",
                "description": "Famous for their maple bacon biscuits and artisanal sandwiches",
                "rating": 4.6,
                "price_range": "$",
                "local_insight": "Get there early - the maple bacon biscuits sell out by 10am on weekends",
                "drive_time": "8 min drive",
                "hours": {"open": 7, "close": 16, "time_appropriate": ["morning", "lunch"]}
            }
        ],
        "coffee": [
            {
                "name": "Coffee Bazaar",
                "type": "Local Roastery",
                "description": "Local roastery with 'Russian River Blend' and homemade pastries",
                "rating": 4.4,
                "price_range": "$",
                "local_insight": "Try the 'Russian River Blend' - roasted weekly in small batches",
                "drive_time": "6 min drive",
                "hours": {"open": 7, "close": 17, "time_appropriate": ["morning", "afternoon"]}
            }
        ],
        "dessert": [
            {
                "name": "Nimble & Finn's",
                "type": "Ice Cream & Coffee",
                "description": "Artisanal ice cream with unique flavors like lavender honey",
                "rating": 4.7,
                "price_range": "$",
                "local_insight": "The lavender honey is made from Russian River Valley lavender farms",
                "drive_time": "9 min drive",
                "hours": {"open": 11, "close": 21, "time_appropriate": ["afternoon", "evening"]}
            }
        ],
        "nature": [
            {
                "name": "Russian River Beach",
                "type": "River Beach",
                "description": "Sandy river beach perfect for swimming and sunbathing",
                "rating": 4.5,
                "price_range": "Free",
                "local_insight": "Water is warmest in late afternoon - perfect after exploring",
                "drive_time": "5 min drive",
                "hours": {"open": 6, "close": 20, "time_appropriate": ["morning", "afternoon", "evening"]}
            }
        ]
    },

    "wine_region": {
        "wine": [
            {
                "name": "Furthermore Wines",
                "type": "Boutique Artisan Winery",
                "description": "Small-production winery where the winemaker often pours personally",
                "rating": 4.9,
                "price_range": "$$",
                "local_insight": "Call ahead - the winemaker loves sharing the story behind each vintage",
                "drive_time": "12 min drive",
                "hours": {"open": 11, "close": 17, "time_appropriate": ["afternoon"]}
            },
            {
                "name": "Williams Selyem",
                "type": "Legendary Cult Pinot Producer",
                "description": "Iconic cult winery with library wines and exclusive tastings",
                "rating": 4.9,
                "price_range": "$$$",
                "local_insight": "Ask about library wine tastings - some bottles from the 1980s",
                "drive_time": "14 min drive",
                "hours": {"open": 11, "close": 16, "time_appropriate": ["afternoon"]}
            },
            {
                "name": "Gary Farrell Winery",
                "type": "Elevated Tasting Experience",
                "description": "Panoramic vineyard views with award-winning Pinot and Chardonnay",
                "rating": 4.8,
                "price_range": "$$",
                "local_insight": "Book the terrace tasting for stunning Russian River Valley views",
                "drive_time": "15 min drive",
                "hours": {"open": 11, "close": 17, "time_appropriate": ["afternoon"]}
            },
            {
                "name": "Lynmar Estate",
                "type": "Biodynamic Winery & Gardens",
                "description": "Biodynamic farming with farm-to-table herb pairings",
                "rating": 4.7,
                "price_range": "$$",
                "local_insight": "Take the garden tour - they use herbs from their gardens in tastings",
                "drive_time": "13 min drive",
                "hours": {"open": 10, "close": 17, "time_appropriate": ["afternoon"]}
            },
            {
                "name": "Merry Edwards Winery",
                "type": "Pioneering Female Winemaker",
                "description": "Temple to Pinot Noir from pioneering female vintner",
                "rating": 4.8,
                "price_range": "$$",
                "local_insight": "Ask about Merry's story - she's a Russian River Valley pioneer",
                "drive_time": "11 min drive",
                "hours": {"open": 10, "close": 16, "time_appropriate": ["afternoon"]}
            }
        ]
    },

    "coastal": {
        "food": [
            {
                "name": "Jilly's Roadhouse",
                "type": "Coastal American",
                "description": "Scenic Highway 1 roadhouse with ocean views and hearty portions",
                "rating": 4.6,
                "price_range": "$$",
                "local_insight": "Sit on the deck for ocean views - weekend brunch is legendary",
                "drive_time": "22 min drive to Jenner",
                "hours": {"open": 8, "close": 20, "time_appropriate": ["morning", "lunch", "evening"]}
            },
            {
                "name": "Cafe Aquatica",
                "type": "Waterfront Cafe",
                "description": "Jenner waterfront cafe where Russian River meets the Pacific",
                "rating": 4.4,
                "price_range": "$",
                "local_insight": "Perfect spot to watch harbor seals at the river mouth",
                "drive_time": "20 min drive to Jenner",
                "hours": {"open": 8, "close": 16, "time_appropriate": ["morning", "lunch"]}
            },
            {
                "name": "The Blue Heron",
                "type": "Historic Duncan Mills",
                "description": "Historic restaurant in Victorian Duncan Mills with comfort food",
                "rating": 4.5,
                "price_range": "$$",
                "local_insight": "Try their famous pot roast - recipe hasn't changed since 1970s",
                "drive_time": "18 min drive to Duncan Mills",
                "hours": {"open": 11, "close": 21, "time_appropriate": ["lunch", "evening"]}
            },
            {
                "name": "Duncan Mills General Store & Cafe",
                "type": "Historic Breakfast Spot",
                "description": "Victorian-era general store with hearty breakfast and local atmosphere",
                "rating": 4.3,
                "price_range": "$",
                "local_insight": "The pancakes are massive - perfect for sharing after hiking",
                "drive_time": "18 min drive to Duncan Mills",
                "hours": {"open": 7, "close": 14, "time_appropriate": ["morning", "lunch"]}
            }
        ],
        "nature": [
            {
                "name": "Goat Rock Beach",
                "type": "Dramatic Coastal Beach",
                "description": "Where Russian River meets Pacific, famous harbor seal colony",
                "rating": 4.8,
                "price_range": "Free",
                "local_insight": "Visit during pupping season (March-May) to see baby harbor seals",
                "drive_time": "25 min drive to Jenner coast",
                "hours": {"open": 6, "close": 20, "time_appropriate": ["morning", "afternoon", "evening"]}
            }
        ]
    }
}

SIGNATURE_EXPERIENCES = [
    SignatureExperience(
        id="redwood_meditation",
        name="Private Redwood Grove Meditation",
        description="Guided meditation among 800-year-old redwoods at dawn",
        duration="90 minutes",
        price_range="$$$",
        location="Armstrong Redwoods State Reserve",
        distance="1.2 miles from lodge"
    ),
    SignatureExperience(
        id="wine_country_insider",
        name="Hidden Winery & Culinary Tour",
        description="Private access to appointment-only wineries with chef pairings",
        duration="6 hours",
        price_range="$$$",
        location="Westside Road Wine Corridor",
        distance="10-15 miles from lodge"
    ),
    SignatureExperience(
        id="river_adventure",
        name="Russian River Adventure Package",
        description="Private kayaking, swimming spots, and riverside picnic",
        duration="4 hours",
        price_range="$$",
        location="Russian River beaches & tributaries",
        distance="0-8 miles from lodge"
    ),
    SignatureExperience(
        id="coastal_photography",
        name="Sonoma Coast Photography Workshop",
        description="Professional photographer guides you to hidden coastal gems",
        duration="5 hours",
        price_range="$$",
        location="Jenner & Goat Rock Beach area",
        distance="20-25 miles from lodge"
    ),
    SignatureExperience(
        id="foraging_tour",
        name="Wild Mushroom & Foraging Experience",
        description="Expert-guided foraging tour with farm-to-table cooking class",
        duration="4 hours",
        price_range="$$",
        location="Occidental & Sebastopol hills",
        distance="12-15 miles from lodge"
    )
]

INTERESTS = {
    "food":     "Local Food & Dining",
    "coffee":   "Coffee Culture",
    "wine":     "Wine & Tasting",
    "nature":   "Nature & Outdoors",
    "arts":     "Arts & Culture",
    "shopping": "Local Shopping",
    "music":    "Music & Nightlife",
    "wellness": "Wellness & Spa"
}


def _load(clusters: dict) -> List[Business]:
    """Flatten the cluster → category tree, rejecting duplicate names."""
    businesses = []
    seen       = set()
    for cluster, categories in clusters.items():
        for category, entries in categories.items():
            for entry in entries:
                if entry["name"] in seen:
                    raise ValueError(f"Duplicate business name in catalog: {entry['name']}")
                seen.add(entry["name"])
                businesses.append(Business(cluster=cluster, category=category, **entry))
    return businesses


def index_by_cluster(businesses: List[Business]) -> Dict[Cluster, Dict[Category, List[Business]]]:
    """Group businesses cluster → category, keeping catalog order inside each group."""
    index: Dict[Cluster, Dict[Category, List[Business]]] = {}
    for b in businesses:
        index.setdefault(b.cluster, {}).setdefault(b.category, []).append(b)
    return index


BUSINESSES: List[Business] = _load(_CLUSTERS)
CLUSTER_INDEX = index_by_cluster(BUSINESSES)

_BY_NAME: Dict[str, Business] = {b.name: b for b in BUSINESSES}
_SIGNATURES_BY_ID: Dict[str, SignatureExperience] = {s.id: s for s in SIGNATURE_EXPERIENCES}


def get_business(name: str) -> Optional[Business]:
    return _BY_NAME.get(name)


def get_signature_experience(experience_id: Optional[str]) -> Optional[SignatureExperience]:
    if not experience_id:
        return None
    return _SIGNATURES_BY_ID.get(experience_id)


def signature_as_business(experience: SignatureExperience) -> Business:
    """Wrap a signature experience as a schedulable record (never enters the used set)."""
    return Business(
        name=experience.name,
        type="Signature Experience",
        description=experience.description,
        rating=5.0,
        price_range=experience.price_range,
        category=Category.SIGNATURE,
        drive_time=experience.distance,
        hours={"open": 0, "close": 23, "time_appropriate": ["morning", "afternoon"]},
        signature_id=experience.id,
        duration=experience.duration,
        location=experience.location,
        booking_required=experience.booking_required
    )
