import os
from dotenv import load_dotenv

load_dotenv()

LODGE_NAME    = os.getenv("LODGE_NAME", "Rio Nido Lodge")
LODGE_ADDRESS = os.getenv("LODGE_ADDRESS", "4444 Wood Road, Guerneville, CA 95446")
LOG_LEVEL     = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_TRIP_DAYS = int(os.getenv("MAX_TRIP_DAYS", "5"))
MAX_SESSIONS  = int(os.getenv("MAX_SESSIONS", "500"))
CORS_ORIGINS  = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# ── Travel styles → reachable clusters (ordered) ────────────────
TRAVEL_STYLES = {
    "stay_local": {
        "label":       "Stay Local",
        "description": "Lodge area & walking distance only (0-5 min)",
        "clusters":    ["lodge", "town_center"]
    },
    "relaxed": {
        "label":       "Relaxed Pace",
        "description": "Short drives welcome (5-12 min)",
        "clusters":    ["lodge", "town_center"]
    },
    "moderate": {
        "label":       "Moderate Activity",
        "description": "Wine country exploring (up to 15 min)",
        "clusters":    ["lodge", "town_center", "wine_region"]
    },
    "day_trip": {
        "label":       "Day Trip Explorer",
        "description": "Full Russian River Valley (15-25 min drives)",
        "clusters":    ["lodge", "town_center", "wine_region", "coastal"]
    }
}

FALLBACK_CLUSTERS = ["lodge", "town_center"]

# ── Display labels per cluster ──────────────────────────────────
CLUSTER_LABELS = {
    "lodge":       "Lodge",
    "town_center": "Guerneville",
    "wine_region": "Wineries",
    "coastal":     "Coastal"
}

# ── Fixed display times per slot ────────────────────────────────
SLOT_TIMES = {
    "morning":   "8:30 AM",
    "signature": "10:00 AM",
    "main":      "11:00 AM",
    "main_late": "2:00 PM",
    "lunch":     "1:00 PM",
    "evening":   "7:00 PM"
}

# Signature experiences land on this day only
SIGNATURE_DAY = 2
