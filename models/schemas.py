from datetime import date as Date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import MAX_TRIP_DAYS


class Category(str, Enum):
    FOOD      = "food"
    COFFEE    = "coffee"
    DESSERT   = "dessert"
    WINE      = "wine"
    NATURE    = "nature"
    ARTS      = "arts"
    SHOPPING  = "shopping"
    MUSIC     = "music"
    WELLNESS  = "wellness"
    SIGNATURE = "signature"


class Cluster(str, Enum):
    LODGE       = "lodge"
    TOWN_CENTER = "town_center"
    WINE_REGION = "wine_region"
    COASTAL     = "coastal"


class TimeSlot(str, Enum):
    MORNING   = "morning"
    LUNCH     = "lunch"
    AFTERNOON = "afternoon"
    EVENING   = "evening"


class SlotType(str, Enum):
    """Positions in a day, in the order the planner fills them."""
    MORNING   = "morning"
    SIGNATURE = "signature"
    MAIN      = "main"
    LUNCH     = "lunch"
    EVENING   = "evening"


class PriceTier(str, Enum):
    FREE      = "Free"
    BUDGET    = "$"
    MODERATE  = "$$"
    EXPENSIVE = "$$$"


class TravelStyle(str, Enum):
    STAY_LOCAL = "stay_local"
    RELAXED    = "relaxed"
    MODERATE   = "moderate"
    DAY_TRIP   = "day_trip"


class Hours(BaseModel):
    model_config = ConfigDict(frozen=True)

    open:             int = Field(ge=0, le=23)
    close:            int = Field(ge=0, le=23)
    time_appropriate: List[TimeSlot] = []

    def is_open_at(self, hour: int) -> bool:
        """Half-open [open, close) check against a wall-clock hour."""
        return self.open <= hour < self.close


class Business(BaseModel):
    model_config = ConfigDict(frozen=True)

    name:             str
    type:             str
    description:      str
    rating:           float = Field(ge=0.0, le=5.0)
    price_range:      PriceTier
    category:         Category
    cluster:          Optional[Cluster] = None
    local_insight:    str = ""
    drive_time:       str = ""
    hours:            Optional[Hours] = None
    # Only set on records injected from a signature experience
    signature_id:     Optional[str] = None
    duration:         Optional[str] = None
    location:         Optional[str] = None
    booking_required: bool = False

    def serves(self, slot: TimeSlot) -> bool:
        if self.hours is None:
            return True
        return slot in self.hours.time_appropriate


class SignatureExperience(BaseModel):
    model_config = ConfigDict(frozen=True)

    id:               str
    name:             str
    description:      str
    duration:         str
    price_range:      PriceTier
    location:         str
    distance:         str
    booking_required: bool = True


class Preferences(BaseModel):
    guest_name:           str = ""
    interests:            List[Category] = Field(min_length=1)
    travel_style:         TravelStyle = TravelStyle.MODERATE
    trip_duration:        int = Field(default=3, ge=1, le=MAX_TRIP_DAYS)
    group_size:           int = Field(default=2, ge=1)
    signature_experience: Optional[str] = None
    start_date:           Optional[Date] = None

    @field_validator("interests")
    @classmethod
    def _dedupe_interests(cls, value: List[Category]) -> List[Category]:
        seen = []
        for interest in value:
            if interest not in seen:
                seen.append(interest)
        return seen

    @field_validator("signature_experience")
    @classmethod
    def _blank_signature(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ScheduledActivity(BaseModel):
    time:     str
    activity: Business
    type:     SlotType


class DayPlan(BaseModel):
    day:           int
    date:          Date
    date_label:    str
    cluster_focus: Cluster
    cluster_label: str
    activities:    List[ScheduledActivity] = []


class Itinerary(BaseModel):
    guest_name:   str = ""
    travel_style: TravelStyle
    days:         List[DayPlan] = []

    def business_names(self) -> List[str]:
        return [a.activity.name for d in self.days for a in d.activities]


class SwapRequest(BaseModel):
    day_index:      int = Field(ge=0)
    activity_index: int = Field(ge=0)
    business_name:  str


class PlanResponse(BaseModel):
    session_id: str
    itinerary:  Itinerary
