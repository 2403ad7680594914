# Session Store — one isolated planning context per guest
# Each session owns its itinerary and used-set; they are only ever
# replaced together. In-memory only, nothing survives a restart.

import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

from config import MAX_SESSIONS
from data.catalog import get_business
from models.schemas import Itinerary, Preferences
from services.errors import BusinessNotFoundError, InvalidSwapError, SessionNotFoundError
from services.planner import assemble_itinerary
from services.swap_service import alternatives_for, swap_activity

logger = logging.getLogger(__name__)


@dataclass
class PlanningSession:
    session_id:  str
    preferences: Preferences
    itinerary:   Optional[Itinerary] = None
    used:        Set[str] = field(default_factory=set)
    # held from reading itinerary/used through committing both
    lock:        threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def generate(self) -> Itinerary:
        """Fresh used-set on every generation."""
        with self.lock:
            used      = set()
            itinerary = assemble_itinerary(self.preferences, used)
            self.itinerary, self.used = itinerary, used
        return itinerary

    def alternatives(self, day_index: int, activity_index: int):
        with self.lock:
            if self.itinerary is None:
                raise InvalidSwapError("No itinerary has been generated yet")
            return alternatives_for(self.itinerary, day_index, activity_index, self.used)

    def swap(self, day_index: int, activity_index: int, business_name: str) -> Itinerary:
        chosen = get_business(business_name)
        if chosen is None:
            raise BusinessNotFoundError(business_name)
        with self.lock:
            if self.itinerary is None:
                raise InvalidSwapError("No itinerary has been generated yet")
            itinerary, used = swap_activity(self.itinerary, day_index, activity_index, chosen, self.used)
            self.itinerary, self.used = itinerary, used
        return itinerary

    def snapshot(self) -> Tuple[Optional[Itinerary], Set[str]]:
        with self.lock:
            return self.itinerary, set(self.used)


class SessionStore:
    def __init__(self, max_sessions: int = MAX_SESSIONS):
        self._sessions: "OrderedDict[str, PlanningSession]" = OrderedDict()
        self._lock = threading.Lock()
        self._max  = max_sessions

    def create(self, preferences: Preferences) -> PlanningSession:
        session = PlanningSession(session_id=str(uuid.uuid4()), preferences=preferences)
        session.generate()
        with self._lock:
            self._sessions[session.session_id] = session
            while len(self._sessions) > self._max:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info(f"Evicted session {evicted}")
        logger.info(f"Created session {session.session_id}")
        return session

    def get(self, session_id: str) -> PlanningSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def drop(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(session_id)
        logger.info(f"Dropped session {session_id}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


store = SessionStore()
