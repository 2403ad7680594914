from fastapi import APIRouter, HTTPException

from models.schemas import PlanResponse, Preferences, SwapRequest
from services.errors import (
    BusinessNotFoundError, InvalidPreferencesError, InvalidSwapError, SessionNotFoundError
)
from services.session_store import store

router = APIRouter(prefix="/plan", tags=["planner"])


def _session(session_id: str):
    try:
        return store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/generate", response_model=PlanResponse)
def generate(prefs: Preferences):
    """
    Generate a multi-day itinerary and open a planning session for it.
    Use the returned session_id for alternatives and swaps.
    """
    try:
        session = store.create(prefs)
    except InvalidPreferencesError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PlanResponse(session_id=session.session_id, itinerary=session.itinerary)


@router.get("/{session_id}", response_model=PlanResponse)
def get_plan(session_id: str):
    session      = _session(session_id)
    itinerary, _ = session.snapshot()
    return PlanResponse(session_id=session.session_id, itinerary=itinerary)


@router.post("/{session_id}/regenerate", response_model=PlanResponse)
def regenerate(session_id: str):
    """Start over from the stored preferences; earlier swaps are discarded."""
    session   = _session(session_id)
    itinerary = session.generate()
    return PlanResponse(session_id=session.session_id, itinerary=itinerary)


@router.get("/{session_id}/days/{day_index}/activities/{activity_index}/alternatives")
def alternatives(session_id: str, day_index: int, activity_index: int):
    session = _session(session_id)
    try:
        return session.alternatives(day_index, activity_index)
    except InvalidSwapError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{session_id}/swap", response_model=PlanResponse)
def swap(session_id: str, req: SwapRequest):
    session = _session(session_id)
    try:
        itinerary = session.swap(req.day_index, req.activity_index, req.business_name)
    except BusinessNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidSwapError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return PlanResponse(session_id=session.session_id, itinerary=itinerary)


@router.delete("/{session_id}", status_code=204)
def delete_plan(session_id: str):
    try:
        store.drop(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
