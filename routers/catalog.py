from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from config import CLUSTER_LABELS, TRAVEL_STYLES
from data.catalog import BUSINESSES, INTERESTS, SIGNATURE_EXPERIENCES, get_business
from models.schemas import Category, Cluster

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/interests")
def list_interests():
    return [{"id": iid, "label": label} for iid, label in INTERESTS.items()]


@router.get("/travel-styles")
def list_travel_styles():
    """Travel styles with the clusters each one can reach."""
    return [
        {
            "value":       value,
            "label":       style["label"],
            "description": style["description"],
            "clusters":    style["clusters"],
            "areas":       [CLUSTER_LABELS[c] for c in style["clusters"]]
        }
        for value, style in TRAVEL_STYLES.items()
    ]


@router.get("/signature-experiences")
def list_signature_experiences():
    return SIGNATURE_EXPERIENCES


@router.get("/businesses")
def list_businesses(
    cluster:  Optional[Cluster]  = None,
    category: Optional[Category] = None,
    open_at:  Optional[int]      = Query(None, ge=0, le=23, description="Only businesses open at this hour")
):
    """
    Browse the catalog. `open_at` is a display helper; businesses
    without posted hours are always included.
    """
    results = []
    for b in BUSINESSES:
        if cluster and b.cluster != cluster:
            continue
        if category and b.category != category:
            continue
        if open_at is not None and b.hours and not b.hours.is_open_at(open_at):
            continue
        results.append(b)
    return results


@router.get("/businesses/{name}")
def get_business_detail(name: str):
    business = get_business(name)
    if business is None:
        raise HTTPException(status_code=404, detail=f"Business '{name}' not found")
    return business
