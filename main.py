import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LODGE_NAME, LOG_LEVEL
from routers import catalog, planner

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title=f"{LODGE_NAME} Itinerary Builder",
    description="Deterministic multi-day itineraries from a curated catalog of local businesses",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"]
)

app.include_router(catalog.router)
app.include_router(planner.router)


@app.get("/")
def root():
    return {
        "status":  "ok",
        "message": f"{LODGE_NAME} Itinerary Builder is running",
        "docs":    "/docs"
    }
