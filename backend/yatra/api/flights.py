from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from yatra.database import get_db
from yatra.models import Flight
from yatra.schemas import FlightResponse, FlightSearch, FlightSearchResult
from yatra.services.search import SearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search", response_model=List[FlightSearchResult])
async def search_flights(
    search: FlightSearch,
    db: Session = Depends(get_db),
):
    try:
        return SearchService(db).search_flights(search)
    except Exception:
        logger.exception("Error searching flights")
        raise HTTPException(status_code=500, detail="Failed to search flights")


@router.get("/{flight_id}", response_model=FlightResponse)
async def get_flight(
    flight_id: str,
    db: Session = Depends(get_db),
):
    try:
        flight = db.query(Flight).filter(Flight.id == flight_id).first()
    except Exception:
        logger.exception(f"Error fetching flight {flight_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch flight")
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight
