from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from yatra.database import get_db
from yatra.models import Bus
from yatra.schemas import BusResponse, BusSearch, BusSearchResult
from yatra.services.search import SearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search", response_model=List[BusSearchResult])
async def search_buses(
    search: BusSearch,
    db: Session = Depends(get_db),
):
    try:
        return SearchService(db).search_buses(search)
    except Exception:
        logger.exception("Error searching buses")
        raise HTTPException(status_code=500, detail="Failed to search buses")


@router.get("/{bus_id}", response_model=BusResponse)
async def get_bus(
    bus_id: str,
    db: Session = Depends(get_db),
):
    try:
        bus = db.query(Bus).filter(Bus.id == bus_id).first()
    except Exception:
        logger.exception(f"Error fetching bus {bus_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch bus")
    if not bus:
        raise HTTPException(status_code=404, detail="Bus not found")
    return bus
