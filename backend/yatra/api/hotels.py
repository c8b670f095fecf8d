from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from yatra.database import get_db
from yatra.models import Hotel
from yatra.schemas import HotelResponse, HotelSearch, HotelSearchResult
from yatra.services.search import SearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search", response_model=List[HotelSearchResult])
async def search_hotels(
    search: HotelSearch,
    db: Session = Depends(get_db),
):
    try:
        return SearchService(db).search_hotels(search)
    except Exception:
        logger.exception("Error searching hotels")
        raise HTTPException(status_code=500, detail="Failed to search hotels")


@router.get("/{hotel_id}", response_model=HotelResponse)
async def get_hotel(
    hotel_id: str,
    db: Session = Depends(get_db),
):
    try:
        hotel = db.query(Hotel).filter(Hotel.id == hotel_id).first()
    except Exception:
        logger.exception(f"Error fetching hotel {hotel_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch hotel")
    if not hotel:
        raise HTTPException(status_code=404, detail="Hotel not found")
    return hotel
