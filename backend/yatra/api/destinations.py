from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from yatra.database import get_db
from yatra.schemas import DestinationResponse
from yatra.services.destinations import DestinationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[DestinationResponse])
async def list_destinations(db: Session = Depends(get_db)):
    try:
        return DestinationService.list_popular(db)
    except Exception:
        logger.exception("Error fetching destinations")
        raise HTTPException(status_code=500, detail="Failed to fetch destinations")


@router.get("/search", response_model=List[DestinationResponse])
async def search_destinations(
    q: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Query parameter 'q' is required")

    try:
        return DestinationService.search(db, q)
    except Exception:
        logger.exception(f"Error searching destinations for {q!r}")
        raise HTTPException(status_code=500, detail="Failed to search destinations")
