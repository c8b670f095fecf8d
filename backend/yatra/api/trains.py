from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from yatra.database import get_db
from yatra.models import Train
from yatra.schemas import TrainResponse, TrainSearch, TrainSearchResult
from yatra.services.search import SearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search", response_model=List[TrainSearchResult])
async def search_trains(
    search: TrainSearch,
    db: Session = Depends(get_db),
):
    try:
        return SearchService(db).search_trains(search)
    except Exception:
        logger.exception("Error searching trains")
        raise HTTPException(status_code=500, detail="Failed to search trains")


@router.get("/{train_id}", response_model=TrainResponse)
async def get_train(
    train_id: str,
    db: Session = Depends(get_db),
):
    try:
        train = db.query(Train).filter(Train.id == train_id).first()
    except Exception:
        logger.exception(f"Error fetching train {train_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch train")
    if not train:
        raise HTTPException(status_code=404, detail="Train not found")
    return train
