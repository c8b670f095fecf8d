from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from yatra.database import get_db
from yatra.models import TravelGuideArticle
from yatra.schemas import ArticleResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ArticleResponse])
async def list_articles(db: Session = Depends(get_db)):
    try:
        return (
            db.query(TravelGuideArticle)
            .filter(TravelGuideArticle.published == True)
            .order_by(TravelGuideArticle.published_at.desc())
            .all()
        )
    except Exception:
        logger.exception("Error fetching articles")
        raise HTTPException(status_code=500, detail="Failed to fetch articles")


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(slug: str, db: Session = Depends(get_db)):
    try:
        # Drafts are invisible until published
        article = db.query(TravelGuideArticle).filter(
            TravelGuideArticle.slug == slug,
            TravelGuideArticle.published == True,
        ).first()
    except Exception:
        logger.exception(f"Error fetching article {slug}")
        raise HTTPException(status_code=500, detail="Failed to fetch article")
    if not article:
        raise HTTPException(status_code=404, detail="Article not found")
    return article
