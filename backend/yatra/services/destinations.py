"""
Destination catalogue queries.

Airports are kept in the destinations table as flight endpoints; the public
listing leaves them out so the homepage only shows places people travel to.
"""

from sqlalchemy import not_, or_
from sqlalchemy.orm import Session

from yatra.models import Destination
from yatra.services.search import contains_pattern


class DestinationService:

    @staticmethod
    def list_popular(db: Session) -> list[Destination]:
        return (
            db.query(Destination)
            .filter(not_(Destination.name.like("%Airport%")))
            .order_by(Destination.popularity_score.desc())
            .all()
        )

    @staticmethod
    def search(db: Session, term: str) -> list[Destination]:
        pattern = contains_pattern(term)
        return (
            db.query(Destination)
            .filter(
                or_(
                    Destination.name.ilike(pattern, escape="\\"),
                    Destination.city.ilike(pattern, escape="\\"),
                    Destination.state.ilike(pattern, escape="\\"),
                )
            )
            .order_by(Destination.popularity_score.desc())
            .all()
        )
