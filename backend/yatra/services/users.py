from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from yatra.models import User

logger = logging.getLogger(__name__)

# Identity-provider claim -> User column
CLAIM_FIELDS = {
    "email": "email",
    "first_name": "first_name",
    "last_name": "last_name",
    "profile_image_url": "profile_image_url",
    "phone": "phone",
}


class UserService:

    @staticmethod
    def get_user(db: Session, user_id: str) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def upsert_from_claims(db: Session, claims: dict) -> User:
        """Create or refresh the local copy of the account described by verified token claims."""
        user_id = claims["sub"]
        values = {column: claims[claim] for claim, column in CLAIM_FIELDS.items() if claims.get(claim)}

        user = UserService.get_user(db, user_id)
        if user is None:
            user = User(id=user_id, **values)
            db.add(user)
            logger.info(f"Registered user {user_id}")
        else:
            changed = {k: v for k, v in values.items() if getattr(user, k) != v}
            if not changed:
                return user
            for field, value in changed.items():
                setattr(user, field, value)

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ValueError(f"Email {values.get('email')} already belongs to another account")
        db.refresh(user)
        return user
