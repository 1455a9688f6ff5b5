from sqlalchemy.orm import Session
from database.models.user import User
from app.services.auth_service import verify_password, create_access_token
import logging

logger = logging.getLogger(__name__)


class AuthController:
    def login(self, db: Session, username: str, password: str):
        if not username or not password:
            return None

        username = username.strip()
        user = self.get_user_by_username(db, username)

        if user is None:
            logger.info(f"Login attempt for unknown user {username!r}")
            return None

        if not verify_password(password, user.hashed_password):
            logger.info(f"Password verification failed for user {username!r}")
            return None

        return create_access_token(data={"sub": user.username})

    def get_user_by_username(self, db: Session, username: str):
        return db.query(User).filter(User.username == username).first()
