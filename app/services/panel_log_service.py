from sqlalchemy.orm import Session
from database.models.base import utcnow
from database.models.panel_log import PanelLog
from database.models.user import User
import logging

logger = logging.getLogger(__name__)


class PanelLogService:
    @staticmethod
    def log_action(db: Session, user: User, target_identifier: str, action: str, log: str = None):
        """
        Records a staff action taken through the panel.

        Args:
            db (Session): Database session
            user (User): The panel user performing the action (None for system actions)
            target_identifier (str): Steam identifier of the affected player
            action (str): Short description of the action (e.g., "Issued Warning")
            log (str, optional): Human readable description of the change
        """
        try:
            if user is None:
                source = "SYSTEM"
            else:
                source = user.steam_identifier or user.username

            entry = PanelLog(
                source_identifier=source,
                target_identifier=target_identifier,
                action=action,
                log=log,
                timestamp=utcnow()
            )
            db.add(entry)
            db.commit()
            db.refresh(entry)
            return entry
        except Exception as e:
            logger.error(f"Failed to write panel log: {e}")
            db.rollback()
            return None
