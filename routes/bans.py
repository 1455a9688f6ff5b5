from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from database.connection import get_db
from database.models.user import User
from database.models.moderation.ban import Ban
from app.helpers import cache
from app.helpers.pagination import PER_PAGE, get_page_urls
from app.resources import ban_resource
from routes.auth import get_current_user

router = APIRouter(prefix="/api/bans", tags=["Bans"])


@router.get("/")
def list_bans(
    request: Request,
    page: int = Query(1, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    bans = db.query(Ban) \
             .order_by(Ban.timestamp.desc()) \
             .offset((page - 1) * PER_PAGE) \
             .limit(PER_PAGE) \
             .all()

    items = [ban_resource(b) for b in bans]
    player_map = cache.load_steam_player_name_map(db, [b["identifier"] for b in items])

    return {
        "bans": items,
        "playerMap": player_map or {"empty": "empty"},
        "links": get_page_urls(request, page),
        "page": page,
    }
