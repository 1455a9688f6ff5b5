from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import Optional

from database.connection import get_db
from database.models.user import User
from database.models.players.character import Character
from app.helpers.pagination import PER_PAGE, get_page_urls
from app.resources import character_resource, extended_character_resource
from routes.auth import get_current_user

router = APIRouter(prefix="/api/characters", tags=["Characters"])


@router.get("/")
def list_characters(
    request: Request,
    page: int = Query(1, ge=1),
    name: Optional[str] = None,
    steam: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    query = db.query(Character)

    if name:
        query = query.filter(or_(
            Character.first_name.ilike(f"%{name}%"),
            Character.last_name.ilike(f"%{name}%"),
        ))

    if steam:
        query = query.filter(Character.steam_identifier == steam)

    characters = query.order_by(Character.character_id.desc()) \
                      .offset((page - 1) * PER_PAGE) \
                      .limit(PER_PAGE) \
                      .all()

    return {
        "characters": [character_resource(c) for c in characters],
        "filters": {"name": name, "steam": steam},
        "links": get_page_urls(request, page),
        "page": page,
    }


@router.get("/{character_id}")
def get_character(character_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    character = db.query(Character).filter(Character.character_id == character_id).first()
    if not character:
        raise HTTPException(status_code=404, detail="Character not found")
    return extended_character_resource(character, db)
