from pydantic import BaseModel, Field
from typing import Optional


class Token(BaseModel):
    access_token: str
    token_type: str


class UserLogin(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: int
    username: str
    steam_identifier: Optional[str] = None

    class Config:
        from_attributes = True


class WarningCreate(BaseModel):
    message: str = Field(..., min_length=1)
    warning_type: str = "warning"


class BanCreate(BaseModel):
    reason: Optional[str] = None
    expire: Optional[int] = Field(None, gt=0)  # seconds, omitted = permanent
