# app/schemas/player.py
from pydantic import BaseModel, Field
from datetime import datetime

class PlayerCreate(BaseModel):
    """선수 추가 요청"""
    name: str = Field(..., min_length=1, max_length=255)
    team: str = Field(..., min_length=1, max_length=255)
    image_url: str | None = None
    position: str | None = Field(None, max_length=100)
    number: int | None = None

class PlayerActiveUpdate(BaseModel):
    """선수 활성/비활성 변경 요청"""
    is_active: bool

class PlayerResponse(BaseModel):
    """선수 응답"""
    id: int
    name: str
    team: str
    image_url: str | None = None
    position: str | None = None
    number: int | None = None
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    
    class Config:
        from_attributes = True

class PlayerResult(PlayerResponse):
    """득표수/비율 포함 선수"""
    vote_count: int
    percentage: int

class ResultsResponse(BaseModel):
    """투표 결과 응답"""
    players: list[PlayerResult]
    total_votes: int
