# app/schemas/vote.py
from pydantic import BaseModel, Field
from datetime import datetime

class VoteCreate(BaseModel):
    """투표 요청"""
    player_id: int = Field(..., gt=0)
    fingerprint: str = Field(..., min_length=1, max_length=255)

class CheckVotedResponse(BaseModel):
    """투표 여부 응답"""
    has_voted: bool

class FingerprintResponse(BaseModel):
    """서버에서 계산한 기기 지문"""
    fingerprint: str

class VoteResponse(BaseModel):
    """투표 기록 (관리자용)"""
    id: int
    player_id: int
    device_fingerprint: str
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime | None = None
    
    class Config:
        from_attributes = True

class ActionResponse(BaseModel):
    """변경 작업 결과"""
    success: bool
    message: str
