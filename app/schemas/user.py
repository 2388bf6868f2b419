# app/schemas/user.py
from pydantic import BaseModel, EmailStr
from datetime import datetime
from app.models.user import UserRole

class UserLogin(BaseModel):
    """로그인 요청"""
    email: EmailStr
    password: str

class UserResponse(BaseModel):
    """유저 응답"""
    id: int
    open_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None
    role: UserRole
    created_at: datetime | None = None
    
    class Config:
        from_attributes = True

class Token(BaseModel):
    """JWT 토큰 응답"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
