# app/api/routes/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.config import settings
from app.core.exceptions import InternalError, UnauthorizedError
from app.core.logger import logger
from app.core.security import create_access_token
from app.database import get_db
from app.models.user import User
from app.schemas.user import UserLogin, UserResponse, Token
from app.services import user_service

router = APIRouter(prefix="/api/v1/auth", tags=["인증"])

@router.post("/login", response_model=Token)
def login(user_data: UserLogin, db: Session | None = Depends(get_db)):
    """로그인"""
    if db is None:
        raise InternalError("저장소가 비활성화되어 로그인할 수 없습니다")

    user = user_service.authenticate(db, user_data.email, user_data.password)
    if not user:
        logger.warning(f"로그인 실패: {user_data.email}")
        raise UnauthorizedError("이메일 또는 비밀번호가 올바르지 않습니다")

    # JWT 토큰 생성
    access_token = create_access_token(data={"sub": user.open_id, "role": user.role.value})

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": settings.access_token_expire_minutes * 60
    }

@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    """현재 유저 정보"""
    return current_user
