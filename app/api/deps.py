# app/api/deps.py
from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from app.database import get_db
from app.models.user import User
from app.core.security import decode_access_token
from app.core.exceptions import ForbiddenError, InternalError, UnauthorizedError
from app.services.vote_store import VoteStore, DisabledVoteStore
from app.services import user_service

# JWT Bearer 토큰 스킴 (토큰 없으면 직접 401 처리)
security = HTTPBearer(auto_error=False)

def get_vote_store(db: Session | None = Depends(get_db)):
    """투표 저장소 (DB 미설정 시 비활성 저장소)"""
    if db is None:
        return DisabledVoteStore()
    return VoteStore(db)

def get_current_user(
    token: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session | None = Depends(get_db)
) -> User:
    """JWT 토큰으로 현재 유저 가져오기"""
    if token is None:
        raise UnauthorizedError("로그인이 필요합니다")

    if db is None:
        raise InternalError("저장소가 비활성화되어 인증할 수 없습니다")

    # 토큰 디코드
    payload = decode_access_token(token.credentials)
    if payload is None:
        raise UnauthorizedError()

    open_id = payload.get("sub")
    if open_id is None:
        raise UnauthorizedError()

    # DB에서 유저 조회
    user = user_service.get_user_by_open_id(db, open_id)
    if user is None:
        raise UnauthorizedError()

    return user

def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """관리자 권한 확인 (서버에서 role 검사)"""
    if not current_user.is_admin:
        raise ForbiddenError()
    return current_user

def check_admin_request(request: Request) -> User:
    """
    의존성 주입 없이 요청 헤더로 관리자 확인
    (요청 본문 검증이 의존성보다 먼저 실패한 경우)
    """
    token = None
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        token = HTTPAuthorizationCredentials(scheme=scheme, credentials=credentials)

    # 테스트 등에서 get_db가 교체된 경우도 따름
    provider = request.app.dependency_overrides.get(get_db, get_db)
    db_gen = provider()
    try:
        db = next(db_gen)
        return get_current_admin(get_current_user(token, db))
    finally:
        db_gen.close()

class AdminRoute(APIRoute):
    """본문 검증 오류보다 관리자 권한 오류(401/403)를 먼저 응답"""

    def get_route_handler(self):
        route_handler = super().get_route_handler()

        async def admin_route_handler(request: Request):
            try:
                return await route_handler(request)
            except RequestValidationError:
                await run_in_threadpool(check_admin_request, request)
                raise

        return admin_route_handler
