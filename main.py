# main.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.api.routes import auth, voting, admin
from app.core.exceptions import VotingAppError
from app.core.logging_middleware import log_requests
from app.core.logger import logger
from app.database import init_db

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug
)

# ===== 로깅 미들웨어 추가 (가장 먼저) =====
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    return await log_requests(request, call_next)
# ==========================================

# ===== 에러 응답 (code + detail) =====
@app.exception_handler(VotingAppError)
async def voting_app_error_handler(request: Request, exc: VotingAppError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "detail": exc.message}
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"code": "BAD_REQUEST", "detail": jsonable_encoder(exc.errors())}
    )
# ====================================

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(auth.router)
app.include_router(voting.router)
app.include_router(admin.router)

# ===== 시작 로그 추가 =====
@app.on_event("startup")
async def startup_event():
    if not settings.storage_enabled:
        logger.warning("DATABASE_URL 미설정: 저장소 비활성화 모드 (쓰기는 모두 버려집니다)")
    elif settings.auto_init_db:
        init_db()
        logger.info("DB 테이블 초기화 완료")
    logger.info("Hoopers Vibes API 서버 시작")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Hoopers Vibes API 서버 종료")
# ==========================

@app.get("/health")
def health_check():
    """헬스체크"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "storage": "enabled" if settings.storage_enabled else "disabled"
    }
