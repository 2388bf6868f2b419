# app/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from app.config import settings

def _build_engine():
    """DATABASE_URL이 없으면 엔진 없이 동작 (STORAGE_OPTIONAL 모드)"""
    if not settings.storage_enabled:
        return None

    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        # FastAPI 스레드풀에서 같은 커넥션 사용
        connect_args["check_same_thread"] = False

    return create_engine(
        settings.database_url,
        echo=settings.debug,  # SQL 쿼리 로그 출력
        connect_args=connect_args
    )

# 데이터베이스 엔진 생성
engine = _build_engine()

# 세션 팩토리
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()

# DB 세션 의존성 (FastAPI에서 사용)
def get_db():
    """DB 세션 생성 및 종료 (DB 미설정 시 None)"""
    if engine is None:
        yield None
        return

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """모든 테이블 생성 (AUTO_INIT_DB)"""
    if engine is None:
        return

    # 모델 등록
    from app.models import player, vote, device_fingerprint, player_milestone, user  # noqa: F401
    Base.metadata.create_all(bind=engine)
