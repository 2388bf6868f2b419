# app/config.py
from pydantic_settings import BaseSettings
from pydantic import field_validator, model_validator

class Settings(BaseSettings):
    """환경변수 설정"""

    # API 기본 설정
    app_name: str = "Hoopers Vibes API"
    debug: bool = False

    # 로깅
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = True
    log_retention_days: int = 14
    audit_retention_days: int = 90

    # Database
    database_url: str = ""
    storage_optional: bool = False  # true면 DB 없이 빈 결과로 동작 (로컬 개발용)
    auto_init_db: bool = False  # 시작 시 테이블 생성

    # JWT
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # 관리자
    owner_open_id: str = ""

    # 알림 (운영자 알림 채널)
    notification_url: str = ""
    notification_api_key: str = ""
    notification_timeout_seconds: float = 5.0

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    @field_validator('secret_key')
    def validate_secret_key(cls, v):
        if len(v) < 32:
            raise ValueError('SECRET_KEY는 최소 32자 이상이어야 합니다')
        return v

    @model_validator(mode='after')
    def validate_storage(self):
        if not self.database_url and not self.storage_optional:
            raise ValueError('DATABASE_URL이 없습니다. DB 없이 실행하려면 STORAGE_OPTIONAL=true 설정')
        return self

    @property
    def storage_enabled(self) -> bool:
        return bool(self.database_url)

    class Config:
        env_file = ".env"
        case_sensitive = False

# 싱글톤 인스턴스
settings = Settings()
