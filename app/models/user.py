# app/models/user.py
from sqlalchemy import Column, String, Integer, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from app.database import Base
import enum

class UserRole(str, enum.Enum):
    """유저 권한"""
    USER = "user"
    ADMIN = "admin"

class User(Base):
    """유저 모델 (관리자 인증용)"""
    __tablename__ = "users"
    
    # 기본 필드
    id = Column(Integer, primary_key=True, autoincrement=True)
    open_id = Column(String(64), unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    email = Column(String(320), unique=True, index=True, nullable=True)
    
    # 로그인 정보
    login_method = Column(String(64), nullable=True)  # password 등
    hashed_password = Column(String, nullable=True)
    role = Column(SQLEnum(UserRole, values_callable=lambda e: [r.value for r in e]), nullable=False, default=UserRole.USER)
    
    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    last_signed_in = Column(DateTime(timezone=True), server_default=func.now())
    
    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
    
    def __repr__(self):
        return f"<User {self.open_id} ({self.role})>"
