# app/models/device_fingerprint.py
from sqlalchemy import Column, String, Integer, Boolean, DateTime
from sqlalchemy.sql import func
from app.database import Base

class DeviceFingerprint(Base):
    """기기 지문 모델 (기기당 1표)"""
    __tablename__ = "device_fingerprints"
    
    # 기본 필드
    id = Column(Integer, primary_key=True, autoincrement=True)
    fingerprint = Column(String(255), unique=True, nullable=False)  # 중복 투표 방지
    
    # 투표 상태
    has_voted = Column(Boolean, nullable=False, default=False)
    last_vote_at = Column(DateTime(timezone=True), nullable=True)
    
    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<DeviceFingerprint {self.fingerprint[:12]} voted={self.has_voted}>"
