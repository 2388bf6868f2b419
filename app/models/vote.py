# app/models/vote.py
from sqlalchemy import Column, String, Integer, DateTime, Text
from sqlalchemy.sql import func
from app.database import Base

class Vote(Base):
    """투표 모델"""
    __tablename__ = "votes"
    
    # 기본 필드
    id = Column(Integer, primary_key=True, autoincrement=True)
    player_id = Column(Integer, nullable=False, index=True)  # FK 없음 (서비스에서 존재 확인)
    
    # 투표자 정보
    device_fingerprint = Column(String(255), nullable=False)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    
    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    def __repr__(self):
        return f"<Vote {self.id} for Player {self.player_id}>"
